"""Basic-auth protection for the API documentation."""

import secrets

import logfire
from fastapi import HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from persona.config import DocsSettings
from persona.util.ttl_store import FailedAttemptTracker

basic_auth = HTTPBasic(auto_error=False)


class DocsAccessGuard:
    """Checks docs credentials and locks out clients that keep failing.

    Failures are counted per client address. Once a client reaches the
    configured limit it gets 429 until the lockout window has passed since
    its last failure; a successful login clears its counter.
    """

    def __init__(
        self, tracker: FailedAttemptTracker, docs_settings: DocsSettings
    ) -> None:
        """Initialize docs access guard.

        Args:
            tracker: Failed attempt tracker shared across requests
            docs_settings: Expected credentials and realm
        """
        self.tracker = tracker
        self.docs_settings = docs_settings

    def authorize(self, client: str, credentials: HTTPBasicCredentials | None) -> None:
        """Admit the client or raise.

        Args:
            client: Client address used as the lockout key
            credentials: Parsed basic-auth credentials, if any were sent

        Raises:
            HTTPException: 429 while locked out, 401 on missing or bad credentials
        """
        retry_after = self.tracker.is_locked(client)
        if retry_after is not None:
            logfire.warn("Docs access while locked out", client=client)
            raise HTTPException(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                detail="Too many failed attempts. Try again later.",
                headers={"Retry-After": str(max(int(retry_after), 1))},
            )

        if credentials is None:
            raise self._challenge("Authentication required")

        if not self._matches(credentials):
            failures = self.tracker.record_failure(client)
            logfire.warn("Docs login failed", client=client, failures=failures)
            raise self._challenge("Invalid credentials")

        self.tracker.reset(client)

    def _matches(self, credentials: HTTPBasicCredentials) -> bool:
        # Compare both fields even when the first mismatches
        username_ok = secrets.compare_digest(
            credentials.username.encode("utf-8"),
            self.docs_settings.username.encode("utf-8"),
        )
        password_ok = secrets.compare_digest(
            credentials.password.encode("utf-8"),
            self.docs_settings.password.encode("utf-8"),
        )
        return username_ok and password_ok

    def _challenge(self, detail: str) -> HTTPException:
        return HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": f'Basic realm="{self.docs_settings.realm}"'},
        )
