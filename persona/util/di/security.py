"""Security DI providers (non-mockable)."""

from dishka import Scope, provide

from persona.config import DocsSettings
from persona.interface.api.security import DocsAccessGuard
from persona.util.di.base import ProviderBase
from persona.util.ttl_store import FailedAttemptTracker, KeyedTTLStore


class ProdSecurityProvider(ProviderBase):
    """Docs access protection.

    Everything here is APP-scoped: failure counters must outlive a single
    request to lock a client out.
    """

    scope = Scope.APP

    @provide
    def get_failed_attempt_store(self, docs_settings: DocsSettings) -> KeyedTTLStore[int]:
        """Provide failure counters that expire after the lockout window."""
        return KeyedTTLStore(ttl_seconds=docs_settings.lockout_seconds)

    @provide
    def get_failed_attempt_tracker(
        self, store: KeyedTTLStore[int], docs_settings: DocsSettings
    ) -> FailedAttemptTracker:
        return FailedAttemptTracker(store=store, max_attempts=docs_settings.max_attempts)

    @provide
    def get_docs_access_guard(
        self, tracker: FailedAttemptTracker, docs_settings: DocsSettings
    ) -> DocsAccessGuard:
        """Provide the basic-auth guard for API documentation."""
        return DocsAccessGuard(tracker=tracker, docs_settings=docs_settings)
