"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from persona.config import (
    DocsSettings,
    PaginationSettings,
    Settings,
    VotingSettings,
)
from persona.util.di.base import ProviderBase
from persona.util.error import ConfigurationError

DEFAULT_DOCS_PASSWORD = "CHANGE_ME_IN_PRODUCTION"


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_voting_settings(self, settings: Settings) -> VotingSettings:
        """Provide vote validation settings."""
        return settings.voting

    @provide(scope=Scope.APP)
    def provide_pagination_settings(self, settings: Settings) -> PaginationSettings:
        """Provide page size limits."""
        return settings.pagination

    @provide(scope=Scope.APP)
    def provide_docs_settings(self, settings: Settings) -> DocsSettings:
        """Provide docs protection settings.

        Raises:
            ConfigurationError: If production still uses the default docs password
        """
        if (
            settings.environment == "production"
            and settings.docs.password == DEFAULT_DOCS_PASSWORD
        ):
            raise ConfigurationError("DOCS__PASSWORD must be set in production")
        return settings.docs
