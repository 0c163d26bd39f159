"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from stance.config import (
    AdminSettings,
    DiscussionSettings,
    IdentitySettings,
    Settings,
)
from stance.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings and their sections, loaded once per container."""

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_identity_settings(self, settings: Settings) -> IdentitySettings:
        return settings.identity

    @provide(scope=Scope.APP)
    def provide_discussion_settings(self, settings: Settings) -> DiscussionSettings:
        return settings.discussion

    @provide(scope=Scope.APP)
    def provide_admin_settings(self, settings: Settings) -> AdminSettings:
        return settings.admin
