"""Configuration and per-request plumbing. Always real, never mocked."""

from dishka import Scope, provide

from agora.config import AuthSettings, DatabaseSettings, Settings
from agora.persistence.database import RequestTransaction
from agora.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Exposes ``Settings`` and the sections services depend on directly.

    Tests change configuration through environment variables, not by
    swapping this provider.
    """

    scope = Scope.APP

    @provide
    def get_settings(self) -> Settings:
        return Settings()

    @provide
    def get_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def get_database_settings(self, settings: Settings) -> DatabaseSettings:
        return settings.database

    @provide(scope=Scope.REQUEST)
    def get_request_transaction(self) -> RequestTransaction:
        return RequestTransaction()
