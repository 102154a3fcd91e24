"""DI provider for account infrastructure."""

from dishka import alias, from_context, provide

from vcsauth.config import Config
from vcsauth.domain.account.port.directory import AccountDirectory
from vcsauth.infrastructure.account.directory import InMemoryAccountDirectory
from vcsauth.util.di.base import Provider
from vcsauth.util.di.scope import Scope


class AccountInfraProvider(Provider):
    """DI provider for the account directory adapter."""

    config = from_context(provides=Config, scope=Scope.APP)
    directory_port = alias(source=InMemoryAccountDirectory, provides=AccountDirectory)

    @provide(scope=Scope.APP)
    def get_account_directory(self, config: Config) -> InMemoryAccountDirectory:
        """Directory seeded from the `accounts` config section."""
        return InMemoryAccountDirectory.from_config(config.accounts)
