"""DI provider for account domain."""

from dishka import provide

from vcsauth.domain.account.port.directory import AccountDirectory
from vcsauth.domain.account.port.identity_resolver import IdentityResolver
from vcsauth.domain.account.service.credential import CredentialResolver
from vcsauth.util.di.base import Provider
from vcsauth.util.di.scope import Scope


class AccountProvider(Provider):
    """DI provider for account domain services."""

    @provide(scope=Scope.REQUEST)
    def get_credential_resolver(
        self,
        directory: AccountDirectory,
        identity_resolver: IdentityResolver,
    ) -> CredentialResolver:
        """Provide CredentialResolver."""
        return CredentialResolver(_directory=directory, _identity_resolver=identity_resolver)
