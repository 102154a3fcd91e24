"""Account directory port for the account domain."""

from abc import abstractmethod
from typing import Protocol

from vcsauth.domain.account.model.account import Account
from vcsauth.domain.account.model.value import WorkspaceId
from vcsauth.domain.shared.port import Port


class AccountDirectory(Port, Protocol):
    """Registry of known accounts and per-workspace default accounts.

    Enumeration and default lookup are expected to succeed; failures here are
    not part of the credential resolution contract.
    """

    @abstractmethod
    async def list_accounts(self) -> set[Account]:
        """Get all registered accounts."""
        ...

    @abstractmethod
    async def get_default_account(self, workspace: WorkspaceId) -> Account | None:
        """Get the account preferred for a workspace, if one is set."""
        ...

    @abstractmethod
    async def get_token(self, account: Account) -> str:
        """Get the secret token stored for an account.

        Raises:
            NotFoundError: If the account is not registered
        """
        ...
