"""In-memory AccountDirectory adapter."""

import logging

from vcsauth.config import AccountsConfig
from vcsauth.domain.account.model.account import Account
from vcsauth.domain.account.model.value import ServerPath, WorkspaceId
from vcsauth.domain.account.port.directory import AccountDirectory
from vcsauth.domain.shared.error import ConfigurationError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


class InMemoryAccountDirectory(AccountDirectory):
    """In-memory account directory.

    Holds accounts with their tokens and the default account of each
    workspace. Accounts are registered at startup from config or by account
    management code through add/remove.
    """

    def __init__(self) -> None:
        self._tokens: dict[Account, str] = {}
        self._defaults: dict[WorkspaceId, Account] = {}

    @classmethod
    def from_config(cls, config: AccountsConfig) -> "InMemoryAccountDirectory":
        """Build a directory from the `accounts` settings section."""
        directory = cls()
        by_name: dict[str, Account] = {}
        for entry in config.accounts:
            try:
                server = ServerPath.from_string(entry.server)
            except ValidationError as e:
                raise ConfigurationError(
                    f"Account {entry.name!r} has an invalid server: {e.message}"
                ) from e
            account = Account.create(name=entry.name, server=server)
            token = entry.resolve_token()
            if not token:
                logger.warning("Account %s has no token configured", account)
            directory.add(account, token)
            by_name[entry.name] = account

        for workspace, name in config.defaults.items():
            directory.set_default(WorkspaceId(workspace), by_name[name])
        return directory

    async def list_accounts(self) -> set[Account]:
        return set(self._tokens)

    async def get_default_account(self, workspace: WorkspaceId) -> Account | None:
        return self._defaults.get(workspace)

    async def get_token(self, account: Account) -> str:
        try:
            return self._tokens[account]
        except KeyError:
            raise NotFoundError(f"Account not registered: {account}") from None

    def add(self, account: Account, token: str) -> None:
        """Register an account, replacing the token if it is already known."""
        self._tokens[account] = token

    def update_token(self, account: Account, token: str) -> None:
        if account not in self._tokens:
            raise NotFoundError(f"Account not registered: {account}")
        self._tokens[account] = token

    def remove(self, account: Account) -> None:
        """Unregister an account and drop any default association pointing to it."""
        self._tokens.pop(account, None)
        for workspace in [w for w, a in self._defaults.items() if a == account]:
            del self._defaults[workspace]

    def set_default(self, workspace: WorkspaceId, account: Account | None) -> None:
        """Set (or clear, with None) the default account of a workspace.

        Raises:
            NotFoundError: If the account is not registered
        """
        if account is None:
            self._defaults.pop(workspace, None)
            return
        if account not in self._tokens:
            raise NotFoundError(f"Account not registered: {account}")
        self._defaults[workspace] = account
