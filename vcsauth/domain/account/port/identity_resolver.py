"""Identity resolver port for the account domain."""

from abc import abstractmethod
from dataclasses import dataclass
from typing import Protocol

from vcsauth.domain.account.model.account import Account
from vcsauth.domain.shared.error import VcsAuthError
from vcsauth.domain.shared.port import Port


@dataclass(frozen=True)
class UsernameLookup:
    """Outcome of resolving an account's current username.

    Exactly one of `username` / `error` is set.
    """

    username: str | None = None
    error: VcsAuthError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @staticmethod
    def success(username: str) -> "UsernameLookup":
        return UsernameLookup(username=username)

    @staticmethod
    def failure(error: VcsAuthError) -> "UsernameLookup":
        return UsernameLookup(error=error)


class IdentityResolver(Port, Protocol):
    """Port mapping an account to the username it currently belongs to.

    Implementations are adapters in infrastructure/ (e.g., GitHubIdentityResolver).
    Network and I/O problems are reported as a failed UsernameLookup, not raised.
    """

    @abstractmethod
    async def get_username(self, account: Account) -> UsernameLookup:
        """Look up the username of an account.

        Args:
            account: The account to resolve

        Returns:
            UsernameLookup.success with the username, or UsernameLookup.failure
            carrying the error that prevented the lookup
        """
        ...
