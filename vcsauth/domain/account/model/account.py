"""Account entity for the account domain."""

from vcsauth.domain.account.model.value import AccountId, ServerPath
from vcsauth.domain.shared.model.entity import Entity


class Account(Entity):
    """A registered credential identity tied to one server.

    The secret token is not held here; it is handed out by the AccountDirectory.

    Invariants:
    - immutable after creation
    - equality and hashing by `id` only
    """

    id: AccountId
    name: str
    server: ServerPath

    @classmethod
    def create(cls, name: str, server: ServerPath) -> "Account":
        """Create a new account."""
        return cls(id=AccountId.generate(), name=name, server=server)

    def __str__(self) -> str:
        return f"{self.name}@{self.server}"
