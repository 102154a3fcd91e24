"""Account domain ports."""

from .directory import AccountDirectory
from .identity_resolver import IdentityResolver, UsernameLookup

__all__ = [
    "AccountDirectory",
    "IdentityResolver",
    "UsernameLookup",
]
