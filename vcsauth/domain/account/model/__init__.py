"""Account domain models."""

from .account import Account
from .value import AccountId, AuthData, ServerPath, WorkspaceId

__all__ = [
    "Account",
    "AccountId",
    "AuthData",
    "ServerPath",
    "WorkspaceId",
]
