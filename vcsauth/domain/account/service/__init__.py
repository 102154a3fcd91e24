"""Account domain services."""

from .credential import CredentialResolver

__all__ = ["CredentialResolver"]
