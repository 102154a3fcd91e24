"""Error hierarchy for vcsauth.

Error layers:
- VcsAuthError: Base class for all vcsauth errors
- DomainError: Business rule violations, validation failures
- InfrastructureError: System-level failures like network or configuration issues

Identity lookups never raise these to callers of the credential resolver; they
travel inside a UsernameLookup instead (see domain/account/port/identity_resolver.py).
"""


class VcsAuthError(Exception):
    """Base class for all vcsauth errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Domain Errors
# =============================================================================


class DomainError(VcsAuthError):
    """Base class for domain/business errors."""


class NotFoundError(DomainError):
    """Resource not found."""


class ValidationError(DomainError):
    """Input validation failed."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, code="VALIDATION_ERROR")
        self.field = field


# =============================================================================
# Infrastructure Errors
# =============================================================================


class InfrastructureError(VcsAuthError):
    """Base class for infrastructure/system errors."""


class ExternalServiceError(InfrastructureError):
    """External service (code-hosting API) is unavailable or failed."""


class ConfigurationError(InfrastructureError):
    """System misconfiguration detected."""
