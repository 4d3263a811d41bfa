class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class StaffNotFoundError(DomainError):
    """Raised when a staff id is not present in a registry."""
