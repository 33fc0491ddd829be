class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when required input is missing or malformed."""


class StateError(DomainError):
    """Raised when an operation does not fit the current shift state."""


class StoreError(DomainError):
    """Raised when the persistence layer fails."""
