class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced employee or shift does not exist."""


class StorageError(Exception):
    """Raised when a data file or table cannot be read or written."""
