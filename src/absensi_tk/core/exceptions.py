class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid; always raised before any store call."""


class NotFoundError(DomainError):
    """Raised when an id is not present in the loaded application state."""


class StoreError(DomainError):
    """Raised when a select/insert/update/delete/upsert against the store fails."""
