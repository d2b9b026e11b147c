class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidArgument(ValidationError):
    """Raised when a worker, status, date or amount is missing or malformed."""


class NotFoundError(DomainError):
    """Raised by services when a referenced site, worker or payment does not exist."""
