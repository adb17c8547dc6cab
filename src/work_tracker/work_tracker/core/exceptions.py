class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class DataUnavailable(DomainError):
    """Raised when the data store is unreachable or a read fails."""


class WriteRejected(DomainError):
    """Raised when persisting a shift toggle fails."""
