class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class LogsUnavailableError(DomainError):
    """Raised when the external Logs API cannot be reached or answers with an error."""
