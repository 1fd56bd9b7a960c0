from .enums import ErrorCategory


class DomainError(Exception):
    """Base exception for business rule violations.

    Every subclass carries the category and HTTP status the controller layer
    reports, so nothing above the services needs to inspect driver errors.
    """

    category = ErrorCategory.QUERY_FAILED
    http_status = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(DomainError):
    """Raised when input data is missing or malformed."""

    category = ErrorCategory.VALIDATION_FAILED
    http_status = 400


class AuthenticationError(DomainError):
    """Raised when login credentials or the session token are invalid."""

    category = ErrorCategory.UNAUTHORIZED
    http_status = 401


class NotFoundError(DomainError):
    """Raised when the target row does not exist in the caller's lecture."""

    category = ErrorCategory.NOT_FOUND
    http_status = 404


class ConflictError(DomainError):
    """Raised on a uniqueness violation."""

    category = ErrorCategory.CONFLICT
    http_status = 409


class QueryFailedError(DomainError):
    """Raised for unexpected datastore failures. The cause is logged, not reported."""

    category = ErrorCategory.QUERY_FAILED
    http_status = 500


class ServiceUnavailableError(DomainError):
    """Raised when no connection could be obtained in time. Retryable."""

    category = ErrorCategory.SERVICE_UNAVAILABLE
    http_status = 503
