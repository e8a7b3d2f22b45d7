"""Custom exception classes for CareerLog."""


class CareerLogError(Exception):
    """Base exception for CareerLog."""

    def __init__(self, code: str, message: str, details=None):
        self.code = code
        self.message = message
        self.details = details
        super().__init__(message)


class ValidationError(CareerLogError):
    """Draft data is not fit to be saved."""

    def __init__(self, message: str, details=None):
        super().__init__("VALIDATION_ERROR", message, details)


class NotFoundError(CareerLogError):
    """Record not found."""

    def __init__(self, resource: str, resource_id: str):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(
            "NOT_FOUND",
            f"{resource} '{resource_id}' not found",
        )


class PersistenceError(CareerLogError):
    """A commit failed; the session was rolled back before this was raised."""

    def __init__(self, operation: str, cause: Exception):
        self.operation = operation
        self.cause = cause
        super().__init__(
            "PERSISTENCE_ERROR",
            f"{operation} failed: {cause}",
            details={"operation": operation, "cause": type(cause).__name__},
        )
