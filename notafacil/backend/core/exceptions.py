"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.
"""


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class NotFoundError(ApplicationError):
    """Raised when a resource cannot be found."""

    def __init__(self, message: str = "Resource not found") -> None:
        super().__init__(message, code="RES_NOT_FOUND")


class ValidationError(ApplicationError):
    """Raised when validation fails."""

    def __init__(self, message: str = "Validation failed", details: dict | None = None) -> None:
        self.details = details or {}
        super().__init__(message, code="VAL_VALIDATION_ERROR")


class ImportFormatError(ApplicationError):
    """Raised when an import payload cannot be decoded into a list of notes."""

    def __init__(self, message: str = "Invalid import payload") -> None:
        super().__init__(message, code="IMP_INVALID_FORMAT")


class ImportDataError(ApplicationError):
    """Raised when a single record of an import payload is not a valid note."""

    PREFIX = "Invalid note data: "

    def __init__(self, cause: str, record_index: int | None = None) -> None:
        self.cause = cause
        self.record_index = record_index
        super().__init__(f"{self.PREFIX}{cause}", code="IMP_INVALID_NOTE_DATA")


class ConflictError(ApplicationError):
    """Raised when there is a state conflict."""

    def __init__(self, message: str = "Resource conflict") -> None:
        super().__init__(message, code="RES_CONFLICT")


class DatabaseError(ApplicationError):
    """Raised when a database operation fails."""

    def __init__(self, message: str = "Database error") -> None:
        super().__init__(message, code="SYS_DATABASE_ERROR")
