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


class StorageError(ApplicationError):
    """Raised when the preference store cannot be read or written."""

    def __init__(self, message: str = "Storage error") -> None:
        super().__init__(message, code="SYS_STORAGE_ERROR")


class EncodingError(ApplicationError):
    """Raised when the note collection cannot be serialized."""

    def __init__(self, message: str = "Encoding error") -> None:
        super().__init__(message, code="SYS_ENCODING_ERROR")


class DecodingError(ApplicationError):
    """Raised when a stored blob cannot be deserialized."""

    def __init__(self, message: str = "Decoding error") -> None:
        super().__init__(message, code="SYS_DECODING_ERROR")


class NotificationError(ApplicationError):
    """Raised when the notification center rejects a request."""

    def __init__(self, message: str = "Notification error") -> None:
        super().__init__(message, code="SYS_NOTIFICATION_ERROR")
