"""Domain-specific exceptions with user-ready messages for the marketplace."""


class BusinessLogicException(Exception):
    """Base exception class for business logic errors.

    All business logic exceptions include user-ready messages that can be
    displayed directly in the UI without client-side message construction.
    """

    def __init__(self, message: str, error_code: str) -> None:
        self.message = message
        self.error_code = error_code
        super().__init__(message)


class RecordNotFoundException(BusinessLogicException):
    """Exception raised when a requested record is not found."""

    def __init__(self, resource_type: str, identifier: str | int) -> None:
        message = f"{resource_type} {identifier} was not found"
        super().__init__(message, error_code="RECORD_NOT_FOUND")


class ResourceConflictException(BusinessLogicException):
    """Exception raised when attempting to create a resource that already exists."""

    def __init__(self, resource_type: str, identifier: str | int) -> None:
        message = f"A {resource_type.lower()} with {identifier} already exists"
        super().__init__(message, error_code="RESOURCE_CONFLICT")


class InvalidOperationException(BusinessLogicException):
    """Exception raised when an operation cannot be performed due to business rules."""

    def __init__(self, operation: str, cause: str) -> None:
        self.operation = operation
        self.cause = cause
        message = f"Cannot {operation} because {cause}"
        super().__init__(message, error_code="INVALID_OPERATION")


class AuthenticationException(BusinessLogicException):
    """Exception raised when login credentials do not match a user."""

    def __init__(self) -> None:
        super().__init__("Invalid credentials", error_code="INVALID_CREDENTIALS")


class InvalidUploadException(BusinessLogicException):
    """Exception raised when an uploaded file is missing, too large or not an image."""

    def __init__(self, cause: str) -> None:
        self.cause = cause
        super().__init__(f"Upload rejected: {cause}", error_code="INVALID_UPLOAD")
