class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str = "An error occurred"):
        self.message = message
        super().__init__(self.message)


class ValidationError(AppError):
    """Raised when input for a new record is missing or malformed."""

    def __init__(self, message: str = "Invalid input"):
        super().__init__(message)


class NotFoundError(AppError):
    """Raised when a requested resource does not exist."""

    def __init__(self, resource: str = "Resource", id: str = ""):
        super().__init__(f"{resource} not found: {id}" if id else f"{resource} not found")


class DuplicateKeyError(AppError):
    """Raised when an insert collides with a unique key."""

    def __init__(self, field: str, value: str):
        self.field = field
        self.value = value
        super().__init__(f"user with {field} '{value}' already exists")
