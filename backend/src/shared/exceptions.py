class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str = "An error occurred"):
        self.message = message
        super().__init__(self.message)


class ValidationError(AppError):
    """Raised when user input is rejected before reaching the store."""

    def __init__(self, message: str = "Invalid input"):
        super().__init__(message)


class NotFoundError(AppError):
    """Raised when a requested resource does not exist."""

    def __init__(self, resource: str = "Resource", id: str = ""):
        super().__init__(f"{resource} not found: {id}" if id else f"{resource} not found")


class ConflictError(AppError):
    """Raises on optimistic locking conflicts (stale version)."""

    def __init__(self, message: str = "Resource was modified by another user"):
        super().__init__(message)


class StaleBaseError(ConflictError):
    """Raised when a save was based on a version that is no longer the latest."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Document advanced to version {actual} since it was loaded at version {expected}"
        )


class StoreError(AppError):
    """Raised when the persistent store rejects or fails an operation."""

    def __init__(self, message: str = "Storage operation failed"):
        super().__init__(message)


class InvalidStateError(AppError):
    """Raised when a document session operation is not allowed in its current state."""

    def __init__(self, message: str = "Operation not allowed in the current state"):
        super().__init__(message)


class AuthenticationError(AppError):
    """Raised when credentials are invalid."""

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class AuthorizationError(AppError):
    """Raised when a user lacks permission for an action."""

    def __init__(self, message: str = "Permission denied"):
        super().__init__(message)
