from typing import Optional, Sequence


class OsListException(Exception):
    """Base exception for all os-list errors."""
    pass

class InvalidInputException(OsListException):
    """Raised when a command argument fails validation."""
    pass

class UnknownFieldException(InvalidInputException):
    """Raised when a requested field is not in the field catalog."""
    def __init__(self, field: str, allowed: Sequence[str]):
        self.field = field
        self.allowed = list(allowed)
        super().__init__(
            f"Field '{field}' is not in the allowed fields list. "
            f"Allowed list is: {', '.join(self.allowed)}"
        )

class FetchException(OsListException):
    """Raised when the GitHub GraphQL API could not be queried."""
    def __init__(self, message: str, status: Optional[int] = None):
        self.status = status
        super().__init__(message)

class RateLimitExceededException(FetchException):
    """Raised when the GitHub GraphQL rate limit is hit."""
    def __init__(self, reset_at: Optional[str], message: str = "GitHub API rate limit exceeded."):
        self.reset_at = reset_at
        super().__init__(f"{message} Resets at: {reset_at}")
