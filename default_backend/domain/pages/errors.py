"""
Domain-specific errors for the error pages bounded context.

All errors raised from the domain layer must be defined here.
No framework imports allowed.
"""


class ErrorPagesError(Exception):
    """Base error for all error pages domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class InvalidMediaTypeError(ErrorPagesError):
    """Raised when a format header is not a parseable media type."""

    def __init__(self, media_type: str) -> None:
        super().__init__(f"Invalid media type: {media_type!r}")
        self.media_type = media_type


class EnvironmentLoadError(ErrorPagesError):
    """Raised when the debug .env file cannot be loaded."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Error loading {path} file: {reason}")
        self.path = path
        self.reason = reason
