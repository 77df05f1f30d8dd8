"""Base class for application exceptions."""


class ApplicationError(Exception):
    """Base class for every application exception."""

    def __init__(self, message: str = "Application error occurred") -> None:
        self.message = message
        super().__init__(message)
