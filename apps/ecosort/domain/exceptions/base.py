"""Base class for domain exceptions."""


class DomainError(Exception):
    """Base class for every domain exception.

    Signals a violated business rule. The presentation layer turns it into an
    HTTP response carrying ``message``.
    """

    def __init__(self, message: str = "Domain error occurred") -> None:
        self.message = message
        super().__init__(message)
