"""Classification domain exceptions."""

from ecosort.domain.exceptions.base import DomainError


class InvalidInputError(DomainError):
    """Malformed caller input. Raised before any oracle call."""

    def __init__(self, reason: str = "Invalid input") -> None:
        super().__init__(reason)


class DecodeError(DomainError):
    """Image bytes could not be decoded."""

    def __init__(self, reason: str = "Could not decode image") -> None:
        super().__init__(reason)
