"""Domain exceptions."""

from ecosort.domain.exceptions.base import DomainError
from ecosort.domain.exceptions.classification import DecodeError, InvalidInputError

__all__ = [
    "DomainError",
    "DecodeError",
    "InvalidInputError",
]
