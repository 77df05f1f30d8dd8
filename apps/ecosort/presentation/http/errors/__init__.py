"""HTTP error mapping."""

from ecosort.presentation.http.errors.handlers import (
    CLASSIFICATION_FAILED_MESSAGE,
    register_exception_handlers,
)

__all__ = ["CLASSIFICATION_FAILED_MESSAGE", "register_exception_handlers"]
