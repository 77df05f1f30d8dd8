"""Oracle (external classification service) exceptions.

``message`` is for logs only. The HTTP layer replaces it with a generic
client-safe message.
"""

from ecosort.application.common.exceptions.base import ApplicationError


class OracleError(ApplicationError):
    """Base class for failures of the classification oracle."""


class OracleUnavailableError(OracleError):
    """Network or service failure while reaching the oracle."""


class OracleContractError(OracleError):
    """Oracle reply did not match the expected structured shape."""

    def __init__(self, message: str, raw_output: str | None = None) -> None:
        self.raw_output = raw_output
        super().__init__(message)


class OracleRefusalError(OracleError):
    """Oracle explicitly declined to answer."""
