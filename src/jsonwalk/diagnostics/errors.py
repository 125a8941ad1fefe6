"""jsonwalk exception hierarchy with structured diagnostics.

The combinator engine itself never raises for malformed input: it returns
None. These exceptions belong to the layers around it (validator entry
points, depth guard, CLI driver).

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "JsonSyntaxError",
    "JsonWalkError",
    "SourceTooLargeError",
]


class JsonWalkError(Exception):
    """Base exception for all jsonwalk errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize JsonWalkError.

        A Diagnostic is kept unformatted until str() is called; args holds
        its bare message.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)

    def __str__(self) -> str:
        if self.diagnostic is not None:
            return self.diagnostic.format_error()
        return super().__str__()


class JsonSyntaxError(JsonWalkError):
    """Source is not a valid JSON text.

    Raised by JsonValidator.check(). The diagnostic points at the furthest
    offset the grammar reached before failing.
    """


class SourceTooLargeError(JsonWalkError, ValueError):
    """Source exceeds the configured maximum size.

    Also a ValueError so callers treating oversize input as a bad argument
    keep working.
    """
