"""Validation result for whole-document JSON validation.

Python 3.13+.
"""

from dataclasses import dataclass

from jsonwalk.enums import ValueKind

from .codes import Diagnostic

__all__ = ["ValidationResult"]


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of validating one JSON text.

    Immutable result object for thread-safe validation feedback.

    Attributes:
        kind: Kind of the top-level value (None when invalid)
        end: Byte offset where matching stopped. Equals the source length
            for a valid document; for an invalid one it is the furthest
            offset the grammar reached.
        errors: Diagnostics explaining why the document is invalid

    Example:
        >>> result = ValidationResult.valid(ValueKind.ARRAY, end=2)
        >>> result.is_valid
        True
        >>> result.error_count
        0
    """

    kind: ValueKind | None
    end: int
    errors: tuple[Diagnostic, ...] = ()

    @property
    def is_valid(self) -> bool:
        """True when a value matched and no errors were recorded."""
        return self.kind is not None and not self.errors

    @property
    def error_count(self) -> int:
        """Number of diagnostics."""
        return len(self.errors)

    def __bool__(self) -> bool:
        return self.is_valid

    @staticmethod
    def valid(kind: ValueKind, end: int) -> "ValidationResult":
        """Create a valid result for a top-level value of the given kind."""
        return ValidationResult(kind=kind, end=end)

    @staticmethod
    def invalid(end: int, *errors: Diagnostic) -> "ValidationResult":
        """Create an invalid result carrying one or more diagnostics."""
        return ValidationResult(kind=None, end=end, errors=errors)
