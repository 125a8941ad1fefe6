"""JSON syntax package.

Provides the cursor type, the combinator engine, whole-document
validation, and in-place navigation.

Python 3.13+.
"""

from jsonwalk.diagnostics import ValidationResult

from .cursor import Cursor, LineOffsetCache, ParseResult
from .navigation import compare, decode_string, find, index, lookup, resolve, unescape
from .parser import JsonValidator, ParseContext
from .parser.rules import text

__all__ = [
    "Cursor",
    "JsonValidator",
    "LineOffsetCache",
    "ParseContext",
    "ParseResult",
    "compare",
    "decode_string",
    "find",
    "index",
    "is_valid",
    "lookup",
    "resolve",
    "text",
    "unescape",
    "validate",
]


def validate(source: bytes | bytearray | str) -> ValidationResult:
    """Validate a JSON text with default limits.

    Convenience function for JsonValidator().validate().

    Example:
        >>> from jsonwalk.syntax import validate
        >>> validate("[1, 2, 3]").is_valid
        True
    """
    return JsonValidator().validate(source)


def is_valid(source: bytes | bytearray | str) -> bool:
    """Return True iff ``source`` is one complete, valid JSON text.

    Example:
        >>> is_valid("1 2")
        False
    """
    return validate(source).is_valid
