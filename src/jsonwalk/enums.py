"""Enumerations shared across jsonwalk.

Python 3.13+.
"""

from enum import StrEnum

__all__ = ["ValueKind"]


class ValueKind(StrEnum):
    """Kind of a JSON value reported alongside a successful value match.

    Inherits from ``StrEnum`` so that ``str(kind)`` yields the plain JSON
    type name (``"object"``, ``"number"``) in logs and CLI output.

    Primitive kinds:
        NULL, BOOLEAN, NUMBER, STRING

    Structured kinds:
        ARRAY, OBJECT
    """

    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"
