"""Grammar rules for the JSON combinator engine.

This module provides every production of the JSON grammar (RFC 8259)
as a matcher over an immutable cursor:

    JSON-text = ws value ws
    value     = false / null / true / object / array / number / string
    object    = begin-object [ member *( value-separator member ) ] end-object
    member    = string name-separator value
    array     = begin-array [ value *( value-separator value ) ] end-array

All rules are co-located in a single module because value, array and
object are mutually recursive.

Nothing is built while matching: structured rules report only their
element/member count, strings their decoded length, and value/text the
ValueKind of what matched.

Lookahead:
    None. Alternatives are tried in a fixed order with first_match_of;
    JSON values are unambiguous by their first byte, so the order only
    has to be total and deterministic.

Security:
    Arrays and objects enter the context's DepthGuard. Input nested
    deeper than max_nesting_depth fails the production instead of
    exhausting the Python stack.
"""

from collections.abc import Callable
from typing import Any

from jsonwalk.core import DepthLimitExceededError
from jsonwalk.enums import ValueKind
from jsonwalk.syntax.cursor import Cursor, ParseResult
from jsonwalk.syntax.parser.primitives import (
    ParseContext,
    character,
    first_match_of,
    literal_str,
    number,
)
from jsonwalk.syntax.parser.whitespace import (
    begin_array,
    begin_object,
    begin_string,
    end_array,
    end_object,
    end_string,
    name_separator,
    skip_ws,
    value_separator,
)

__all__ = [
    "array",
    "boolean",
    "element",
    "member",
    "name",
    "null",
    "object_",
    "primitive",
    "string",
    "structured",
    "text",
    "value",
]

type _KindMatcher = Callable[[Cursor | None, ParseContext | None], ParseResult[ValueKind] | None]


def _fail(cursor: Cursor, context: ParseContext | None) -> None:
    if context is not None:
        context.record_failure(cursor.pos)
    return None


# =============================================================================
# Literals and strings
# =============================================================================


def null(cursor: Cursor | None, context: ParseContext | None = None) -> Cursor | None:
    """Match the literal ``null``."""
    end = literal_str(b"null", cursor)
    if end is None and cursor is not None:
        return _fail(cursor, context)
    return end


def boolean(
    cursor: Cursor | None, context: ParseContext | None = None
) -> ParseResult[bool] | None:
    """Match ``true`` or ``false`` and decode it.

    Example:
        >>> boolean(Cursor(b"false", 0)).value
        False
    """
    if cursor is None:
        return None
    end = literal_str(b"true", cursor)
    if end is not None:
        return ParseResult(True, end)
    end = literal_str(b"false", cursor)
    if end is not None:
        return ParseResult(False, end)
    return _fail(cursor, context)


def string(
    cursor: Cursor | None, context: ParseContext | None = None
) -> ParseResult[int] | None:
    """Match a string and count its decoded characters.

    Matches the opening quote, then characters until one fails to decode,
    then requires the closing quote. The count is of decoded characters,
    not raw bytes (``"\\n"`` counts 1), so it sizes an unescape buffer.

    Example:
        >>> string(Cursor(b'"a\\\\nb"', 0)).value
        3
    """
    body = begin_string(cursor)
    if body is None:
        return None if cursor is None else _fail(cursor, context)

    length = 0
    decoded = character(body, context)
    while decoded is not None:
        body = decoded.cursor
        length += 1
        decoded = character(body, context)

    closed = end_string(body)
    if closed is None:
        return _fail(body, context)
    return ParseResult(length, closed)


# =============================================================================
# Members and elements
# =============================================================================


def name(cursor: Cursor | None, context: ParseContext | None = None) -> Cursor | None:
    """Match an object key and its ``:`` separator.

    Returns:
        Cursor at the member's value, or None
    """
    key = string(cursor, context)
    if key is None:
        return None
    after = name_separator(key.cursor)
    if after is None:
        return _fail(key.cursor.skip_whitespace(), context)
    return after


def element(cursor: Cursor | None, context: ParseContext | None = None) -> Cursor | None:
    """Match a value and the value separator after it, if present.

    Used to step over array elements; array() itself requires separators
    between elements.
    """
    parsed = value(cursor, context)
    if parsed is None:
        return None
    after = value_separator(parsed.cursor)
    return parsed.cursor if after is None else after


def member(cursor: Cursor | None, context: ParseContext | None = None) -> Cursor | None:
    """Match ``name value`` and the value separator after it, if present."""
    return element(name(cursor, context), context)


# =============================================================================
# Structured values
# =============================================================================


def array(
    cursor: Cursor | None, context: ParseContext | None = None
) -> ParseResult[int] | None:
    """Match an array and count its elements.

    Examples:
        [] -> 0
        [1, [2, 3], {}] -> 3
        [1,] -> None (trailing comma)

    Args:
        cursor: Current position, or None
        context: Depth limit and failure tracking (created if omitted)

    Returns:
        ParseResult(element count, cursor after ``]`` and trailing ws), or None
    """
    if cursor is None:
        return None
    if context is None:
        context = ParseContext()

    item = begin_array(cursor)
    if item is None:
        return _fail(cursor.skip_whitespace(), context)

    try:
        with context.guard:
            closed = end_array(item)
            if closed is not None:
                return ParseResult(0, closed)

            length = 0
            while True:
                parsed = value(item, context)
                if parsed is None:
                    return None
                length += 1
                closed = end_array(parsed.cursor)
                if closed is not None:
                    return ParseResult(length, closed)
                item = value_separator(parsed.cursor)
                if item is None:
                    return _fail(parsed.cursor.skip_whitespace(), context)
    except DepthLimitExceededError:
        context.record_depth_exceeded(cursor.skip_whitespace().pos)
        return None


def object_(
    cursor: Cursor | None, context: ParseContext | None = None
) -> ParseResult[int] | None:
    """Match an object and count its members.

    Keys are not checked for uniqueness: ``{"a": 1, "a": 2}`` is a valid
    object with two members.

    Examples:
        {} -> 0
        {"a": 1, "b": [2]} -> 2
        {"a" 1} -> None (missing colon)

    Returns:
        ParseResult(member count, cursor after ``}`` and trailing ws), or None
    """
    if cursor is None:
        return None
    if context is None:
        context = ParseContext()

    item = begin_object(cursor)
    if item is None:
        return _fail(cursor.skip_whitespace(), context)

    try:
        with context.guard:
            closed = end_object(item)
            if closed is not None:
                return ParseResult(0, closed)

            length = 0
            while True:
                parsed = value(name(item, context), context)
                if parsed is None:
                    return None
                length += 1
                closed = end_object(parsed.cursor)
                if closed is not None:
                    return ParseResult(length, closed)
                item = value_separator(parsed.cursor)
                if item is None:
                    return _fail(parsed.cursor.skip_whitespace(), context)
    except DepthLimitExceededError:
        context.record_depth_exceeded(cursor.skip_whitespace().pos)
        return None


# =============================================================================
# Values
# =============================================================================


def _tagged(kind: ValueKind, matcher: Callable[..., Any]) -> _KindMatcher:
    """Adapt a matcher so that success reports ``kind`` instead of its own value."""

    def match(
        cursor: Cursor | None, context: ParseContext | None = None
    ) -> ParseResult[ValueKind] | None:
        result = matcher(cursor, context)
        if result is None:
            return None
        end = result.cursor if isinstance(result, ParseResult) else result
        return ParseResult(kind, end)

    return match


_NULL = _tagged(ValueKind.NULL, null)
_BOOLEAN = _tagged(ValueKind.BOOLEAN, boolean)
_NUMBER = _tagged(ValueKind.NUMBER, number)
_STRING = _tagged(ValueKind.STRING, string)
_ARRAY = _tagged(ValueKind.ARRAY, array)
_OBJECT = _tagged(ValueKind.OBJECT, object_)

# Ordered alternatives. value() uses the flat six-way list rather than
# primitive-then-structured so each nesting level costs a fixed number of
# frames (see FRAMES_PER_NESTING_LEVEL).
primitive: _KindMatcher = first_match_of(_NULL, _BOOLEAN, _NUMBER, _STRING)
primitive.__doc__ = "Match null, boolean, number or string; report its kind."
structured: _KindMatcher = first_match_of(_ARRAY, _OBJECT)
structured.__doc__ = "Match an array or object; report its kind."
_any_value: _KindMatcher = first_match_of(_NULL, _BOOLEAN, _NUMBER, _STRING, _ARRAY, _OBJECT)


def value(
    cursor: Cursor | None, context: ParseContext | None = None
) -> ParseResult[ValueKind] | None:
    """Match any JSON value and report its kind.

    Alternatives are tried in order: null, boolean, number, string,
    array, object. Leading whitespace is not skipped.

    Example:
        >>> value(Cursor(b'{"a": [1]}', 0)).value
        <ValueKind.OBJECT: 'object'>
    """
    if cursor is None:
        return None
    if context is None:
        context = ParseContext()
    result = _any_value(cursor, context)
    if result is None:
        context.record_failure(cursor.pos)
    return result


def text(
    cursor: Cursor | None, context: ParseContext | None = None
) -> ParseResult[ValueKind] | None:
    """Match a JSON text: whitespace, one value, whitespace.

    The caller decides whether the whole input was consumed: a document
    is valid only if the returned cursor is at EOF. ``1 2`` matches
    ``1 `` here and leaves ``2`` unconsumed.

    Example:
        >>> result = text(Cursor(b" [1, 2] ", 0))
        >>> result.value, result.cursor.is_eof
        (<ValueKind.ARRAY: 'array'>, True)
    """
    parsed = value(skip_ws(cursor), context)
    if parsed is None:
        return None
    return ParseResult(parsed.value, parsed.cursor.skip_whitespace())
