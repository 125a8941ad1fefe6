"""Primitive matchers for the JSON grammar.

This module provides the lowest tier of the combinator engine: literal
byte and literal string matchers, the ordered-alternative combinator,
and the two scalar decoders every higher rule builds on (numbers and
single string characters).

Every matcher accepts ``Cursor | None`` and returns ``None`` for a ``None``
input without looking at the text, so matchers chain without explicit
checks:

    end_array(value(begin_array(cursor)))

Error Context:
    Matchers that take a ``context`` record the offset where they gave up
    via ParseContext.record_failure(). The boolean contract is unchanged;
    the offset only feeds diagnostics.
"""

from collections.abc import Callable
from dataclasses import dataclass, field

from jsonwalk.constants import ASCII_DIGITS, HEX_DIGITS, MAX_DEPTH, MAX_EXPONENT_DIGITS_VALUE
from jsonwalk.core import DepthGuard
from jsonwalk.syntax.cursor import Cursor, ParseResult

__all__ = [
    "ParseContext",
    "character",
    "first_match_of",
    "literal_char",
    "literal_str",
    "number",
]

# \uXXXX = exactly 4 hex digits
_UNICODE_ESCAPE_LEN: int = 4

# Largest code point decoded as itself; anything above becomes _NON_ASCII_SENTINEL.
_MAX_ASCII_CODE_POINT: int = 0x7F

# Decoded byte reported for \uXXXX escapes beyond 7-bit ASCII.
_NON_ASCII_SENTINEL: int = 0

# Lowest byte allowed unescaped inside a string (U+0020 SPACE).
_MIN_UNESCAPED_BYTE: int = 0x20

_QUOTE: int = ord('"')
_BACKSLASH: int = ord("\\")
_MINUS: int = ord("-")
_PLUS: int = ord("+")
_ZERO: int = ord("0")
_DOT: int = ord(".")
_EXPONENT_MARKERS: bytes = b"eE"

# Single-byte escapes: byte after the backslash -> decoded byte.
_SIMPLE_ESCAPES: dict[int, int] = {
    ord('"'): ord('"'),
    ord("\\"): ord("\\"),
    ord("/"): ord("/"),
    ord("b"): ord("\b"),
    ord("f"): ord("\f"),
    ord("n"): ord("\n"),
    ord("r"): ord("\r"),
    ord("t"): ord("\t"),
}


@dataclass(slots=True)
class ParseContext:
    """Explicit context for one matching run.

    Replaces global state with explicit parameter passing for:
    - Thread safety without global state
    - Recursion depth limiting (one DepthGuard per run)
    - Furthest-failure tracking for diagnostics

    A context is mutable and belongs to a single call stack. Entry points
    create a fresh one when the caller passes none.

    Attributes:
        max_nesting_depth: Maximum allowed nesting of arrays/objects
        guard: Depth guard entered once per array/object
        furthest_failure: Largest offset at which a matcher failed (-1 if none)
        depth_exceeded_at: Offset of the bracket that tripped the depth limit
    """

    max_nesting_depth: int = MAX_DEPTH
    guard: DepthGuard = field(init=False)
    furthest_failure: int = field(default=-1, init=False)
    depth_exceeded_at: int | None = field(default=None, init=False)

    def __post_init__(self) -> None:
        self.guard = DepthGuard(max_depth=self.max_nesting_depth)

    @property
    def current_depth(self) -> int:
        """Number of arrays/objects currently open."""
        return self.guard.current_depth

    def record_failure(self, pos: int) -> None:
        """Remember ``pos`` if it is the furthest failure seen so far."""
        if pos > self.furthest_failure:
            self.furthest_failure = pos

    def record_depth_exceeded(self, pos: int) -> None:
        """Remember the first bracket rejected by the depth limit."""
        if self.depth_exceeded_at is None:
            self.depth_exceeded_at = pos
        self.record_failure(pos)


def literal_char(char: int | str, cursor: Cursor | None) -> Cursor | None:
    """Match one literal byte.

    Args:
        char: Expected byte, as an int or a one-character ASCII string
        cursor: Current position, or None to propagate failure

    Returns:
        Cursor after the byte, or None if the byte differs, at EOF, or
        if cursor is None

    Example:
        >>> literal_char("[", Cursor(b"[]", 0)).pos
        1
        >>> literal_char("[", None) is None
        True
    """
    if cursor is None:
        return None
    return cursor.expect(ord(char) if isinstance(char, str) else char)


def literal_str(text: bytes | str, cursor: Cursor | None) -> Cursor | None:
    """Match a literal byte string.

    Args:
        text: Expected prefix of the input at cursor
        cursor: Current position, or None to propagate failure

    Returns:
        Cursor after the literal, or None if it is not a prefix

    Example:
        >>> literal_str("null", Cursor(b"null", 0)).is_eof
        True
        >>> literal_str("null", Cursor(b"nul", 0)) is None
        True
    """
    if cursor is None:
        return None
    prefix = text.encode("ascii") if isinstance(text, str) else text
    if cursor.startswith(prefix):
        return cursor.advance(len(prefix))
    return None


def first_match_of[**P, R](*alternatives: Callable[P, R | None]) -> Callable[P, R | None]:
    """Build an ordered-alternative combinator.

    The returned matcher calls each alternative in order with the same
    arguments and returns the first result that is not None. Alternation
    in the grammar is therefore explicit and deterministic.

    Example:
        >>> keyword = first_match_of(
        ...     lambda c: literal_str("true", c),
        ...     lambda c: literal_str("false", c),
        ... )
        >>> keyword(Cursor(b"false", 0)).pos
        5
    """

    def match(*args: P.args, **kwargs: P.kwargs) -> R | None:
        for alternative in alternatives:
            result = alternative(*args, **kwargs)
            if result is not None:
                return result
        return None

    return match


def _digits(
    cursor: Cursor, accumulator: float
) -> tuple[Cursor, float, int] | None:
    """Match one-or-more ASCII digits, folding them into ``accumulator``.

    Returns:
        (cursor after the run, new accumulator, digit count), or None if
        no digit is present
    """
    source = cursor.source
    end = len(source)
    pos = cursor.pos
    while pos < end and source[pos] in ASCII_DIGITS:
        accumulator = accumulator * 10 + (source[pos] - _ZERO)
        pos += 1
    count = pos - cursor.pos
    if count == 0:
        return None
    return Cursor(source, pos), accumulator, count


def number(  # noqa: PLR0911 - each return is a grammar exit
    cursor: Cursor | None, context: ParseContext | None = None
) -> ParseResult[float] | None:
    """Match a JSON number and decode it.

    Grammar (RFC 8259):
        number = [ "-" ] int [ frac ] [ exp ]
        int    = "0" / ( digit1-9 *digit )
        frac   = "." 1*digit
        exp    = ( "e" / "E" ) [ "-" / "+" ] 1*digit

    Decoding:
        Integer and fraction digits accumulate into one float significand;
        the fraction digit count becomes a negative shift. The result is
        ``sign * significand`` scaled by ``exponent - shift`` repeated
        multiplications or divisions by ten (not ``10 ** n``), which fixes
        the rounding behaviour for every input.

    Limits:
        A fraction longer than MAX_EXPONENT_DIGITS_VALUE digits, or an
        exponent whose magnitude exceeds it, fails the production.

    Args:
        cursor: Current position, or None to propagate failure
        context: Failure tracking (optional)

    Returns:
        ParseResult(value, cursor after the number), or None

    Example:
        >>> number(Cursor(b"-2.5e-1", 0)).value
        -0.25
        >>> number(Cursor(b"01", 0)).cursor.pos  # "0" is a complete int
        1
        >>> number(Cursor(b"1.", 0)) is None
        True
    """
    if cursor is None:
        return None

    sign = 1.0
    if cursor.peek() == _MINUS:
        sign = -1.0
        cursor = cursor.advance()

    significand = 0.0
    if cursor.peek() == _ZERO:
        cursor = cursor.advance()
    else:
        run = _digits(cursor, significand)
        if run is None:
            return _fail(cursor, context)
        cursor, significand, _ = run

    shift = 0
    if cursor.peek() == _DOT:
        run = _digits(cursor.advance(), significand)
        if run is None:
            return _fail(cursor.advance(), context)
        if run[2] > MAX_EXPONENT_DIGITS_VALUE:
            return _fail(cursor, context)
        cursor, significand, shift = run

    exponent = 0
    marker = cursor.peek()
    if marker is not None and marker in _EXPONENT_MARKERS:
        cursor = cursor.advance()
        exponent_sign = 1
        if cursor.peek() == _MINUS:
            exponent_sign = -1
            cursor = cursor.advance()
        elif cursor.peek() == _PLUS:
            cursor = cursor.advance()
        exponent_digits_start = cursor
        magnitude = 0
        source = cursor.source
        pos = cursor.pos
        while pos < len(source) and source[pos] in ASCII_DIGITS:
            magnitude = magnitude * 10 + (source[pos] - _ZERO)
            pos += 1
            if magnitude > MAX_EXPONENT_DIGITS_VALUE:
                return _fail(exponent_digits_start, context)
        if pos == cursor.pos:
            return _fail(cursor, context)
        cursor = Cursor(source, pos)
        exponent = exponent_sign * magnitude

    value = sign * significand
    scale = exponent - shift
    while scale > 0:
        value *= 10
        scale -= 1
    while scale < 0:
        value /= 10
        scale += 1

    return ParseResult(value, cursor)


def character(
    cursor: Cursor | None, context: ParseContext | None = None
) -> ParseResult[int] | None:
    """Decode exactly one logical character of a string body.

    Escapes:
        \\" \\\\ \\/        -> the escaped byte itself
        \\b \\f \\n \\r \\t   -> the control byte
        \\uXXXX           -> the code point if <= 0x7F, else the sentinel 0

    Unescaped bytes >= 0x20 other than '"' and '\\' pass through as-is.
    Control bytes, a bare quote, EOF, unknown escapes and short hex
    sequences fail.

    Non-ASCII decoding is out of scope: callers who need full Unicode
    decode the raw bytes themselves.

    Args:
        cursor: Position inside a string body, or None
        context: Failure tracking (optional)

    Returns:
        ParseResult(decoded byte, cursor after the character), or None

    Example:
        >>> character(Cursor(b"\\\\u0041", 0)).value == ord("A")
        True
        >>> character(Cursor(b"\\\\u00e9", 0)).value
        0
    """
    if cursor is None:
        return None

    byte = cursor.peek()
    if byte is None:
        return _fail(cursor, context)

    if byte == _BACKSLASH:
        escape_cursor = cursor.advance()
        escape = escape_cursor.peek()
        if escape is None:
            return _fail(escape_cursor, context)
        decoded = _SIMPLE_ESCAPES.get(escape)
        if decoded is not None:
            return ParseResult(decoded, escape_cursor.advance())
        if escape == ord("u"):
            return _unicode_escape(escape_cursor.advance(), context)
        return _fail(escape_cursor, context)

    if byte >= _MIN_UNESCAPED_BYTE and byte != _QUOTE:
        return ParseResult(byte, cursor.advance())

    return _fail(cursor, context)


def _unicode_escape(
    cursor: Cursor, context: ParseContext | None
) -> ParseResult[int] | None:
    """Decode the XXXX part of a \\uXXXX escape (cursor after the 'u')."""
    code_point = 0
    hex_cursor = cursor
    for _ in range(_UNICODE_ESCAPE_LEN):
        digit = hex_cursor.peek()
        if digit is None:
            return _fail(hex_cursor, context)
        value = _hex_value(digit)
        if value is None:
            return _fail(hex_cursor, context)
        code_point = (code_point << 4) | value
        hex_cursor = hex_cursor.advance()

    decoded = code_point if code_point <= _MAX_ASCII_CODE_POINT else _NON_ASCII_SENTINEL
    return ParseResult(decoded, hex_cursor)


def _hex_value(byte: int) -> int | None:
    """Value of an ASCII hex digit, case-insensitive; None otherwise."""
    if byte not in HEX_DIGITS:
        return None
    return int(chr(byte), 16)


def _fail(cursor: Cursor, context: ParseContext | None) -> None:
    """Record a failure at ``cursor`` (if tracking) and return None."""
    if context is not None:
        context.record_failure(cursor.pos)
    return None
