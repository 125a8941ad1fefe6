"""In-place navigation over JSON text.

These utilities walk a document without building anything: they step over
array elements and object members with the grammar matchers and compare
keys against the escaped source bytes directly.

They assume text that is already known (or expected) to be valid JSON.
On malformed input they fail with None where the underlying matcher
fails, but they do not validate the parts they skip past beyond what the
matchers themselves check.

Cursor conventions:
    - index() starts at the first element of an array body, i.e. the
      cursor returned by begin_array().
    - find() and lookup() start at the first member of an object body,
      i.e. the cursor returned by begin_object().
    - compare() and unescape() work on a string body, i.e. the cursor
      returned by begin_string().
    - decode_string() and resolve() start at a value.
"""

from collections.abc import Iterable

from jsonwalk.syntax.cursor import Cursor, ParseResult
from jsonwalk.syntax.parser.primitives import character
from jsonwalk.syntax.parser.rules import element, member, name, string
from jsonwalk.syntax.parser.whitespace import begin_array, begin_object, begin_string, end_array

__all__ = [
    "compare",
    "decode_string",
    "find",
    "index",
    "lookup",
    "resolve",
    "unescape",
]


def compare(literal: bytes | str, cursor: Cursor | None) -> int:
    """Compare a literal with the decoded characters of a string body.

    Decodes one character at a time, so a key is matched without
    materializing it. No Unicode normalization is applied; ``\\u0041``
    equals ``A`` but non-ASCII escapes decode to the sentinel byte 0.

    Args:
        literal: Text to compare (str is encoded as UTF-8)
        cursor: Start of a string body (after the opening quote), or None

    Returns:
        0 if the string holds exactly ``literal``; otherwise a nonzero
        int whose sign orders ``literal`` against the string (negative:
        literal sorts first). A None cursor never compares equal.

    Example:
        >>> compare("key", Cursor(b'"key"', 1))
        0
        >>> compare("ke", Cursor(b'"key"', 1)) < 0
        True
    """
    expected = literal.encode("utf-8") if isinstance(literal, str) else literal
    if cursor is None:
        return 1

    for byte in expected:
        decoded = character(cursor)
        if decoded is None:
            # String ended first: literal is longer.
            return 1
        if decoded.value != byte:
            return byte - decoded.value
        cursor = decoded.cursor

    if character(cursor) is not None:
        # Literal ended first.
        return -1
    if cursor.peek() != ord('"'):
        # Body is malformed at this point, not terminated.
        return 1
    return 0


def index(n: int, cursor: Cursor | None) -> Cursor | None:
    """Skip ``n`` elements of an array body.

    No bounds checking: skipping exactly as many elements as the array has
    lands on the closing bracket, and skipping more fails in the value
    matcher.

    Args:
        n: Number of elements to skip (0 returns cursor unchanged)
        cursor: First element of an array body, or None

    Returns:
        Cursor at element ``n``, or None

    Raises:
        ValueError: If n is negative

    Example:
        >>> body = begin_array(Cursor(b"[10, 20, 30]", 0))
        >>> index(2, body).pos
        9
    """
    if n < 0:
        msg = f"index must be >= 0, got {n}"
        raise ValueError(msg)
    for _ in range(n):
        cursor = element(cursor)
        if cursor is None:
            return None
    return cursor


def find(key: bytes | str, cursor: Cursor | None) -> Cursor | None:
    """Find the first member of an object body whose key equals ``key``.

    Members are scanned in source order and the first match wins, so for
    duplicate keys the earliest occurrence is returned.

    Args:
        key: Key to look for
        cursor: First member of an object body, or None

    Returns:
        Cursor at the matching member's key string, or None if no member
        matches
    """
    while cursor is not None:
        if compare(key, begin_string(cursor)) == 0:
            return cursor
        cursor = member(cursor)
    return None


def lookup(key: bytes | str, cursor: Cursor | None) -> Cursor | None:
    """Find a member by key and return a cursor at its value.

    Example:
        >>> body = begin_object(Cursor(b'{"a": 1, "b": true}', 0))
        >>> lookup("b", body).current == ord("t")
        True
    """
    return name(find(key, cursor))


def unescape(buffer: bytearray | memoryview, cursor: Cursor | None) -> Cursor | None:
    """Decode characters of a string body into a caller-supplied buffer.

    Writes at most ``len(buffer) - 1`` decoded bytes followed by a NUL
    terminator and never writes past the end of the buffer. Stopping
    because the buffer is full is a truncation, not a failure; the
    returned cursor shows how far decoding got, and decoding can resume
    from it with another buffer.

    Args:
        buffer: Writable buffer; its length is the capacity
        cursor: Start of a string body, or None

    Returns:
        Cursor after the last character written (the input cursor if none
        was written), or None if cursor was None

    Raises:
        ValueError: If the buffer has zero capacity

    Example:
        >>> buffer = bytearray(3)
        >>> rest = unescape(buffer, Cursor(b'"hello"', 1))
        >>> bytes(buffer), rest.pos
        (b'he\\x00', 3)
    """
    capacity = len(buffer)
    if capacity <= 0:
        msg = "unescape buffer capacity must be > 0"
        raise ValueError(msg)

    written = 0
    while cursor is not None and written < capacity - 1:
        decoded = character(cursor)
        if decoded is None:
            break
        buffer[written] = decoded.value
        written += 1
        cursor = decoded.cursor

    buffer[written] = 0
    return cursor


def decode_string(cursor: Cursor | None) -> ParseResult[bytes] | None:
    """Decode a whole string value.

    Sizes the buffer with string() (which counts decoded characters) and
    fills it with unescape(), so the decoded bytes are produced in one
    pass with no resizing.

    Args:
        cursor: Position of the opening quote, or None

    Returns:
        ParseResult(decoded bytes, cursor after the closing quote), or None

    Example:
        >>> decode_string(Cursor(b'"a\\\\tb"', 0)).value
        b'a\\tb'
    """
    sized = string(cursor)
    if sized is None:
        return None
    buffer = bytearray(sized.value + 1)
    unescape(buffer, begin_string(cursor))
    del buffer[-1]
    return ParseResult(bytes(buffer), sized.cursor)


def resolve(cursor: Cursor | None, path: Iterable[str | bytes | int]) -> Cursor | None:
    """Follow a path of object keys and array indices from a value.

    Each ``str``/``bytes`` step enters an object and looks up the key;
    each ``int`` step enters an array and skips to that element.

    Args:
        cursor: Position of a value (leading whitespace allowed), or None
        path: Keys and indices, outermost first

    Returns:
        Cursor at the addressed value, or None if any step does not apply
        (wrong container kind, missing key, index out of range)

    Raises:
        TypeError: If a path step is neither a key nor an int
        ValueError: If an index step is negative

    Example:
        >>> doc = Cursor(b'{"a": 1, "b": [2, 3]}', 0)
        >>> resolve(doc, ["b", 1]).current == ord("3")
        True
    """
    for step in path:
        if cursor is None:
            return None
        if isinstance(step, str | bytes):
            cursor = lookup(step, begin_object(cursor))
        elif isinstance(step, int) and not isinstance(step, bool):
            cursor = index(step, begin_array(cursor))
            if end_array(cursor) is not None:
                return None
        else:
            msg = f"path steps must be str, bytes or int, got {type(step).__name__}"
            raise TypeError(msg)
    return cursor
