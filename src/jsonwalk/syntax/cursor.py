"""Immutable cursor infrastructure for zero-copy JSON matching.

Implements the immutable cursor pattern over a resident ``bytes`` buffer.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - A cursor never owns the text; it is an offset into the caller's buffer
    - EOF is a state (is_eof), standing in for a terminating sentinel byte
    - Every advance() returns NEW cursor (prevents infinite loops)
    - Matching never slices the source (bytes.startswith with an offset)
    - Line:column computed on-demand (O(n) only for errors)

Failure Sentinel:
    Combinators return ``Cursor | None``; ``None`` is the universal
    "no match" value and every combinator passes it through unchanged.

Pattern Reference:
    - Rust nom parser combinator library
    - Haskell Parsec
"""

from dataclasses import dataclass, field

from jsonwalk.constants import WHITESPACE
from jsonwalk.diagnostics import ErrorTemplate

__all__ = ["Cursor", "LineOffsetCache", "ParseResult"]


@dataclass(frozen=True, slots=True, order=True)
class Cursor:
    """Immutable position in a JSON text.

    Key Design Decisions:
        1. Frozen dataclass - Immutability enforced by Python
        2. Slots - Cursors are created for every matched byte
        3. Simple position - Just an integer offset
        4. EOF is a property - Not a return value
        5. Ordering - Cursors into the same text order by offset

    Example:
        >>> cursor = Cursor(b"[1]", 0)
        >>> cursor.current
        91
        >>> cursor.advance().current == ord("1")
        True
        >>> Cursor(b"[1]", 3).is_eof
        True
    """

    source: bytes = field(repr=False)
    pos: int = 0

    @classmethod
    def of(cls, text: bytes | bytearray | str) -> "Cursor":
        """Create a cursor at the start of ``text``.

        ``str`` input is encoded to UTF-8 once; ``bytearray`` is frozen to
        ``bytes`` so the text cannot change under live cursors.
        """
        if isinstance(text, str):
            return cls(text.encode("utf-8"), 0)
        return cls(bytes(text), 0)

    @property
    def is_eof(self) -> bool:
        """Check if at end of input.

        Returns:
            True if position >= source length
        """
        return self.pos >= len(self.source)

    @property
    def current(self) -> int:
        """Get current byte.

        Returns:
            Byte value at position

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            diagnostic = ErrorTemplate.unexpected_eof(self.pos)
            raise EOFError(diagnostic.message)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> int | None:
        """Peek at byte with offset without advancing.

        Args:
            offset: Offset from current position (0 = current, 1 = next)

        Returns:
            Byte at position + offset, or None if beyond EOF
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions.

        Args:
            count: Number of positions to advance (default: 1)

        Returns:
            New Cursor instance at new position (original unchanged)

        Example:
            >>> cursor = Cursor(b"true", 0)
            >>> cursor.advance(4).pos
            4
            >>> cursor.pos  # Original unchanged
            0
        """
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def startswith(self, prefix: bytes) -> bool:
        """Check whether the text at this position begins with ``prefix``.

        Uses ``bytes.startswith`` with a start offset, so no slice of the
        source is created.
        """
        return self.source.startswith(prefix, self.pos)

    def expect(self, byte: int) -> "Cursor | None":
        """Consume byte if it matches expected, return None otherwise.

        Example:
            >>> Cursor(b"[]", 0).expect(ord("[")).pos
            1
            >>> Cursor(b"[]", 0).expect(ord("{")) is None
            True
        """
        if self.pos < len(self.source) and self.source[self.pos] == byte:
            return Cursor(self.source, self.pos + 1)
        return None

    def skip_whitespace(self) -> "Cursor":
        """Skip JSON insignificant whitespace (space, tab, LF, CR).

        Returns:
            New cursor advanced past all consecutive whitespace bytes,
            or this cursor if there are none.
        """
        source = self.source
        end = len(source)
        pos = self.pos
        while pos < end and source[pos] in WHITESPACE:
            pos += 1
        if pos == self.pos:
            return self
        return Cursor(source, pos)


class LineOffsetCache:
    """Cached line offset computation for efficient position lookups.

    Precomputes line start offsets in O(n) single pass, then provides
    O(log n) lookups using binary search. Use this when you need to
    compute line:column for multiple positions in the same source.

    Example:
        >>> cache = LineOffsetCache(b"[1,\\n 2]")
        >>> cache.get_line_col(0)
        (1, 1)
        >>> cache.get_line_col(5)
        (2, 2)

    Thread Safety:
        Thread-safe. Internal state is only set during __init__.
    """

    __slots__ = ("_offsets", "_source_len")

    def __init__(self, source: bytes) -> None:
        """Build line offset cache from source.

        Complexity:
            O(n) where n = len(source)
        """
        offsets = [0]
        newline = source.find(b"\n")
        while newline >= 0:
            offsets.append(newline + 1)
            newline = source.find(b"\n", newline + 1)
        self._offsets: tuple[int, ...] = tuple(offsets)
        self._source_len = len(source)

    def get_line_col(self, pos: int) -> tuple[int, int]:
        """Get line and column for position using binary search.

        Args:
            pos: Byte position in source (0-indexed)

        Returns:
            (line, column) tuple (1-indexed)
        """
        if pos < 0:
            pos = 0
        elif pos > self._source_len:
            pos = self._source_len

        # Line number = index of largest offset <= pos
        left, right = 0, len(self._offsets) - 1
        while left < right:
            mid = (left + right + 1) // 2
            if self._offsets[mid] <= pos:
                left = mid
            else:
                right = mid - 1

        return (left + 1, pos - self._offsets[left] + 1)


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Matcher result containing a decoded value and the next cursor.

    Type Parameters:
        T: The type of the decoded value

    Design:
        - Generic over result type T
        - Frozen for immutability
        - Stands in for an optional out-parameter: callers that do not
          care about the decoded value just read ``.cursor``

    Pattern:
        Every value-producing matcher has signature:
            def foo(cursor: Cursor | None) -> ParseResult[T] | None

    Example:
        >>> result = ParseResult(True, Cursor(b"true", 4))
        >>> result.value
        True
        >>> result.cursor.is_eof
        True
    """

    value: T
    cursor: Cursor
