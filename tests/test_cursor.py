"""Tests for cursor infrastructure.

Validates the immutable cursor pattern over bytes.
"""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from jsonwalk.syntax.cursor import Cursor, LineOffsetCache, ParseResult

# ============================================================================
# CURSOR BASIC TESTS
# ============================================================================


class TestCursorBasic:
    """Test basic cursor functionality."""

    def test_create_cursor(self) -> None:
        """Create cursor at position 0."""
        cursor = Cursor(b"[1]", 0)

        assert cursor.source == b"[1]"
        assert cursor.pos == 0
        assert not cursor.is_eof

    def test_of_encodes_str(self) -> None:
        """Cursor.of encodes str input as UTF-8."""
        cursor = Cursor.of('"é"')

        assert cursor.source == '"é"'.encode()
        assert cursor.pos == 0

    def test_of_freezes_bytearray(self) -> None:
        """Cursor.of copies a bytearray into immutable bytes."""
        buffer = bytearray(b"[]")
        cursor = Cursor.of(buffer)
        buffer[0] = ord("{")

        assert cursor.source == b"[]"

    def test_of_keeps_bytes_object(self) -> None:
        """Cursor.of does not copy bytes input."""
        source = b"null"

        assert Cursor.of(source).source is source

    def test_cursor_immutability(self) -> None:
        """Cursor is immutable (frozen dataclass)."""
        cursor = Cursor(b"[]", 0)

        with pytest.raises(AttributeError):
            cursor.pos = 1  # type: ignore[misc]

    def test_repr_omits_source(self) -> None:
        """Repr does not dump the whole source."""
        assert "source" not in repr(Cursor(b"x" * 1000, 3))


class TestCursorAccess:
    """Test byte access and EOF detection."""

    def test_current_returns_byte_value(self) -> None:
        assert Cursor(b"[1]", 1).current == ord("1")

    def test_current_raises_eof_error_at_end(self) -> None:
        with pytest.raises(EOFError, match="Unexpected EOF"):
            _ = Cursor(b"[]", 2).current

    def test_is_eof_for_empty_source(self) -> None:
        assert Cursor(b"", 0).is_eof

    def test_peek_beyond_eof_is_none(self) -> None:
        cursor = Cursor(b"ab", 1)

        assert cursor.peek() == ord("b")
        assert cursor.peek(1) is None

    def test_advance_clamps_at_eof(self) -> None:
        assert Cursor(b"ab", 1).advance(10).pos == 2

    def test_expect_match_and_mismatch(self) -> None:
        cursor = Cursor(b"{}", 0)

        expected = cursor.expect(ord("{"))
        assert expected is not None
        assert expected.pos == 1
        assert cursor.expect(ord("[")) is None
        assert Cursor(b"{", 1).expect(ord("}")) is None

    def test_startswith_uses_offset(self) -> None:
        cursor = Cursor(b"[true]", 1)

        assert cursor.startswith(b"true")
        assert not cursor.startswith(b"[true")


class TestCursorWhitespace:
    """Test whitespace skipping."""

    def test_skips_all_four_whitespace_bytes(self) -> None:
        cursor = Cursor(b" \t\r\n1", 0).skip_whitespace()

        assert cursor.pos == 4

    def test_no_whitespace_returns_same_cursor(self) -> None:
        cursor = Cursor(b"1", 0)

        assert cursor.skip_whitespace() is cursor

    def test_other_control_bytes_are_not_whitespace(self) -> None:
        assert Cursor(b"\x0b\x0c1", 0).skip_whitespace().pos == 0


class TestCursorOrdering:
    """Cursors into the same text order by offset."""

    def test_equality_by_position(self) -> None:
        source = b"[1, 2]"

        assert Cursor(source, 2) == Cursor(source, 2)
        assert Cursor(source, 2) != Cursor(source, 3)

    def test_ordering_by_position(self) -> None:
        source = b"[1, 2]"

        assert Cursor(source, 1) < Cursor(source, 4)
        assert max(Cursor(source, 1), Cursor(source, 4)).pos == 4


class TestLineColumn:
    """Line/column computation for diagnostics."""

    def test_first_line(self) -> None:
        assert LineOffsetCache(b"[1]").get_line_col(2) == (1, 3)

    def test_after_newline(self) -> None:
        assert LineOffsetCache(b"[\n  1]").get_line_col(4) == (2, 3)

    def test_newline_byte_ends_its_line(self) -> None:
        cache = LineOffsetCache(b"[\n]")

        assert cache.get_line_col(1) == (1, 2)
        assert cache.get_line_col(2) == (2, 1)

    def test_line_offset_cache_clamps(self) -> None:
        cache = LineOffsetCache(b"ab\ncd")

        assert cache.get_line_col(-5) == (1, 1)
        assert cache.get_line_col(99) == (2, 3)

    @given(source=st.binary(max_size=64), data=st.data())
    def test_cache_agrees_with_newline_count(self, source: bytes, data: st.DataObject) -> None:
        """PROPERTY: line is newlines before pos plus one; column counts bytes."""
        pos = data.draw(st.integers(min_value=0, max_value=len(source)))

        line = source.count(b"\n", 0, pos) + 1
        column = pos - source.rfind(b"\n", 0, pos)

        assert LineOffsetCache(source).get_line_col(pos) == (line, column)


class TestParseResult:
    """ParseResult pairs a decoded value with the next cursor."""

    def test_fields(self) -> None:
        result = ParseResult(3, Cursor(b"[1,2,3]", 7))

        assert result.value == 3
        assert result.cursor.is_eof

    def test_frozen(self) -> None:
        result = ParseResult(True, Cursor(b"true", 4))

        with pytest.raises(AttributeError):
            result.value = False  # type: ignore[misc]
