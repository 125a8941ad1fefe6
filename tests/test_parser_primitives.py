"""Tests for syntax/parser/primitives.py.

Literal matchers, ordered alternation, number decoding and string
character decoding.
"""

from __future__ import annotations

import math

import pytest
from hypothesis import event, example, given
from hypothesis import strategies as st

from jsonwalk.syntax.cursor import Cursor
from jsonwalk.syntax.parser.primitives import (
    ParseContext,
    character,
    first_match_of,
    literal_char,
    literal_str,
    number,
)

# ============================================================================
# LITERALS
# ============================================================================


class TestLiteralChar:
    """Test literal_char()."""

    def test_matches_str_char(self) -> None:
        result = literal_char("[", Cursor(b"[]", 0))

        assert result is not None
        assert result.pos == 1

    def test_matches_int_byte(self) -> None:
        result = literal_char(ord("]"), Cursor(b"[]", 1))

        assert result is not None
        assert result.is_eof

    def test_mismatch_fails(self) -> None:
        assert literal_char("{", Cursor(b"[]", 0)) is None

    def test_eof_fails(self) -> None:
        assert literal_char("]", Cursor(b"[", 1)) is None

    def test_none_propagates(self) -> None:
        assert literal_char("[", None) is None


class TestLiteralStr:
    """Test literal_str()."""

    @pytest.mark.parametrize("text", ["null", b"null"])
    def test_matches_prefix(self, text: str | bytes) -> None:
        result = literal_str(text, Cursor(b"null,", 0))

        assert result is not None
        assert result.pos == 4

    def test_partial_match_fails(self) -> None:
        assert literal_str("true", Cursor(b"tru", 0)) is None

    def test_does_not_advance_on_failure(self) -> None:
        cursor = Cursor(b"nope", 0)

        assert literal_str("null", cursor) is None
        assert cursor.pos == 0

    def test_none_propagates(self) -> None:
        assert literal_str("null", None) is None


class TestFirstMatchOf:
    """Test ordered alternation."""

    def test_first_success_wins(self) -> None:
        calls: list[str] = []

        def first(cursor: Cursor | None) -> Cursor | None:
            calls.append("first")
            return literal_str("ab", cursor)

        def second(cursor: Cursor | None) -> Cursor | None:
            calls.append("second")
            return literal_str("a", cursor)

        match = first_match_of(first, second)
        result = match(Cursor(b"abc", 0))

        assert result is not None
        assert result.pos == 2
        assert calls == ["first"]

    def test_falls_through_in_order(self) -> None:
        match = first_match_of(
            lambda c: literal_str("x", c),
            lambda c: literal_str("a", c),
            lambda c: literal_str("ab", c),
        )

        result = match(Cursor(b"abc", 0))

        assert result is not None
        assert result.pos == 1

    def test_all_fail(self) -> None:
        match = first_match_of(lambda c: literal_str("x", c), lambda c: literal_str("y", c))

        assert match(Cursor(b"z", 0)) is None

    def test_no_alternatives(self) -> None:
        assert first_match_of()(Cursor(b"z", 0)) is None


# ============================================================================
# NUMBER
# ============================================================================


class TestNumber:
    """Test number() grammar and decoding."""

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            (b"0", 0.0),
            (b"-0", -0.0),
            (b"7", 7.0),
            (b"-3", -3.0),
            (b"3.5", 3.5),
            (b"100", 100.0),
            (b"1e2", 100.0),
            (b"1E+2", 100.0),
            (b"-2.5e-1", -0.25),
            (b"0.125", 0.125),
            (b"25e-2", 0.25),
        ],
    )
    def test_decodes_value(self, source: bytes, expected: float) -> None:
        result = number(Cursor(source, 0))

        assert result is not None
        assert result.value == expected
        assert result.cursor.is_eof

    def test_negative_zero_keeps_sign(self) -> None:
        result = number(Cursor(b"-0", 0))

        assert result is not None
        assert math.copysign(1.0, result.value) == -1.0

    def test_leading_zero_stops_after_zero(self) -> None:
        """'01' matches '0' only; the caller sees the leftover '1'."""
        result = number(Cursor(b"01", 0))

        assert result is not None
        assert result.value == 0.0
        assert result.cursor.pos == 1

    def test_stops_at_delimiter(self) -> None:
        result = number(Cursor(b"42]", 0))

        assert result is not None
        assert result.cursor.pos == 2

    @pytest.mark.parametrize(
        "source",
        [b"", b"-", b"+1", b".5", b"1.", b"1.e3", b"1e", b"1e+", b"-a", b"abc", b"- 1"],
    )
    def test_malformed_fails(self, source: bytes) -> None:
        assert number(Cursor(source, 0)) is None

    def test_large_exponent_overflows_to_inf(self) -> None:
        result = number(Cursor(b"1e400", 0))

        assert result is not None
        assert result.value == math.inf

    def test_exponent_above_limit_fails(self) -> None:
        assert number(Cursor(b"1e32768", 0)) is None

    def test_exponent_at_limit_accepted(self) -> None:
        result = number(Cursor(b"0e32767", 0))

        assert result is not None
        assert result.value == 0.0

    def test_fraction_longer_than_limit_fails(self) -> None:
        source = b"0." + b"1" * 32768

        assert number(Cursor(source, 0)) is None

    def test_failure_recorded_in_context(self) -> None:
        context = ParseContext()

        assert number(Cursor(b"1.x", 0), context) is None
        assert context.furthest_failure == 2

    def test_none_propagates(self) -> None:
        assert number(None) is None

    @given(st.integers(min_value=-(2**53), max_value=2**53))
    @example(0)
    @example(-1)
    def test_integers_decode_exactly(self, n: int) -> None:
        """PROPERTY: integers within float precision decode exactly."""
        event(f"sign={'negative' if n < 0 else 'non-negative'}")
        result = number(Cursor(str(n).encode(), 0))

        assert result is not None
        assert result.value == float(n)
        assert result.cursor.is_eof

    @given(
        st.floats(allow_nan=False, allow_infinity=False, min_value=-1e6, max_value=1e6)
    )
    def test_repr_floats_decode_close(self, x: float) -> None:
        """PROPERTY: Python float reprs decode to a nearby value."""
        source = repr(x).encode()
        event(f"has_exponent={b'e' in source}")
        result = number(Cursor(source, 0))

        assert result is not None
        assert result.cursor.is_eof
        assert math.isclose(result.value, x, rel_tol=1e-9, abs_tol=1e-300)


# ============================================================================
# CHARACTER
# ============================================================================


class TestCharacter:
    """Test character() decoding of one string-body character."""

    @pytest.mark.parametrize(
        ("source", "expected", "width"),
        [
            (b"a", ord("a"), 1),
            (b" ", ord(" "), 1),
            (b"\\\"", ord('"'), 2),
            (b"\\\\", ord("\\"), 2),
            (b"\\/", ord("/"), 2),
            (b"\\b", 0x08, 2),
            (b"\\f", 0x0C, 2),
            (b"\\n", 0x0A, 2),
            (b"\\r", 0x0D, 2),
            (b"\\t", 0x09, 2),
            (b"\\u0041", ord("A"), 6),
            (b"\\u006a", ord("j"), 6),
            (b"\\u006A", ord("j"), 6),
            (b"\\u007F", 0x7F, 6),
            (b"\\u0000", 0, 6),
        ],
    )
    def test_decodes(self, source: bytes, expected: int, width: int) -> None:
        result = character(Cursor(source, 0))

        assert result is not None
        assert result.value == expected
        assert result.cursor.pos == width

    @pytest.mark.parametrize("source", [b"\\u0080", b"\\u00e9", b"\\uFFFF", b"\\uD83D"])
    def test_non_ascii_escape_decodes_to_sentinel(self, source: bytes) -> None:
        result = character(Cursor(source, 0))

        assert result is not None
        assert result.value == 0
        assert result.cursor.pos == 6

    def test_raw_utf8_bytes_pass_through(self) -> None:
        source = "é".encode()
        first = character(Cursor(source, 0))

        assert first is not None
        assert first.value == source[0]
        second = character(first.cursor)
        assert second is not None
        assert second.value == source[1]

    @pytest.mark.parametrize(
        "source",
        [b"", b'"', b"\x00", b"\x1f", b"\n", b"\\", b"\\x", b"\\u12", b"\\u12g4", b"\\U0041"],
    )
    def test_rejects(self, source: bytes) -> None:
        assert character(Cursor(source, 0)) is None

    def test_failure_position_for_bad_hex(self) -> None:
        context = ParseContext()

        assert character(Cursor(b"\\u00zz", 0), context) is None
        assert context.furthest_failure == 4

    def test_none_propagates(self) -> None:
        assert character(None) is None

    @given(st.integers(min_value=0x20, max_value=0xFF).filter(lambda b: b not in b'"\\'))
    def test_unescaped_bytes_pass_through(self, byte: int) -> None:
        """PROPERTY: every byte >= 0x20 other than quote/backslash decodes to itself."""
        event(f"ascii={byte < 0x80}")
        result = character(Cursor(bytes([byte]), 0))

        assert result is not None
        assert result.value == byte

    @given(st.integers(min_value=0, max_value=0x7F))
    def test_ascii_unicode_escape_decodes_to_code_point(self, code_point: int) -> None:
        """PROPERTY: \\uXXXX for ASCII code points decodes to the code point."""
        result = character(Cursor(f"\\u{code_point:04x}".encode(), 0))

        assert result is not None
        assert result.value == code_point


# ============================================================================
# PARSE CONTEXT
# ============================================================================


class TestParseContext:
    """Test ParseContext failure and depth bookkeeping."""

    def test_defaults(self) -> None:
        context = ParseContext()

        assert context.furthest_failure == -1
        assert context.depth_exceeded_at is None
        assert context.current_depth == 0

    def test_record_failure_keeps_maximum(self) -> None:
        context = ParseContext()

        context.record_failure(5)
        context.record_failure(2)

        assert context.furthest_failure == 5

    def test_record_depth_exceeded_keeps_first(self) -> None:
        context = ParseContext()

        context.record_depth_exceeded(7)
        context.record_depth_exceeded(3)

        assert context.depth_exceeded_at == 7
        assert context.furthest_failure == 7

    def test_guard_uses_max_nesting_depth(self) -> None:
        assert ParseContext(max_nesting_depth=3).guard.max_depth == 3
