"""Whitespace and structural token matchers.

Per RFC 8259, insignificant whitespace may appear before or after any of
the six structural characters:

    begin-array     = ws %x5B ws  ; [
    begin-object    = ws %x7B ws  ; {
    end-array       = ws %x5D ws  ; ]
    end-object      = ws %x7D ws  ; }
    name-separator  = ws %x3A ws  ; :
    value-separator = ws %x2C ws  ; ,

so each structural matcher absorbs the whitespace around its byte.
Quotation marks are different: whitespace inside a string is significant,
so begin_string/end_string match the bare byte.
"""

from jsonwalk.syntax.cursor import Cursor
from jsonwalk.syntax.parser.primitives import literal_char

__all__ = [
    "begin_array",
    "begin_object",
    "begin_string",
    "end_array",
    "end_object",
    "end_string",
    "name_separator",
    "skip_ws",
    "value_separator",
]


def skip_ws(cursor: Cursor | None) -> Cursor | None:
    """Skip a run of space, tab, LF and CR bytes.

    Never fails: with no whitespace present the cursor is returned
    unchanged. A None cursor passes through so skip_ws composes with
    failing matchers.

    Design:
        Idempotent. skip_ws(skip_ws(c)) == skip_ws(c).
    """
    if cursor is None:
        return None
    return cursor.skip_whitespace()


def _structural(char: str, cursor: Cursor | None) -> Cursor | None:
    return skip_ws(literal_char(char, skip_ws(cursor)))


def begin_array(cursor: Cursor | None) -> Cursor | None:
    """Match ``[`` with surrounding whitespace."""
    return _structural("[", cursor)


def end_array(cursor: Cursor | None) -> Cursor | None:
    """Match ``]`` with surrounding whitespace."""
    return _structural("]", cursor)


def begin_object(cursor: Cursor | None) -> Cursor | None:
    """Match ``{`` with surrounding whitespace."""
    return _structural("{", cursor)


def end_object(cursor: Cursor | None) -> Cursor | None:
    """Match ``}`` with surrounding whitespace."""
    return _structural("}", cursor)


def name_separator(cursor: Cursor | None) -> Cursor | None:
    """Match ``:`` with surrounding whitespace."""
    return _structural(":", cursor)


def value_separator(cursor: Cursor | None) -> Cursor | None:
    """Match ``,`` with surrounding whitespace."""
    return _structural(",", cursor)


def begin_string(cursor: Cursor | None) -> Cursor | None:
    """Match the opening ``"`` of a string (no whitespace skipping)."""
    return literal_char('"', cursor)


def end_string(cursor: Cursor | None) -> Cursor | None:
    """Match the closing ``"`` of a string (no whitespace skipping)."""
    return literal_char('"', cursor)
