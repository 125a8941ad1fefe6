"""Property-based tests for the grammar and navigation over generated JSON.

Documents come from the standard library's encoder, so every generated
text is valid and the Python value it encodes is known.
"""

from __future__ import annotations

import json
from typing import Any

import pytest
from hypothesis import HealthCheck, event, example, given, settings
from hypothesis import strategies as st

from jsonwalk import ValueKind, is_valid, validate
from jsonwalk.syntax.cursor import Cursor
from jsonwalk.syntax.navigation import resolve
from jsonwalk.syntax.parser.rules import array, object_, value
from tests.strategies import (
    WHITESPACE_RUNS,
    json_documents,
    json_values,
    malformed_documents,
)


def _kind_of(obj: Any) -> ValueKind:
    match obj:
        case None:
            return ValueKind.NULL
        case bool():
            return ValueKind.BOOLEAN
        case int() | float():
            return ValueKind.NUMBER
        case str():
            return ValueKind.STRING
        case list():
            return ValueKind.ARRAY
        case _:
            return ValueKind.OBJECT


def _paths(obj: Any, prefix: tuple[str | int, ...] = ()) -> list[tuple[str | int, ...]]:
    """Every path from the root of ``obj`` to one of its values."""
    found = [prefix]
    if isinstance(obj, list):
        for i, item in enumerate(obj):
            found.extend(_paths(item, (*prefix, i)))
    elif isinstance(obj, dict):
        for key, item in obj.items():
            found.extend(_paths(item, (*prefix, key)))
    return found


def _at(obj: Any, path: tuple[str | int, ...]) -> Any:
    for step in path:
        obj = obj[step]
    return obj


# ============================================================================
# VALIDATION
# ============================================================================


class TestGeneratedDocuments:
    """Documents produced by json.dumps are accepted."""

    @given(json_documents())
    def test_valid_with_matching_kind(self, document: tuple[Any, bytes]) -> None:
        """PROPERTY: encoder output validates and reports the top-level kind."""
        obj, source = document
        kind = _kind_of(obj)
        event(f"kind={kind}")

        result = validate(source)

        assert result.is_valid, result.errors
        assert result.kind is kind
        assert result.end == len(source)

    @given(json_documents())
    def test_container_counts(self, document: tuple[Any, bytes]) -> None:
        """PROPERTY: array/object lengths equal the encoded container's len()."""
        obj, source = document
        if isinstance(obj, list):
            event("container=list")
            result = array(Cursor(source, 0))
        elif isinstance(obj, dict):
            event("container=dict")
            result = object_(Cursor(source, 0))
        else:
            event("container=none")
            return

        assert result is not None
        assert result.value == len(obj)
        assert result.cursor.is_eof

    @given(json_documents(), WHITESPACE_RUNS, WHITESPACE_RUNS)
    def test_whitespace_padding(
        self, document: tuple[Any, bytes], before: str, after: str
    ) -> None:
        """PROPERTY: surrounding whitespace never changes validity or kind."""
        obj, source = document
        padded = before.encode() + source + after.encode()

        result = validate(padded)

        assert result.is_valid
        assert result.kind is _kind_of(obj)

    @given(json_documents())
    def test_truncation_is_invalid(self, document: tuple[Any, bytes]) -> None:
        """PROPERTY: containers and strings cut short never validate."""
        obj, source = document
        if not isinstance(obj, list | dict | str):
            event("truncation=skipped")
            return
        event("truncation=checked")

        assert not is_valid(source[:-1])

    @given(malformed_documents)
    @example(b"[1,]")
    def test_malformed_rejected(self, source: bytes) -> None:
        """PROPERTY: each known-bad document is rejected with one diagnostic."""
        result = validate(source)

        assert not result.is_valid
        assert result.error_count == 1
        assert result.errors[0].span is not None
        event(f"code={result.errors[0].code.name}")

    @given(st.binary(max_size=64))
    def test_arbitrary_bytes_never_raise(self, source: bytes) -> None:
        """PROPERTY: validate() returns a result for any input."""
        result = validate(source)

        event(f"valid={result.is_valid}")
        assert result.is_valid == (result.error_count == 0)


# ============================================================================
# NAVIGATION
# ============================================================================


class TestGeneratedNavigation:
    """resolve() reaches every value of a generated document."""

    @given(json_values, st.data())
    @settings(suppress_health_check=[HealthCheck.too_slow])
    def test_resolve_reaches_value(self, obj: Any, data: st.DataObject) -> None:
        """PROPERTY: resolve(path) lands on a value of the expected kind."""
        path = data.draw(st.sampled_from(_paths(obj)))
        indent = data.draw(st.sampled_from([None, 2]))
        source = json.dumps(obj, allow_nan=False, ensure_ascii=False, indent=indent).encode()
        event(f"path_len={min(len(path), 3)}")

        target = resolve(Cursor(source, 0), path)

        assert target is not None
        matched = value(target)
        assert matched is not None
        assert matched.value is _kind_of(_at(obj, path))

    @pytest.mark.fuzz
    @given(json_documents())
    @settings(max_examples=5000, suppress_health_check=[HealthCheck.too_slow])
    def test_fuzz_valid_documents(self, document: tuple[Any, bytes]) -> None:
        """FUZZ: long run of generated documents through the validator."""
        obj, source = document

        assert validate(source).kind is _kind_of(obj)
