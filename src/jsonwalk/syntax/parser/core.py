"""Whole-document JSON validation.

This module provides the JsonValidator class that runs the grammar over a
complete JSON text and turns the engine's bare success/failure signal into
a ValidationResult with a positioned diagnostic.

Architecture:
    The combinators in :mod:`~jsonwalk.syntax.parser.rules` only ever
    return a cursor or None. The validator owns a
    :class:`~jsonwalk.syntax.parser.primitives.ParseContext` for the run,
    so after a failure it can report the furthest offset any matcher
    reached and whether the nesting limit was the cause.

Security:
    Includes configurable input size and nesting depth limits. The engine
    has no yield points, so the size limit is what bounds validation time.
"""

import logging

from jsonwalk.constants import MAX_DEPTH, MAX_SOURCE_SIZE
from jsonwalk.diagnostics import (
    Diagnostic,
    ErrorTemplate,
    JsonSyntaxError,
    SourceSpan,
    SourceTooLargeError,
    ValidationResult,
)
from jsonwalk.enums import ValueKind
from jsonwalk.syntax.cursor import Cursor, LineOffsetCache
from jsonwalk.syntax.parser.primitives import ParseContext
from jsonwalk.syntax.parser.rules import text

__all__ = ["JsonValidator"]

logger = logging.getLogger(__name__)


class JsonValidator:
    """JSON text validator using the combinator engine.

    Design:
    - Stateless between calls; every validate() builds its own ParseContext
    - Never raises for malformed JSON (check() is the raising variant)
    - Diagnostics carry byte offset plus line:column

    Attributes:
        max_source_size: Maximum allowed source size in bytes (default: 10 MB)
        max_nesting_depth: Maximum allowed array/object nesting (default: 128)
    """

    __slots__ = ("_max_nesting_depth", "_max_source_size")

    def __init__(
        self,
        *,
        max_source_size: int | None = None,
        max_nesting_depth: int | None = None,
    ) -> None:
        """Initialize validator with optional size and nesting depth limits.

        Args:
            max_source_size: Maximum source size in bytes (default: 10 MB).
                            Set to 0 to disable size limit (not recommended).
            max_nesting_depth: Maximum nesting of arrays/objects (default: 128).
                              Clamped to what the Python stack can hold.
        """
        self._max_source_size = (
            max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        )
        self._max_nesting_depth = (
            max_nesting_depth if max_nesting_depth is not None else MAX_DEPTH
        )

    @property
    def max_source_size(self) -> int:
        """Maximum allowed source size in bytes."""
        return self._max_source_size

    @property
    def max_nesting_depth(self) -> int:
        """Maximum allowed array/object nesting depth."""
        return self._max_nesting_depth

    def validate(self, source: bytes | bytearray | str) -> ValidationResult:
        """Validate a complete JSON text.

        A text is valid iff the ``text`` production matches and the cursor
        it returns is at the end of the input.

        Args:
            source: Complete JSON text (str is encoded as UTF-8)

        Returns:
            ValidationResult. When invalid it holds exactly one diagnostic.

        Raises:
            SourceTooLargeError: If source exceeds max_source_size

        Example:
            >>> JsonValidator().validate('{"a": [1, 2]}').kind
            <ValueKind.OBJECT: 'object'>
            >>> JsonValidator().validate("[1,]").is_valid
            False
        """
        cursor = Cursor.of(source)
        size = len(cursor.source)

        if self._max_source_size > 0 and size > self._max_source_size:
            logger.debug(
                "Rejected source of %d bytes (limit %d)", size, self._max_source_size
            )
            raise SourceTooLargeError(
                ErrorTemplate.source_too_large(size, self._max_source_size)
            )

        context = ParseContext(max_nesting_depth=self._max_nesting_depth)
        result = text(cursor, context)

        if result is not None and result.cursor.is_eof:
            logger.debug("Valid JSON text (%s, %d bytes)", result.value, size)
            return ValidationResult.valid(result.value, end=size)

        if result is not None:
            diagnostic = self._trailing_content(cursor.source, result.cursor.pos)
            end = result.cursor.pos
        else:
            diagnostic = self._syntax_failure(cursor.source, context)
            end = max(context.furthest_failure, 0)

        logger.debug("Invalid JSON text: %s", diagnostic.message)
        return ValidationResult.invalid(end, diagnostic)

    def check(self, source: bytes | bytearray | str) -> ValueKind:
        """Validate a JSON text, raising on failure.

        Returns:
            Kind of the top-level value

        Raises:
            JsonSyntaxError: If the text is not valid JSON
            SourceTooLargeError: If source exceeds max_source_size
        """
        result = self.validate(source)
        if result.kind is None or result.errors:
            raise JsonSyntaxError(result.errors[0])
        return result.kind

    def _trailing_content(self, source: bytes, pos: int) -> Diagnostic:
        return ErrorTemplate.trailing_content(pos, _span(source, pos, len(source)))

    def _syntax_failure(self, source: bytes, context: ParseContext) -> Diagnostic:
        if context.depth_exceeded_at is not None:
            pos = context.depth_exceeded_at
            return ErrorTemplate.nesting_depth_exceeded(
                context.guard.max_depth, _span(source, pos, pos + 1)
            )

        pos = max(context.furthest_failure, 0)
        if pos >= len(source):
            return ErrorTemplate.unexpected_eof(pos, _span(source, pos, pos))
        return ErrorTemplate.unexpected_byte(source[pos], pos, _span(source, pos, pos + 1))


def _span(source: bytes, start: int, end: int) -> SourceSpan:
    line, column = LineOffsetCache(source).get_line_col(start)
    return SourceSpan(start=start, end=end, line=line, column=column)
