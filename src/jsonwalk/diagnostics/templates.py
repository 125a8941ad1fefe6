"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate", "describe_byte"]


def describe_byte(byte: int) -> str:
    """Render a single source byte for an error message.

    Printable ASCII is quoted as-is, everything else as a hex escape.
    """
    if 0x20 <= byte < 0x7F:
        return repr(chr(byte))
    return f"0x{byte:02x}"


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every error case.
    """

    @staticmethod
    def unexpected_eof(position: int, span: SourceSpan | None = None) -> Diagnostic:
        """Input ended inside a value.

        Args:
            position: The position where EOF was encountered
            span: Location of the failure (optional)

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        msg = f"Unexpected EOF at position {position}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message=msg,
            span=span,
            hint="Check for unterminated strings or unclosed brackets",
        )

    @staticmethod
    def unexpected_byte(byte: int, position: int, span: SourceSpan | None = None) -> Diagnostic:
        """Grammar could not continue at a byte.

        Args:
            byte: The offending byte value
            position: Byte offset of the offending byte
            span: Location of the failure (optional)

        Returns:
            Diagnostic for UNEXPECTED_BYTE
        """
        msg = f"Unexpected byte {describe_byte(byte)} at position {position}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_BYTE,
            message=msg,
            span=span,
            hint="Check for trailing commas, missing colons, or invalid escapes",
        )

    @staticmethod
    def trailing_content(position: int, span: SourceSpan | None = None) -> Diagnostic:
        """A complete value was followed by more non-whitespace input.

        Args:
            position: Byte offset of the first trailing byte
            span: Location of the trailing content (optional)

        Returns:
            Diagnostic for TRAILING_CONTENT
        """
        msg = f"Unexpected content after JSON value at position {position}"
        return Diagnostic(
            code=DiagnosticCode.TRAILING_CONTENT,
            message=msg,
            span=span,
            hint="A JSON text holds exactly one value; wrap multiple values in an array",
        )

    @staticmethod
    def nesting_depth_exceeded(max_depth: int, span: SourceSpan | None = None) -> Diagnostic:
        """Arrays/objects nested deeper than the configured limit.

        Args:
            max_depth: Maximum allowed nesting depth
            span: Location of the innermost rejected bracket (optional)

        Returns:
            Diagnostic for NESTING_DEPTH_EXCEEDED
        """
        msg = f"Maximum nesting depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.NESTING_DEPTH_EXCEEDED,
            message=msg,
            span=span,
            hint="Reduce nesting or raise max_nesting_depth on the validator",
        )

    @staticmethod
    def source_too_large(size: int, max_size: int) -> Diagnostic:
        """Input larger than the configured maximum.

        Args:
            size: Actual size in bytes
            max_size: Configured limit in bytes

        Returns:
            Diagnostic for SOURCE_TOO_LARGE
        """
        msg = f"Source size ({size:,} bytes) exceeds maximum ({max_size:,} bytes)"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_TOO_LARGE,
            message=msg,
            span=None,
            hint="Configure max_source_size in the JsonValidator constructor to increase limit",
        )

    @staticmethod
    def file_unreadable(path: str, reason: str) -> Diagnostic:
        """Input file could not be read.

        Args:
            path: Path given on the command line
            reason: OS error description

        Returns:
            Diagnostic for FILE_UNREADABLE
        """
        msg = f"Cannot read '{path}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.FILE_UNREADABLE,
            message=msg,
            span=None,
            source_path=path,
        )
