"""Diagnostic system for jsonwalk errors.

Provides structured error diagnostics with codes, spans, and hints.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import JsonSyntaxError, JsonWalkError, SourceTooLargeError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate
from .validation import ValidationResult

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "JsonSyntaxError",
    "JsonWalkError",
    "OutputFormat",
    "SourceSpan",
    "SourceTooLargeError",
    "ValidationResult",
]
