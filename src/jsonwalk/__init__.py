"""jsonwalk - zero-copy JSON validation and in-place navigation.

Validates JSON text against the RFC 8259 grammar and walks it in place:
composable matchers move an immutable cursor over the original bytes and
decode scalars (booleans, numbers, string lengths, unescaped strings) on
demand. No parse tree is ever built.

Public API:
    validate - Validate a complete JSON text, returning a ValidationResult
    is_valid - Boolean shortcut for validate()
    JsonValidator - Validator with configurable size and nesting limits
    Cursor - Immutable position in a JSON text
    ValueKind - Kind tag of a matched value

Exceptions:
    JsonWalkError - Base exception class
    JsonSyntaxError - Raised by JsonValidator.check() for invalid text
    SourceTooLargeError - Input exceeds the configured size limit

Submodules:
    jsonwalk.syntax.parser.primitives - literal matchers, number, character
    jsonwalk.syntax.parser.whitespace - structural tokens
    jsonwalk.syntax.parser.rules - value, array, object, string, text
    jsonwalk.syntax.navigation - index, find, lookup, compare, unescape
    jsonwalk.diagnostics - Diagnostic types and formatting
"""

from .diagnostics import JsonSyntaxError, JsonWalkError, SourceTooLargeError
from .enums import ValueKind
from .syntax import Cursor, JsonValidator, is_valid, validate

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("jsonwalk")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

# Grammar conformance
__json_spec__ = "RFC 8259"

__all__ = [
    "Cursor",
    "JsonSyntaxError",
    "JsonValidator",
    "JsonWalkError",
    "SourceTooLargeError",
    "ValueKind",
    "__json_spec__",
    "__version__",
    "is_valid",
    "validate",
]
