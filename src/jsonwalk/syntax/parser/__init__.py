"""JSON combinator engine.

Tiers, each depending only on the ones above it in this list:
    primitives  - literal matchers, ordered alternatives, numbers, characters
    whitespace  - insignificant whitespace and structural tokens
    rules       - value, array, object, string, literals, text
    core        - JsonValidator (whole-document validation with diagnostics)
"""

from .core import JsonValidator
from .primitives import ParseContext

__all__ = ["JsonValidator", "ParseContext"]
