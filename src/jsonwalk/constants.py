"""Shared constants for jsonwalk.

This module provides centralized configuration constants used across
the syntax, navigation, and CLI layers. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Depth limits: Recursion protection for the grammar combinators
- Input limits: DoS prevention via size constraints
- Number limits: Bounds on the decimal-shift counters of number parsing
- Lexical sets: Byte classes shared by matchers

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    "FRAMES_PER_NESTING_LEVEL",
    "STACK_RESERVE_FRAMES",
    # Input limits
    "MAX_SOURCE_SIZE",
    # Number limits
    "MAX_EXPONENT_DIGITS_VALUE",
    # Lexical sets
    "WHITESPACE",
    "ASCII_DIGITS",
    "HEX_DIGITS",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================
#
# The grammar is a mutually recursive descent parser: value -> array -> value
# -> object -> value ... Every nesting level of a JSON document costs a fixed
# number of Python frames, so unbounded input nesting would eventually raise
# RecursionError from deep inside the parser.
#
# MAX_DEPTH bounds the number of nested arrays/objects. Past the limit the
# structured production fails like any other syntax failure.
#
# 128 was chosen so that the default limit fits inside Python's default
# recursion limit (1000) at FRAMES_PER_NESTING_LEVEL frames per level, with
# STACK_RESERVE_FRAMES left over for the caller's stack and the leaf matchers.
#
# The effective limit is clamped when a parse context is built, against the
# frames still free at that point (see core.depth_guard.depth_clamp).
#
# ============================================================================

# Maximum nesting depth of arrays and objects.
MAX_DEPTH: int = 128

# Python stack frames consumed by one nesting level of the grammar
# (value -> ordered alternative -> kind tag -> array/object).
FRAMES_PER_NESTING_LEVEL: int = 4

# Frames kept free below the deepest nesting level for scalar matchers and
# for the depth guard raising its error.
STACK_RESERVE_FRAMES: int = 100

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum source size in bytes (10 MB).
# The whole document must be resident; this bounds memory and parse time.
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# NUMBER LIMITS
# ============================================================================

# Largest fraction digit count and exponent magnitude accepted by number().
# Matches the positive range of a signed 16-bit counter. Longer digit runs
# fail the number production instead of wrapping around.
MAX_EXPONENT_DIGITS_VALUE: int = 32767

# ============================================================================
# LEXICAL SETS
# ============================================================================

# Insignificant whitespace per RFC 8259: space, tab, line feed, carriage return.
WHITESPACE: bytes = b" \t\n\r"

# ASCII digits only. bytes.isdigit() is ASCII-only too, but membership
# tests against a constant read closer to the grammar.
ASCII_DIGITS: bytes = b"0123456789"

# Valid hexadecimal digits for \uXXXX escapes (case-insensitive).
HEX_DIGITS: bytes = b"0123456789abcdefABCDEF"
