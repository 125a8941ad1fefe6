"""Hypothesis strategies for jsonwalk property-based testing.

Usage:
    from tests.strategies import json_documents, malformed_documents
"""

from .documents import (
    WHITESPACE_RUNS,
    json_documents,
    json_scalars,
    json_values,
    malformed_documents,
)

__all__ = [
    "WHITESPACE_RUNS",
    "json_documents",
    "json_scalars",
    "json_values",
    "malformed_documents",
]
