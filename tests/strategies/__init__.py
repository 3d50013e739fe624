"""Hypothesis strategies for formatnumber property-based testing.

Usage:
    from tests.strategies import finite_numbers, locale_conventions

Event-Emitting Strategies (HypoFuzz-Optimized):
    - finite_numbers, sign_positions
"""

from .numbers import (
    SAMPLE_LOCALES,
    SEPARATORS,
    finite_numbers,
    locale_conventions,
    non_numeric_text,
    sign_positions,
)

__all__ = [
    "SAMPLE_LOCALES",
    "SEPARATORS",
    "finite_numbers",
    "locale_conventions",
    "non_numeric_text",
    "sign_positions",
]
