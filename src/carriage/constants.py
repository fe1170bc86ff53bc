"""Shared constants for Carriage.

This module provides centralized limits used across the syntax and
diagnostics packages. Placing constants here avoids circular imports and
provides a single source of truth.

Constants are grouped by domain:
- Input limits: bounds on what a single primitive will consume
- Depth limits: recursion protection for self-referential grammars
- Diagnostic limits: how much unmatched input a failure reports

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Input limits
    "MAX_NUMBER_DIGITS",
    # Depth limits
    "MAX_NESTING_DEPTH",
    # Diagnostic limits
    "SNAPSHOT_WIDTH",
    "EMPTY_MARKER",
]

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Longest digit run number() converts to an int.
# Python ints are unbounded, so there is no overflow in the C sense. The limit
# matches CPython's default int/str conversion limit (sys.int_info), which
# int() would otherwise enforce by raising ValueError mid-parse.
MAX_NUMBER_DIGITS: int = 4300

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum nesting of lazy() parsers within a single parse.
# Python default recursion limit: 1000. A lazy level in a typical grammar costs
# around eight interpreter frames (parse -> run for lazy, bind, alternation and
# sequence), so 50 levels stay well under the limit.
MAX_NESTING_DEPTH: int = 50

# ============================================================================
# DIAGNOSTIC LIMITS
# ============================================================================

# Maximum characters of unmatched input quoted in a failure's `actual` field.
SNAPSHOT_WIDTH: int = 20

# `actual` value reported when a primitive found nothing to consume.
EMPTY_MARKER: str = "empty"
