"""Performance benchmarks for Carriage.

Benchmarks use pytest-benchmark to measure and track performance of critical operations.
Prevents performance regressions in primitives, combinators and the example grammars.

Python 3.13+.
"""

from __future__ import annotations

__all__: list[str] = []
