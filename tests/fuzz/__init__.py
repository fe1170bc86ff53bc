"""Fuzz testing infrastructure for Carriage.

This package contains:
- test_nesting_depth_exhaustion: Boundary testing for MAX_NESTING_DEPTH
- test_grammar_robustness: Arbitrary input against the example grammars

Python 3.13+.
"""
