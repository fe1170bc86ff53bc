"""Parser-combinator runtime.

Module Organization:
- core.py: Parser value type and parse_text() entry point
- primitives.py: literal, word, number, constant, end_of_input
- combinators.py: sequence, alternation, bind, transform, repetition, lazy
- tracing.py: Optional per-invocation trace hook

Public API:
    Parser: Immutable parser value (methods mirror the combinators)
    parse_text: Run a parser over a whole string or raise CarriageSyntaxError
"""

from carriage.syntax.parser.combinators import (
    alternation,
    bind,
    lazy,
    one_or_more,
    sequence,
    transform,
    zero_or_more,
)
from carriage.syntax.parser.core import Parser, parse_text
from carriage.syntax.parser.primitives import constant, end_of_input, literal, number, word
from carriage.syntax.parser.tracing import TraceEvent, TraceHook, tracing

__all__ = [
    "Parser",
    "TraceEvent",
    "TraceHook",
    "alternation",
    "bind",
    "constant",
    "end_of_input",
    "lazy",
    "literal",
    "number",
    "one_or_more",
    "parse_text",
    "sequence",
    "tracing",
    "transform",
    "word",
    "zero_or_more",
]
