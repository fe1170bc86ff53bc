"""Carriage syntax package.

Provides the cursor, the outcome algebra, and the parser-combinator runtime.
Grammars built on top of it live in :mod:`carriage.grammars`.

Python 3.13+.
"""

from .cursor import Cursor
from .outcome import Either, Failure, Left, ParseOutcome, Right, Success, failure, success
from .parser import (
    Parser,
    TraceEvent,
    alternation,
    bind,
    constant,
    end_of_input,
    lazy,
    literal,
    number,
    one_or_more,
    parse_text,
    sequence,
    tracing,
    transform,
    word,
    zero_or_more,
)

__all__ = [
    "Cursor",
    "Either",
    "Failure",
    "Left",
    "ParseOutcome",
    "Parser",
    "Right",
    "Success",
    "TraceEvent",
    "alternation",
    "bind",
    "constant",
    "end_of_input",
    "failure",
    "lazy",
    "literal",
    "number",
    "one_or_more",
    "parse_text",
    "sequence",
    "success",
    "tracing",
    "transform",
    "word",
    "zero_or_more",
]
