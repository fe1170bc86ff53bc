"""Carriage - a minimal parser-combinator runtime.

Build recursive-descent parsers for small textual grammars out of primitive
parsers and composition operators, without hand-rolled lexers.

Public API:
    Cursor - Immutable (text, offset) position
    Success, Failure - Parse outcomes
    Left, Right - Alternation results
    Parser - Immutable parser value
    literal, word, number, constant, end_of_input - Primitive parsers
    sequence, alternation, bind, transform, zero_or_more, one_or_more, lazy - Combinators
    parse_text - Run a parser over a whole string
    tracing - Install a per-invocation trace hook

Exceptions:
    CarriageError - Base exception class
    CarriageSyntaxError - Input rejected by parse_text()
    CarriageGrammarError - Parser composition misused

Submodules:
    carriage.grammars - Example grammars (quoted literals, arithmetic, editing commands)
    carriage.diagnostics - Diagnostic codes, templates and formatting
"""

from .diagnostics import CarriageError, CarriageGrammarError, CarriageSyntaxError
from .syntax import (
    Cursor,
    Either,
    Failure,
    Left,
    ParseOutcome,
    Parser,
    Right,
    Success,
    TraceEvent,
    alternation,
    bind,
    constant,
    end_of_input,
    failure,
    lazy,
    literal,
    number,
    one_or_more,
    parse_text,
    sequence,
    success,
    tracing,
    transform,
    word,
    zero_or_more,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("carriage")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CarriageError",
    "CarriageGrammarError",
    "CarriageSyntaxError",
    "Cursor",
    "Either",
    "Failure",
    "Left",
    "ParseOutcome",
    "Parser",
    "Right",
    "Success",
    "TraceEvent",
    "__version__",
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
