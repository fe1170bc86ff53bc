"""Parser value type and the parse_text() entry point.

Architecture:
    A :class:`Parser` wraps a pure function ``Cursor -> ParseOutcome[T]``.
    Primitives (:mod:`~carriage.syntax.parser.primitives`) build parsers
    directly against the cursor; combinators
    (:mod:`~carriage.syntax.parser.combinators`) build parsers from other
    parsers. Grammars are assembled once and reused for every parse.

    Parsers hold no mutable state. The same (parser, cursor) pair always
    yields the same outcome, which is what makes backtracking free: a failed
    alternative simply leaves the caller holding its original Cursor.

Observability:
    Parser.parse() is the single invocation boundary. It reports to the
    context's trace hook (:mod:`~carriage.syntax.parser.tracing`) and, when
    DEBUG is enabled for this module's logger, logs each outcome.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from carriage.constants import SNAPSHOT_WIDTH
from carriage.diagnostics import CarriageSyntaxError, DiagnosticCode, ErrorTemplate
from carriage.syntax.cursor import Cursor
from carriage.syntax.outcome import Failure, ParseOutcome, Success
from carriage.syntax.parser.tracing import TraceEvent, current_hook

if TYPE_CHECKING:
    from carriage.syntax.outcome import Either

__all__ = ["Parser", "parse_text"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, eq=False)
class Parser[T]:
    """Immutable, reusable parser value.

    Combinators are available both as free functions in
    :mod:`~carriage.syntax.parser.combinators` and as methods here:

    ================  ==========  ==========================================
    Method            Operator    Meaning
    ================  ==========  ==========================================
    ``and_(q)``       ``p >> q``  run p then q, keep q's value
    ``or_(q)``        ``p | q``   first success wins, tagged Left/Right
    ``map(f)``                    bind: ``f(value)`` returns the next parser
    ``transform(f)``              plain value transform
    ``zero_or_more()``            repeat, never fails
    ``one_or_more()``             repeat, first attempt required
    ================  ==========  ==========================================

    Attributes:
        run: Function from Cursor to ParseOutcome
        name: Description used in traces, logs and repr
    """

    run: Callable[[Cursor], ParseOutcome[T]]
    name: str = "parser"

    def parse(self, cursor: Cursor) -> ParseOutcome[T]:
        """Run this parser at ``cursor``."""
        outcome = self.run(cursor)

        hook = current_hook()
        if hook is not None:
            hook(TraceEvent(self.name, cursor, outcome))

        if logger.isEnabledFor(logging.DEBUG):
            match outcome:
                case Success(next_cursor=rest):
                    logger.debug(
                        "%s at %d: matched through %d", self.name, cursor.offset, rest.offset
                    )
                case Failure(at_cursor=at, expected=expected, actual=actual):
                    logger.debug(
                        "%s at %d: failed at %d (expected %s, found %s)",
                        self.name,
                        cursor.offset,
                        at.offset,
                        expected,
                        actual,
                    )

        return outcome

    def named(self, name: str) -> Parser[T]:
        """Same parser under a different name; outcomes are unchanged."""
        return Parser(self.run, name)

    def __repr__(self) -> str:
        return f"<Parser {self.name}>"

    # Combinator methods import lazily: combinators builds on this module.

    def and_[U](self, other: Parser[U]) -> Parser[U]:
        """Sequence: run self, then ``other`` from where self stopped."""
        from carriage.syntax.parser.combinators import sequence  # noqa: PLC0415 - circular

        return sequence(self, other)

    def __rshift__[U](self, other: Parser[U]) -> Parser[U]:
        """>> is shortcut for and_"""
        return self.and_(other)

    def or_[U](self, other: Parser[U]) -> Parser[Either[T, U]]:
        """Alternation: self, or else ``other`` from the original cursor."""
        from carriage.syntax.parser.combinators import alternation  # noqa: PLC0415 - circular

        return alternation(self, other)

    def __or__[U](self, other: Parser[U]) -> Parser[Either[T, U]]:
        """| is shortcut for or_"""
        return self.or_(other)

    def map[U](self, continuation: Callable[[T], Parser[U]]) -> Parser[U]:
        """Bind: feed the success value to ``continuation`` and run its parser."""
        from carriage.syntax.parser.combinators import bind  # noqa: PLC0415 - circular

        return bind(self, continuation)

    def transform[U](self, function: Callable[[T], U]) -> Parser[U]:
        """Replace the success value with ``function(value)``."""
        from carriage.syntax.parser.combinators import transform  # noqa: PLC0415 - circular

        return transform(self, function)

    def zero_or_more(self) -> Parser[list[T]]:
        """Repeat until failure; always succeeds."""
        from carriage.syntax.parser.combinators import zero_or_more  # noqa: PLC0415 - circular

        return zero_or_more(self)

    def one_or_more(self) -> Parser[list[T]]:
        """Repeat until failure; the first attempt must succeed."""
        from carriage.syntax.parser.combinators import one_or_more  # noqa: PLC0415 - circular

        return one_or_more(self)


def parse_text(parser: Parser[Any], text: str, *, require_end: bool = True) -> Any:
    """Run ``parser`` over the whole of ``text`` and return its value.

    Args:
        parser: Top-level grammar parser
        text: Input to parse from offset 0
        require_end: Treat unconsumed input as an error (default: True)

    Returns:
        The parser's success value

    Raises:
        CarriageSyntaxError: If the parser fails, or leaves input behind
            while ``require_end`` is set

    Example:
        >>> from carriage import number
        >>> parse_text(number(), "5060")
        5060
        >>> parse_text(number(), "50x")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        carriage.diagnostics.errors.CarriageSyntaxError: trailing input
    """
    match parser.parse(Cursor(text, 0)):
        case Failure() as failed:
            logger.debug("parse_text: %s rejected input: %s", parser.name, failed.format_error())
            raise CarriageSyntaxError(failed)
        case Success(next_cursor=rest, value=value):
            if require_end and not rest.is_eof:
                expected, actual = ErrorTemplate.trailing_input(rest.slice_ahead(SNAPSHOT_WIDTH))
                trailing = Failure(rest, expected, actual, DiagnosticCode.TRAILING_INPUT)
                logger.debug("parse_text: %s left input at %d", parser.name, rest.offset)
                raise CarriageSyntaxError(trailing)
            return value
