"""Combinators: parsers built from other parsers.

=================  ===============================================  =================
Combinator         Behaviour                                        On failure
=================  ===============================================  =================
``sequence``       left, then right from left's cursor; keeps       left's or right's
                   right's value                                    Failure, unchanged
``alternation``    left; else right from the ORIGINAL cursor;       right's Failure,
                   value tagged Left/Right                          unchanged
``bind``           parser, then ``f(value)`` from its cursor        parser's or the
                                                                    continuation's
``transform``      parser, value replaced by ``f(value)``           parser's Failure
``zero_or_more``   repeat until failure, collect values             never fails
``one_or_more``    like zero_or_more, first attempt required        first Failure
``lazy``           defer construction for recursive grammars        nesting limit
=================  ===============================================  =================

No combinator rewrites a forwarded Failure: the ``expected``/``actual``
fields a caller sees always come from the innermost parser that gave up.
Only zero_or_more recovers, turning "no further match" into a result.
"""

from __future__ import annotations

from collections.abc import Callable
from contextvars import ContextVar

from carriage.constants import MAX_NESTING_DEPTH
from carriage.diagnostics import CarriageGrammarError, DiagnosticCode, ErrorTemplate
from carriage.syntax.cursor import Cursor
from carriage.syntax.outcome import Either, Failure, Left, ParseOutcome, Right, Success, failure
from carriage.syntax.parser.core import Parser
from carriage.syntax.parser.primitives import constant

__all__ = [
    "alternation",
    "bind",
    "lazy",
    "one_or_more",
    "sequence",
    "transform",
    "zero_or_more",
]

# Nesting depth of lazy() parsers in the current execution context.
# Parsers stay stateless; the count belongs to the running parse, and each
# thread or asyncio task sees its own value.
_nesting_depth: ContextVar[int] = ContextVar("carriage_nesting_depth", default=0)


def sequence[T, U](left: Parser[T], right: Parser[U]) -> Parser[U]:
    """Run ``left`` then ``right``; the result is ``right``'s value.

    If ``left`` fails, ``right`` is never invoked. Callers that need the left
    value must capture it with bind before sequencing.
    """

    def run(cursor: Cursor) -> ParseOutcome[U]:
        match left.parse(cursor):
            case Failure() as failed:
                return failed
            case Success(next_cursor=rest):
                return right.parse(rest)

    return Parser(run, f"({left.name} >> {right.name})")


def alternation[T, U](left: Parser[T], right: Parser[U]) -> Parser[Either[T, U]]:
    """First success wins; the value records which side matched.

    ``right`` is attempted from the original cursor, never from wherever a
    failed ``left`` got to. When both fail, ``right``'s Failure is returned
    as is; the left diagnostic is dropped rather than merged.
    """

    def run(cursor: Cursor) -> ParseOutcome[Either[T, U]]:
        match left.parse(cursor):
            case Success(next_cursor=rest, value=value):
                return Success(rest, Left(value))
            case Failure():
                pass

        match right.parse(cursor):
            case Success(next_cursor=rest, value=value):
                return Success(rest, Right(value))
            case Failure() as failed:
                return failed

    return Parser(run, f"({left.name} | {right.name})")


def bind[T, U](parser: Parser[T], continuation: Callable[[T], Parser[U]]) -> Parser[U]:
    """Run ``parser``, build the next parser from its value, and run that.

    The continuation sees the parsed value, so the follow-up grammar can
    depend on it, e.g. "read an identifier, then require it again".

    Raises:
        CarriageGrammarError: If the continuation returns something other
            than a Parser
    """

    def run(cursor: Cursor) -> ParseOutcome[U]:
        match parser.parse(cursor):
            case Failure() as failed:
                return failed
            case Success(next_cursor=rest, value=value):
                follow = continuation(value)
                if not isinstance(follow, Parser):
                    raise CarriageGrammarError(
                        ErrorTemplate.continuation_not_a_parser(parser.name, follow)
                    )
                return follow.parse(rest)

    return Parser(run, f"{parser.name}.map")


def transform[T, U](parser: Parser[T], function: Callable[[T], U]) -> Parser[U]:
    """Replace the success value of ``parser`` with ``function(value)``."""
    return bind(parser, lambda value: constant(function(value))).named(parser.name)


def _repeat[T](
    inner: Parser[T], cursor: Cursor, values: list[T]
) -> Success[list[T]]:
    """Apply ``inner`` until it fails, appending to ``values``.

    The failed attempt is discarded; the result resumes from the cursor of
    the last success (or ``cursor`` if there was none).
    """
    current = cursor
    while True:
        match inner.parse(current):
            case Success(next_cursor=rest, value=value):
                if rest.offset == current.offset:
                    raise CarriageGrammarError(
                        ErrorTemplate.repetition_without_progress(inner.name, current.offset)
                    )
                values.append(value)
                current = rest
            case Failure():
                return Success(current, values)


def zero_or_more[T](inner: Parser[T]) -> Parser[list[T]]:
    """Collect values of ``inner`` until it fails. Never fails itself.

    Raises:
        CarriageGrammarError: If ``inner`` succeeds without consuming input,
            which would otherwise repeat forever
    """

    def run(cursor: Cursor) -> ParseOutcome[list[T]]:
        return _repeat(inner, cursor, [])

    return Parser(run, f"{inner.name}*")


def one_or_more[T](inner: Parser[T]) -> Parser[list[T]]:
    """Like zero_or_more, but the first attempt must succeed.

    A failing first attempt is returned unchanged.
    """

    def run(cursor: Cursor) -> ParseOutcome[list[T]]:
        match inner.parse(cursor):
            case Failure() as failed:
                return failed
            case Success(next_cursor=rest, value=value):
                if rest.offset == cursor.offset:
                    raise CarriageGrammarError(
                        ErrorTemplate.repetition_without_progress(inner.name, cursor.offset)
                    )
                return _repeat(inner, rest, [value])

    return Parser(run, f"{inner.name}+")


def lazy[T](
    factory: Callable[[], Parser[T]],
    name: str = "lazy",
    *,
    max_depth: int = MAX_NESTING_DEPTH,
) -> Parser[T]:
    """Defer parser construction until parse time.

    Lets a grammar refer to a parser that is defined later, including
    itself:

        expression = lazy(lambda: _expression, "expression")

    ``factory`` is called on every invocation and should return an already
    built parser. Nesting deeper than ``max_depth`` lazy levels fails with
    NESTING_DEPTH_EXCEEDED instead of exhausting the Python stack.
    """
    expected, actual = ErrorTemplate.nesting_depth_exceeded(max_depth)

    def run(cursor: Cursor) -> ParseOutcome[T]:
        depth = _nesting_depth.get()
        if depth >= max_depth:
            return failure(cursor, expected, actual, DiagnosticCode.NESTING_DEPTH_EXCEEDED)
        token = _nesting_depth.set(depth + 1)
        try:
            return factory().parse(cursor)
        finally:
            _nesting_depth.reset(token)

    return Parser(run, name)
