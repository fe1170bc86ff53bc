"""Primitive parsers built directly on the cursor.

============================  ====================================  ============
Parser                        Matches                               Value
============================  ====================================  ============
``literal(s)``                exact string ``s``                    ``s``
``word()``                    maximal run of letters/digits         the run
``number()``                  maximal run of ASCII digits           ``int``
``constant(v)``               always, consumes nothing              ``v``
``end_of_input()``            only at end of text, consumes nothing ``None``
============================  ====================================  ============

Every primitive that can fail reports its expected/actual strings through
:class:`~carriage.diagnostics.ErrorTemplate`, with the cursor left where
matching started.

Termination:
    literal, word and number consume at least one character on success.
    constant and end_of_input consume nothing and must not be repeated;
    the repetition combinators reject such parsers at parse time.
"""

from typing import Any

from carriage.constants import MAX_NUMBER_DIGITS, SNAPSHOT_WIDTH
from carriage.diagnostics import CarriageGrammarError, DiagnosticCode, ErrorTemplate
from carriage.syntax.cursor import Cursor
from carriage.syntax.outcome import ParseOutcome, failure, success
from carriage.syntax.parser.core import Parser

__all__ = ["constant", "end_of_input", "literal", "number", "word"]

# ASCII digits only. str.isdigit() accepts characters like "²" that int()
# then rejects.
_ASCII_DIGITS: frozenset[str] = frozenset("0123456789")


def _is_ascii_digit(ch: str) -> bool:
    return ch in _ASCII_DIGITS


def literal(token: str) -> Parser[str]:
    """Match the exact string ``token``.

    Examples:
        literal("'") on "'Carriage'" → "'" (offset 1)
        literal("'") on "Carriage"   → expected "token '", actual "not the token '"

    Raises:
        CarriageGrammarError: If ``token`` is empty
    """
    if not token:
        raise CarriageGrammarError(ErrorTemplate.empty_literal())

    expected, actual = ErrorTemplate.token_mismatch(token)
    width = len(token)

    def run(cursor: Cursor) -> ParseOutcome[str]:
        if cursor.startswith(token):
            return success(cursor.advance(width), token)
        return failure(cursor, expected, actual, DiagnosticCode.TOKEN_MISMATCH)

    return Parser(run, repr(token))


def _parse_word(cursor: Cursor) -> ParseOutcome[str]:
    length = cursor.span_while(str.isalnum)
    if length == 0:
        return failure(cursor, *ErrorTemplate.word_expected(), DiagnosticCode.WORD_EXPECTED)
    end = cursor.advance(length)
    return success(end, cursor.slice_to(end))


def word() -> Parser[str]:
    """Match a maximal non-empty run of letter-or-digit characters.

    Classification is ``str.isalnum()`` per code point, so non-ASCII letters
    count. Combining marks and other grapheme pieces do not.

    Examples:
        Carriage'   → "Carriage"
        abc123 def  → "abc123"
        'abc'       → expected "word character", actual "empty"
    """
    return Parser(_parse_word, "word")


def number(*, max_digits: int = MAX_NUMBER_DIGITS) -> Parser[int]:
    """Match a maximal non-empty run of ASCII digits as a decimal int.

    Leading zeros are accepted: "0123" → 123. Python ints are unbounded;
    a run longer than ``max_digits`` fails instead of being converted.

    Examples:
        5060   → 5060 (offset 4)
        123AB  → 123 (offset 3)
        ABC    → expected "number", actual "empty"

    Args:
        max_digits: Longest digit run accepted (default: MAX_NUMBER_DIGITS)
    """

    def run(cursor: Cursor) -> ParseOutcome[int]:
        length = cursor.span_while(_is_ascii_digit)
        if length == 0:
            return failure(
                cursor, *ErrorTemplate.number_expected(), DiagnosticCode.NUMBER_EXPECTED
            )
        if length > max_digits:
            return failure(
                cursor,
                *ErrorTemplate.number_too_long(max_digits, length),
                DiagnosticCode.NUMBER_TOO_LONG,
            )
        end = cursor.advance(length)
        return success(end, int(cursor.slice_to(end)))

    return Parser(run, "number")


def constant[T](value: T) -> Parser[T]:
    """Always succeed with ``value`` without consuming input.

    Used with bind to inject a previously parsed value back into a
    sequence: ``word().map(lambda w: literal("'") >> constant(w))``.
    """

    def run(cursor: Cursor) -> ParseOutcome[T]:
        return success(cursor, value)

    return Parser(run, f"constant({value!r})")


def _parse_end(cursor: Cursor) -> ParseOutcome[Any]:
    if cursor.is_eof:
        return success(cursor, None)
    expected, actual = ErrorTemplate.trailing_input(cursor.slice_ahead(SNAPSHOT_WIDTH))
    return failure(cursor, expected, actual, DiagnosticCode.TRAILING_INPUT)


def end_of_input() -> Parser[None]:
    """Succeed with None only when no input remains."""
    return Parser(_parse_end, "end of input")
