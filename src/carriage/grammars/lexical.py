"""Lexical helpers shared by the example grammars.

Everything here is composed from the public primitives and combinators;
no grammar reaches into the cursor directly.
"""

from functools import reduce
from typing import Any

from carriage.syntax import Either, Left, Parser, Right, literal

__all__ = ["blank", "choice", "keyword", "token", "unwrap"]

# Blank space between tokens is allowed and thrown away.
_BLANK_CHARACTERS = (" ", "\t", "\r", "\n")


def unwrap[T](either: Either[T, T]) -> T:
    """Drop the Left/Right tag when both branches produce the same type."""
    match either:
        case Left(value=value) | Right(value=value):
            return value


def choice(*parsers: Parser[Any]) -> Parser[Any]:
    """Ordered choice over several parsers, untagged.

    Folds alternation left to right, so the failure reported when nothing
    matches is the last parser's.
    """
    return reduce(lambda acc, parser: (acc | parser).transform(unwrap), parsers)


def blank() -> Parser[list[str]]:
    """Zero or more blank characters."""
    return choice(*(literal(ch) for ch in _BLANK_CHARACTERS)).zero_or_more().named("blank")


def token[T](parser: Parser[T]) -> Parser[T]:
    """``parser`` preceded by optional blank space."""
    return (blank() >> parser).named(parser.name)


def keyword[T](symbol: str, value: T) -> Parser[T]:
    """Match ``symbol`` (after optional blanks) and produce ``value``."""
    return token(literal(symbol)).transform(lambda _: value).named(repr(symbol))
