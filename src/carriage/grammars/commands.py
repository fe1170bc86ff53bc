"""Text-editing command shorthand producing an AST.

Vocabulary:

    Position    ^ or 0   beginning of line
                $        end of line
                N^ N$    same, on the next line ("N" is a modifier)
    Movement    b back, f forward, l lines, w words
    Action      m move, d delete, i insert
    Replace     r:U upper case, r:L lower case, r'STR' literal text
    Repetition  ( ... ) groups statements; an optional quantifier follows

Grammar (blank space between tokens is ignored):

    <number>     ::= [0-9]+
    <action>     ::= "m" | "d" | "i"
    <command>    ::= <action> <movement> [<number>] | <action> <number>
    <quantifier> ::= <number> | "+" | "*" | "?"
    <process>    ::= "(" <statement>+ ")" [<quantifier>]
    <statement>  ::= <position> | <replace> | <command> | <process>

Example:
    >>> parse_commands("mw3 $")  # doctest: +NORMALIZE_WHITESPACE
    (Command(action=<Action.MOVE: 'm'>, movement=<Movement.WORDS: 'w'>, count=3),
     Position(anchor=<Anchor.LINE_END: '$'>, next_line=False))

Groups nest through a depth-limited lazy reference, one level per group plus
one for the outermost statement. Nesting ``MAX_NESTING_DEPTH`` groups or more
makes the outermost statement fail, so ``program()`` stops before it and
``parse_commands`` reports TRAILING_INPUT at that statement's opening
parenthesis rather than NESTING_DEPTH_EXCEEDED.

Statements are only parsed; nothing here edits text.
"""

from dataclasses import dataclass
from enum import StrEnum

from carriage.syntax import Parser, constant, lazy, number, parse_text

from .lexical import blank, choice, keyword, token
from .quoted import quoted_literal

__all__ = [
    "Action",
    "Anchor",
    "CaseChange",
    "Command",
    "Movement",
    "Position",
    "Process",
    "Quantifier",
    "ReplaceCase",
    "ReplaceText",
    "Statement",
    "parse_commands",
    "program",
    "statement",
]

# ============================================================================
# VOCABULARY
# ============================================================================


class Action(StrEnum):
    """What a command does at the cursor."""

    MOVE = "m"
    DELETE = "d"
    INSERT = "i"


class Movement(StrEnum):
    """Unit a command moves by."""

    BACK = "b"
    FORWARD = "f"
    LINES = "l"
    WORDS = "w"


class Anchor(StrEnum):
    """Line anchor a position refers to."""

    LINE_START = "^"
    LINE_END = "$"


class CaseChange(StrEnum):
    """Case conversion applied by a replace."""

    UPPER = "U"
    LOWER = "L"


class Quantifier(StrEnum):
    """Symbolic repetition of a process."""

    ONE_OR_MORE = "+"
    ZERO_OR_MORE = "*"
    OPTIONAL = "?"


# ============================================================================
# AST
# ============================================================================


@dataclass(frozen=True, slots=True)
class Position:
    """Jump to a line anchor, optionally on the next line."""

    anchor: Anchor
    next_line: bool = False


@dataclass(frozen=True, slots=True)
class Command:
    """Action with an optional movement unit and a count (default 1)."""

    action: Action
    movement: Movement | None
    count: int = 1


@dataclass(frozen=True, slots=True)
class ReplaceCase:
    """Replace the current position with its upper or lower case variant."""

    case: CaseChange


@dataclass(frozen=True, slots=True)
class ReplaceText:
    """Replace the current position with literal text."""

    text: str


@dataclass(frozen=True, slots=True)
class Process:
    """Group of statements with an optional repetition.

    ``quantifier`` is a Quantifier symbol, an exact repeat count, or None
    for a single pass.
    """

    body: tuple["Statement", ...]
    quantifier: Quantifier | int | None = None


type Statement = Position | Command | ReplaceCase | ReplaceText | Process

# ============================================================================
# GRAMMAR
# ============================================================================


def _symbols[E: StrEnum](members: type[E]) -> Parser[E]:
    """Match any member of an enum by its symbol."""
    return choice(*(keyword(member.value, member) for member in members))


_statement: Parser[Statement] = lazy(lambda: _STATEMENT, "statement")

_count = token(number())

_anchor = _symbols(Anchor)

_position = choice(
    keyword("N", True).map(lambda _: _anchor.transform(lambda a: Position(a, next_line=True))),
    keyword("0", Anchor.LINE_START).transform(Position),
    _anchor.transform(Position),
).named("position")

_replace = (
    keyword("r", "r")
    >> choice(
        keyword(":U", CaseChange.UPPER).transform(ReplaceCase),
        keyword(":L", CaseChange.LOWER).transform(ReplaceCase),
        token(quoted_literal()).transform(ReplaceText),
    )
).named("replace")

_movement_step = _symbols(Movement).map(
    lambda movement: choice(_count, constant(1)).transform(lambda n: (movement, n))
)
_count_step = _count.transform(lambda n: (None, n))

_command = _symbols(Action).map(
    lambda action: choice(_movement_step, _count_step).transform(
        lambda step: Command(action, step[0], step[1])
    )
).named("command")

_quantifier = choice(_count, _symbols(Quantifier))

_process = (
    keyword("(", "(")
    >> _statement.one_or_more().map(
        lambda body: keyword(")", ")")
        >> choice(_quantifier, constant(None)).transform(
            lambda quantifier: Process(tuple(body), quantifier)
        )
    )
).named("process")

_STATEMENT: Parser[Statement] = choice(_position, _replace, _command, _process)


def statement() -> Parser[Statement]:
    """Parser for a single statement (leading blank space allowed)."""
    return _STATEMENT


def program() -> Parser[tuple[Statement, ...]]:
    """Parser for a sequence of statements followed by optional blank space."""
    return (
        _statement.zero_or_more()
        .map(lambda statements: blank() >> constant(tuple(statements)))
        .named("program")
    )


def parse_commands(text: str) -> tuple[Statement, ...]:
    """Parse ``text`` as a whole command program.

    Raises:
        CarriageSyntaxError: If any part of the text is not a statement
    """
    return parse_text(program(), text)
