"""Arithmetic-expression grammar producing an AST.

PEG grammar (blank space between tokens is ignored):

    Expr   <- Term (("+" / "-") Term)*
    Term   <- Factor (("*" / "/") Factor)*
    Factor <- ("+" / "-") Factor / Num / "(" Expr ")"
    Num    <- [0-9]+

Binary operators are left-associative: ``10 - 5 - 2`` parses as
``(10 - 5) - 2``. The AST is only built, never evaluated.

Example:
    >>> parse_expression("(25 - 5) * 10")  # doctest: +ELLIPSIS
    BinaryOperation(operator='*', left=BinaryOperation(operator='-', ...), right=...)
"""

from dataclasses import dataclass

from carriage.syntax import Parser, constant, lazy, literal, number, parse_text

from .lexical import blank, choice, keyword, token

__all__ = [
    "BinaryOperation",
    "Expression",
    "NumberLiteral",
    "UnaryOperation",
    "expression",
    "parse_expression",
]

# ============================================================================
# AST
# ============================================================================


@dataclass(frozen=True, slots=True)
class NumberLiteral:
    """Unsigned integer literal."""

    value: int


@dataclass(frozen=True, slots=True)
class UnaryOperation:
    """Prefix ``+`` or ``-`` applied to an operand."""

    operator: str
    operand: "Expression"


@dataclass(frozen=True, slots=True)
class BinaryOperation:
    """Infix ``+ - * /``."""

    operator: str
    left: "Expression"
    right: "Expression"


type Expression = NumberLiteral | UnaryOperation | BinaryOperation

# ============================================================================
# GRAMMAR
# ============================================================================


def _fold_left(first: Expression, rest: list[tuple[str, Expression]]) -> Expression:
    result = first
    for operator, operand in rest:
        result = BinaryOperation(operator, result, operand)
    return result


def _binary_level(operand: Parser[Expression], *operators: str) -> Parser[Expression]:
    """``operand (op operand)*`` folded to the left."""
    operator = choice(*(keyword(op, op) for op in operators))
    step = operator.map(lambda op: operand.transform(lambda rhs: (op, rhs)))
    return operand.map(
        lambda first: step.zero_or_more().transform(lambda rest: _fold_left(first, rest))
    )


_expression: Parser[Expression] = lazy(lambda: _EXPRESSION, "expression")
_factor: Parser[Expression] = lazy(lambda: _FACTOR, "factor")

_number_literal = token(number()).transform(NumberLiteral).named("number")

_parenthesized = keyword("(", "(") >> _expression.map(
    lambda inner: keyword(")", ")") >> constant(inner)
)

_unary = choice(keyword("+", "+"), keyword("-", "-")).map(
    lambda sign: _factor.transform(lambda operand: UnaryOperation(sign, operand))
)

_FACTOR: Parser[Expression] = choice(_unary, _number_literal, _parenthesized)
_TERM: Parser[Expression] = _binary_level(_factor, "*", "/")
_EXPRESSION: Parser[Expression] = _binary_level(_TERM, "+", "-")


def expression() -> Parser[Expression]:
    """Parser for a complete expression, including trailing blank space."""
    return _EXPRESSION.map(lambda tree: blank() >> constant(tree)).named("expression")


def parse_expression(text: str) -> Expression:
    """Parse ``text`` as a single arithmetic expression.

    Raises:
        CarriageSyntaxError: If the text is not exactly one expression
    """
    return parse_text(expression(), text)
