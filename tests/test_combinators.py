"""Tests for combinators: sequence, alternation, bind, transform, repetition, lazy."""

from __future__ import annotations

import pytest

from carriage.diagnostics import CarriageGrammarError, DiagnosticCode
from carriage.syntax.cursor import Cursor
from carriage.syntax.outcome import Failure, Left, ParseOutcome, Right, Success
from carriage.syntax.parser.combinators import (
    alternation,
    bind,
    lazy,
    one_or_more,
    sequence,
    transform,
    zero_or_more,
)
from carriage.syntax.parser.core import Parser
from carriage.syntax.parser.primitives import constant, end_of_input, literal, number, word


class CountingParser:
    """Wrap a parser and count how often it runs."""

    def __init__(self, inner: Parser[object]) -> None:
        self.calls: list[int] = []
        self.parser: Parser[object] = Parser(self._run, inner.name)
        self._inner = inner

    def _run(self, cursor: Cursor) -> ParseOutcome[object]:
        self.calls.append(cursor.offset)
        return self._inner.parse(cursor)


# ============================================================================
# SEQUENCE
# ============================================================================


class TestSequence:
    """Test sequence(left, right) and the >> operator."""

    def test_keeps_right_value(self) -> None:
        """Left is consumed, right's value is the result."""
        outcome = sequence(literal("'"), word()).parse(Cursor("'Carriage'", 0))

        assert outcome == Success(Cursor("'Carriage'", 9), "Carriage")

    def test_left_failure_skips_right(self) -> None:
        """Right is never invoked when left fails."""
        right = CountingParser(word())

        outcome = sequence(literal("'"), right.parser).parse(Cursor("Carriage", 0))

        assert right.calls == []
        assert outcome == Failure(Cursor("Carriage", 0), "token '", "not the token '")

    def test_right_failure_forwarded_unchanged(self) -> None:
        """Right's failure reports right's position and strings."""
        outcome = (literal("'") >> number()).parse(Cursor("'abc", 0))

        assert outcome == Failure(Cursor("'abc", 1), "number", "empty")

    def test_operator_matches_method_and_function(self) -> None:
        """>>, and_() and sequence() agree."""
        cursor = Cursor("(42)", 0)
        parsers = [
            literal("(") >> number(),
            literal("(").and_(number()),
            sequence(literal("("), number()),
        ]

        expected = Success(Cursor("(42)", 3), 42)

        assert [p.parse(cursor) for p in parsers] == [expected, expected, expected]

    def test_name(self) -> None:
        """Sequence names show both sides."""
        assert (literal("a") >> word()).name == "('a' >> word)"


# ============================================================================
# ALTERNATION
# ============================================================================


class TestAlternation:
    """Test alternation(left, right) and the | operator."""

    def test_left_success_tagged_left(self) -> None:
        """Left match is tagged Left and right is not run."""
        right = CountingParser(word())

        outcome = (number() | right.parser).parse(Cursor("42x", 0))

        assert outcome == Success(Cursor("42x", 2), Left(42))
        assert right.calls == []

    def test_right_success_tagged_right(self) -> None:
        """Right match is tagged Right."""
        outcome = alternation(number(), word()).parse(Cursor("abc", 0))

        assert outcome == Success(Cursor("abc", 3), Right("abc"))

    def test_right_starts_from_original_cursor(self) -> None:
        """A left branch that consumed before failing does not move right's start."""
        left = literal("a") >> literal("b")
        right = CountingParser(literal("a") >> literal("c"))

        outcome = (left | right.parser).parse(Cursor("ac", 0))

        assert right.calls == [0]
        assert outcome == Success(Cursor("ac", 2), Right("c"))

    def test_double_failure_returns_right_failure(self) -> None:
        """When both fail, the right failure is returned unchanged."""
        outcome = (number() | literal("'")).parse(Cursor("xyz", 0))

        assert outcome == Failure(Cursor("xyz", 0), "token '", "not the token '")
        assert outcome.code is DiagnosticCode.TOKEN_MISMATCH

    def test_same_value_types_stay_tagged(self) -> None:
        """Both sides producing str still differ by tag."""
        parser = literal("x") | literal("y")

        assert parser.parse(Cursor("x")) == Success(Cursor("x", 1), Left("x"))
        assert parser.parse(Cursor("y")) == Success(Cursor("y", 1), Right("y"))


# ============================================================================
# BIND AND TRANSFORM
# ============================================================================


class TestBind:
    """Test bind(parser, continuation) and Parser.map."""

    def test_continuation_sees_value(self) -> None:
        """The continuation builds the follow-up parser from the value."""
        repeat_word = word().map(lambda w: literal("=") >> literal(w))

        assert repeat_word.parse(Cursor("ab=ab")) == Success(Cursor("ab=ab", 5), "ab")
        assert isinstance(repeat_word.parse(Cursor("ab=cd")), Failure)

    def test_value_reinjected_with_constant(self) -> None:
        """bind + constant carries a value across a sequence."""
        parser = literal("'") >> word().map(lambda w: literal("'") >> constant(w))

        assert parser.parse(Cursor("'Carriage'")) == Success(Cursor("'Carriage'", 10), "Carriage")

    def test_failure_skips_continuation(self) -> None:
        """Continuation is not called when the first parser fails."""
        calls: list[str] = []

        def follow(value: str) -> Parser[str]:
            calls.append(value)
            return constant(value)

        outcome = bind(word(), follow).parse(Cursor("'", 0))

        assert calls == []
        assert outcome == Failure(Cursor("'", 0), "word character", "empty")

    def test_continuation_failure_forwarded(self) -> None:
        """The follow-up failure is returned unchanged."""
        outcome = word().map(lambda _: number()).parse(Cursor("ab!", 0))

        assert outcome == Failure(Cursor("ab!", 2), "number", "empty")

    def test_non_parser_continuation_rejected(self) -> None:
        """Returning a plain value from the continuation is a grammar error."""
        parser = bind(word(), lambda w: w.upper())  # type: ignore[arg-type,return-value]

        with pytest.raises(CarriageGrammarError) as exc_info:
            parser.parse(Cursor("abc"))

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.CONTINUATION_NOT_A_PARSER
        assert "str" in exc_info.value.diagnostic.message


class TestTransform:
    """Test transform(parser, function)."""

    def test_replaces_value(self) -> None:
        """The function is applied to the success value."""
        outcome = transform(word(), str.upper).parse(Cursor("abc def"))

        assert outcome == Success(Cursor("abc def", 3), "ABC")

    def test_keeps_name(self) -> None:
        """transform() keeps the wrapped parser's name."""
        assert number().transform(str).name == "number"

    def test_failure_unchanged(self) -> None:
        """Failures pass through untouched."""
        outcome = number().transform(lambda n: n * 2).parse(Cursor("x"))

        assert outcome == Failure(Cursor("x"), "number", "empty")


# ============================================================================
# REPETITION
# ============================================================================


class TestZeroOrMore:
    """Test zero_or_more(inner)."""

    def test_collects_until_failure(self) -> None:
        """Values are collected in order."""
        outcome = zero_or_more(literal("ab")).parse(Cursor("ababa", 0))

        assert outcome == Success(Cursor("ababa", 4), ["ab", "ab"])

    def test_zero_matches_is_success(self) -> None:
        """No match yields an empty list at the original cursor."""
        cursor = Cursor("xyz", 1)

        assert zero_or_more(number()).parse(cursor) == Success(cursor, [])

    def test_resumes_from_last_success(self) -> None:
        """A partially consuming failed attempt is discarded."""
        pair = literal("a") >> literal("b")

        outcome = pair.zero_or_more().parse(Cursor("ababac", 0))

        assert outcome == Success(Cursor("ababac", 4), ["b", "b"])

    def test_non_consuming_inner_rejected(self) -> None:
        """Repeating a parser that consumes nothing is a grammar error."""
        with pytest.raises(CarriageGrammarError) as exc_info:
            zero_or_more(constant(1)).parse(Cursor("abc"))

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.REPETITION_WITHOUT_PROGRESS

    def test_non_consuming_inner_failing_is_fine(self) -> None:
        """end_of_input() in a repetition only errors when it succeeds."""
        cursor = Cursor("abc", 0)

        assert zero_or_more(end_of_input()).parse(cursor) == Success(cursor, [])


class TestOneOrMore:
    """Test one_or_more(inner)."""

    def test_collects_at_least_one(self) -> None:
        """One match suffices."""
        outcome = one_or_more(word()).parse(Cursor("abc", 0))

        assert outcome == Success(Cursor("abc", 3), ["abc"])

    def test_first_failure_returned_unchanged(self) -> None:
        """A failing first attempt is the result."""
        outcome = one_or_more(number()).parse(Cursor("x1", 0))

        assert outcome == Failure(Cursor("x1", 0), "number", "empty")

    def test_later_failure_is_absorbed(self) -> None:
        """Only the first attempt is required."""
        item = literal("1") >> literal(",")

        outcome = item.one_or_more().parse(Cursor("1,1,1", 0))

        assert outcome == Success(Cursor("1,1,1", 4), [",", ","])

    def test_non_consuming_first_match_rejected(self) -> None:
        """A first match that consumes nothing is a grammar error."""
        with pytest.raises(CarriageGrammarError):
            one_or_more(constant("x")).parse(Cursor("abc"))

    def test_names(self) -> None:
        """Repetition names use regex-style suffixes."""
        assert word().zero_or_more().name == "word*"
        assert word().one_or_more().name == "word+"


# ============================================================================
# LAZY
# ============================================================================


class TestLazy:
    """Test lazy(factory) and its nesting limit."""

    def test_forward_reference(self) -> None:
        """A lazy parser resolves its target at parse time."""
        targets: dict[str, Parser[int]] = {}
        deferred = lazy(lambda: targets["value"], "value")
        targets["value"] = number()

        assert deferred.parse(Cursor("12")) == Success(Cursor("12", 2), 12)

    def test_recursive_grammar(self) -> None:
        """Nested brackets parse through self-reference."""
        holder: dict[str, Parser[int]] = {}
        nested = lazy(lambda: holder["n"], "nested")
        holder["n"] = (
            (literal("[") >> nested.map(lambda depth: literal("]") >> constant(depth + 1)))
            | constant(0)
        ).transform(lambda either: either.value)

        assert nested.parse(Cursor("[[[]]]")) == Success(Cursor("[[[]]]", 6), 3)
        assert nested.parse(Cursor("")) == Success(Cursor(""), 0)

    def test_depth_limit_returns_failure(self) -> None:
        """Exceeding max_depth fails instead of overflowing the stack."""
        holder: dict[str, Parser[str]] = {}
        parens = lazy(lambda: holder["p"], "parens", max_depth=5)
        holder["p"] = (literal("(") >> parens.map(lambda _: literal(")"))) | literal("x")

        shallow = holder["p"].parse(Cursor("((x))"))
        deep = holder["p"].parse(Cursor("((((((x))))))"))

        assert isinstance(shallow, Success)
        assert isinstance(deep, Failure)

    def test_depth_limit_failure_code(self) -> None:
        """The innermost failure carries NESTING_DEPTH_EXCEEDED."""
        holder: dict[str, Parser[str]] = {}
        chain = lazy(lambda: holder["c"], "chain", max_depth=3)
        holder["c"] = literal("(") >> chain

        outcome = chain.parse(Cursor("((((((", 0))

        assert isinstance(outcome, Failure)
        assert outcome.code is DiagnosticCode.NESTING_DEPTH_EXCEEDED
        assert outcome.expected == "nesting depth at most 3"
        assert outcome.at_cursor.offset == 3

    def test_depth_resets_between_parses(self) -> None:
        """The counter is released after each parse."""
        holder: dict[str, Parser[str]] = {}
        chain = lazy(lambda: holder["c"], "chain", max_depth=3)
        holder["c"] = (literal("(") >> chain) | literal("x")

        for _ in range(10):
            assert isinstance(chain.parse(Cursor("((x")), Success)
