"""Parse outcome algebra: Success | Failure, and Left | Right.

Every parser returns a ``ParseOutcome[T]``, a closed union of two frozen
dataclasses. Consumers discriminate with ``match``:

    match parser.parse(cursor):
        case Success(next_cursor=rest, value=value):
            ...
        case Failure() as failure:
            ...

``Either[L, R]`` is the value type of alternation and records which branch
matched. Nothing else in the library produces it.

Pattern Reference:
    - Rust ``Result`` / ``Either`` crates
    - Haskell ``Either``
"""

from dataclasses import dataclass, field

from carriage.diagnostics import Diagnostic, DiagnosticCode, SourceSpan
from carriage.syntax.cursor import Cursor

__all__ = [
    "Either",
    "Failure",
    "Left",
    "ParseOutcome",
    "Right",
    "Success",
    "failure",
    "success",
]


@dataclass(frozen=True, slots=True)
class Success[T]:
    """Parser matched; carries the value and the cursor to resume from.

    Example:
        >>> outcome = Success(Cursor("5060", 4), 5060)
        >>> outcome.value
        5060
        >>> outcome.next_cursor.offset
        4
    """

    next_cursor: Cursor
    value: T


@dataclass(frozen=True, slots=True)
class Failure:
    """Parser did not match; never carries a value.

    Combinators that merely forward a failure return this same object, so
    ``at_cursor``, ``expected`` and ``actual`` always describe the innermost
    primitive that gave up.

    Attributes:
        at_cursor: Position where matching failed
        expected: What the parser was looking for
        actual: What it found instead (or an "empty" marker)
        code: Diagnostic code used when converting to a Diagnostic
    """

    at_cursor: Cursor
    expected: str
    actual: str
    code: DiagnosticCode = field(default=DiagnosticCode.NO_MATCH, compare=False)

    @property
    def message(self) -> str:
        """One-line description without location."""
        return f"expected {self.expected}, found {self.actual}"

    def to_diagnostic(self) -> Diagnostic:
        """Convert to a structured Diagnostic with a 1-indexed source span."""
        line, col = self.at_cursor.compute_line_col()
        offset = self.at_cursor.offset
        return Diagnostic(
            code=self.code,
            message=self.message,
            span=SourceSpan(start=offset, end=offset, line=line, column=col),
            expected=self.expected,
            actual=self.actual,
        )

    def format_error(self) -> str:
        """Format failure with line:column.

        Example:
            >>> Failure(Cursor("ABC", 0), "number", "empty").format_error()
            '1:1: expected number, found empty'
        """
        line, col = self.at_cursor.compute_line_col()
        return f"{line}:{col}: {self.message}"

    def format_with_context(self, context_lines: int = 2) -> str:
        """Format failure with source context and pointer.

        Shows the failing line, up to ``context_lines`` lines on either
        side, and a caret under the failure column.

        Example:
            >>> failure = Failure(Cursor("'Carr", 5), "token '", "not the token '")
            >>> print(failure.format_with_context())
            1:6: expected token ', found not the token '
            <BLANKLINE>
               1 | 'Carr
                 |      ^
        """
        line, col = self.at_cursor.compute_line_col()
        lines = self.at_cursor.text.split("\n")

        result_lines = [self.format_error(), ""]

        start_line = max(1, line - context_lines)
        end_line = min(len(lines), line + context_lines)

        for i in range(start_line, end_line + 1):
            line_num_str = f"{i:4} | "
            result_lines.append(line_num_str + lines[i - 1])
            if i == line:
                pointer = "     | " + " " * (col - 1) + "^"
                result_lines.append(pointer)

        return "\n".join(result_lines)


type ParseOutcome[T] = Success[T] | Failure


@dataclass(frozen=True, slots=True)
class Left[L]:
    """Left branch of an alternation matched."""

    value: L


@dataclass(frozen=True, slots=True)
class Right[R]:
    """Right branch of an alternation matched."""

    value: R


type Either[L, R] = Left[L] | Right[R]


def success[T](cursor: Cursor, value: T) -> Success[T]:
    """Build a Success resuming at ``cursor``."""
    return Success(cursor, value)


def failure(
    cursor: Cursor,
    expected: str,
    actual: str,
    code: DiagnosticCode = DiagnosticCode.NO_MATCH,
) -> Failure:
    """Build a Failure at ``cursor``."""
    return Failure(cursor, expected, actual, code)
