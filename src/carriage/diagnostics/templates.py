"""Error message templates.

Centralized expected/actual strings for testable, consistent failures.
Python 3.13+. Zero external dependencies.
"""

from carriage.constants import EMPTY_MARKER

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    Primitive parsers never build diagnostic strings inline. Each failure
    kind has one template returning the exact ``(expected, actual)`` pair
    the Failure carries, so tests can pin them and callers can match on them.
    Grammar-assembly errors get a full Diagnostic instead.
    """

    @staticmethod
    def token_mismatch(token: str) -> tuple[str, str]:
        """Input does not start with the literal token.

        Args:
            token: The literal that was required

        Returns:
            (expected, actual) pair for the Failure
        """
        return f"token {token}", f"not the token {token}"

    @staticmethod
    def word_expected() -> tuple[str, str]:
        """No letter-or-digit character at the cursor."""
        return "word character", EMPTY_MARKER

    @staticmethod
    def number_expected() -> tuple[str, str]:
        """No ASCII digit at the cursor."""
        return "number", EMPTY_MARKER

    @staticmethod
    def number_too_long(limit: int, length: int) -> tuple[str, str]:
        """Digit run exceeds the conversion limit.

        Args:
            limit: Maximum accepted number of digits
            length: Length of the run actually found
        """
        return f"number of at most {limit} digits", f"{length} digits"

    @staticmethod
    def trailing_input(snapshot: str) -> tuple[str, str]:
        """Input remains after the top-level parser finished.

        Args:
            snapshot: Leading part of the unconsumed input
        """
        return "end of input", repr(snapshot)

    @staticmethod
    def nesting_depth_exceeded(max_depth: int) -> tuple[str, str]:
        """Recursive grammar nested deeper than allowed."""
        return f"nesting depth at most {max_depth}", "deeper nesting"

    @staticmethod
    def empty_literal() -> Diagnostic:
        """literal("") was requested at grammar-assembly time.

        Returns:
            Diagnostic for EMPTY_LITERAL
        """
        return Diagnostic(
            code=DiagnosticCode.EMPTY_LITERAL,
            message="literal() requires a non-empty token",
            hint="An empty literal consumes nothing and never terminates under repetition",
        )

    @staticmethod
    def continuation_not_a_parser(parser_name: str, returned: object) -> Diagnostic:
        """A bind continuation returned something other than a Parser.

        Args:
            parser_name: Name of the parser whose continuation misbehaved
            returned: The offending return value
        """
        msg = (
            f"Continuation of '{parser_name}' returned "
            f"{type(returned).__name__}, expected Parser"
        )
        return Diagnostic(
            code=DiagnosticCode.CONTINUATION_NOT_A_PARSER,
            message=msg,
            hint="Wrap plain values with constant(value) or use transform()",
        )

    @staticmethod
    def repetition_without_progress(parser_name: str, offset: int) -> Diagnostic:
        """A repeated parser succeeded without consuming input.

        Args:
            parser_name: Name of the repeated parser
            offset: Cursor offset where it stalled
        """
        msg = (
            f"'{parser_name}' matched without consuming input at offset {offset} "
            "inside a repetition"
        )
        return Diagnostic(
            code=DiagnosticCode.REPETITION_WITHOUT_PROGRESS,
            message=msg,
            hint="Only repeat parsers that consume at least one character on success",
        )
