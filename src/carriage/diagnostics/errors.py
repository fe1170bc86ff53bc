"""Carriage exception hierarchy with structured diagnostics.

Parsers never raise for input that does not match; they return a Failure.
Exceptions are reserved for the parse_text() boundary and for grammar
assembly mistakes.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .codes import Diagnostic

if TYPE_CHECKING:
    from carriage.syntax.outcome import Failure


class CarriageError(Exception):
    """Base exception for all Carriage errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize CarriageError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class CarriageSyntaxError(CarriageError):
    """Input text rejected by a grammar.

    Raised by parse_text() when the top-level parser fails or leaves input
    unconsumed. The original Failure value is kept for callers that want the
    raw expected/actual fields.
    """

    def __init__(self, failure: Failure) -> None:
        """Initialize from the Failure returned by the top-level parser."""
        super().__init__(failure.to_diagnostic())
        self.failure = failure


class CarriageGrammarError(CarriageError):
    """Parser composition misused at grammar-assembly or parse time.

    Examples:
    - literal("") (would loop forever under repetition)
    - bind continuation returning a non-Parser value
    - repeating a parser that succeeds without consuming input
    """
