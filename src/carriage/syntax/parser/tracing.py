"""Optional tracing hook at the parser-invocation boundary.

Primitives and combinators never print or log on their own. Instead,
Parser.parse() reports each invocation to the hook installed for the
current execution context, if any:

    events: list[TraceEvent] = []
    with tracing(events.append):
        quoted_literal().parse(Cursor("'Carriage'"))

Thread Safety:
    The active hook lives in a ContextVar, so each thread and asyncio task
    sees only the hook it installed. Nested ``tracing()`` blocks restore the
    outer hook on exit.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any

from carriage.syntax.cursor import Cursor
from carriage.syntax.outcome import ParseOutcome

__all__ = ["TraceEvent", "TraceHook", "current_hook", "tracing"]


@dataclass(frozen=True, slots=True)
class TraceEvent:
    """One completed parser invocation.

    Attributes:
        parser_name: Name of the parser that ran
        cursor: Cursor the parser was invoked with
        outcome: What it returned
    """

    parser_name: str
    cursor: Cursor
    outcome: ParseOutcome[Any]


type TraceHook = Callable[[TraceEvent], None]

_active_hook: ContextVar[TraceHook | None] = ContextVar(
    "carriage_trace_hook", default=None
)


def current_hook() -> TraceHook | None:
    """Hook installed for the current context, or None when tracing is off."""
    return _active_hook.get()


@contextmanager
def tracing(hook: TraceHook) -> Iterator[TraceHook]:
    """Install ``hook`` for every parser invocation inside the block.

    Args:
        hook: Callable receiving a TraceEvent after each invocation

    Yields:
        The installed hook
    """
    token = _active_hook.set(hook)
    try:
        yield hook
    finally:
        _active_hook.reset(token)
