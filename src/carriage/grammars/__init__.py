"""Example grammars built on the combinator runtime.

- quoted: 'quoted' word literals
- arithmetic: integer expressions with + - * / and parentheses, as an AST
- commands: text-editing command shorthand, as an AST

None of them adds combinator machinery; each is plain composition of the
public primitives and combinators.
"""

from .arithmetic import parse_expression
from .commands import parse_commands
from .quoted import quoted_literal, quoted_literal_list

__all__ = [
    "parse_commands",
    "parse_expression",
    "quoted_literal",
    "quoted_literal_list",
]
