"""Quoted-literal grammar.

PEG grammar:

    Char    <- letter / digit
    Literal <- "'" Char+ "'"

Sequencing keeps only the right-hand value, so the enclosed word is
captured with bind and re-injected after the closing quote:

    "'" >> word.map(w -> "'" >> constant(w))
"""

from carriage.syntax import Parser, constant, literal, word

__all__ = ["quoted_literal", "quoted_literal_list"]


def quoted_literal(quote: str = "'") -> Parser[str]:
    """Parse ``'word'`` and return the word.

    Examples:
        'Carriage'  → "Carriage" (offset 10)
        'Carr       → expected "token '", actual "not the token '" at offset 5
    """
    closing = literal(quote)
    enclosed = word().map(lambda text: closing >> constant(text))
    return (literal(quote) >> enclosed).named("quoted literal")


def quoted_literal_list(quote: str = "'") -> Parser[list[str]]:
    """Parse one or more adjacent quoted literals.

    Example:
        'Carriage''Text' → ["Carriage", "Text"]
    """
    return quoted_literal(quote).one_or_more().named("quoted literal list")
