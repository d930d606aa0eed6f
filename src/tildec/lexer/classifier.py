"""
Token Classifier
================

Maps a finished lexeme to its token kind.

Lookup is an exact match against LEXEME_KINDS. Anything not in the table is
an identifier, unless it contains a digit anywhere, in which case the whole
lexeme is a numeric literal. That makes `42` numeric, and also `x1`.
"""

from typing import Optional

from tildec.errors import SourceLocation
from tildec.lexer.charclass import is_digit
from tildec.lexer.tokens import LEXEME_KINDS, Token, TokenKind


def classify_lexeme(lexeme: str) -> TokenKind:
    """Return the token kind for `lexeme`. Never fails."""
    kind = LEXEME_KINDS.get(lexeme, TokenKind.IDENTIFIER)

    if kind is TokenKind.IDENTIFIER and any(is_digit(c) for c in lexeme):
        return TokenKind.NUMERIC_LITERAL

    return kind


def classify(lexeme: str, location: Optional[SourceLocation] = None) -> Token:
    """Classify `lexeme` and wrap it in a Token."""
    return Token(lexeme, classify_lexeme(lexeme), location)
