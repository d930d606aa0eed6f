"""
Character Classes and Token Boundaries
======================================

Pure predicates over a single character, and the boundary rule that decides
when the lexeme being accumulated is complete.

Every symbol and operator in the language is exactly one character long, so
"a lexeme ends after a symbol/operator" together with "a lexeme ends before
a symbol/operator" is enough to make them singleton tokens, while words and
numbers keep accumulating until whitespace or punctuation.
"""

import string

from tildec.lexer.tokens import (
    COMMENT_DELIMITER,
    STRING_DELIMITER,
    TokenCategory,
    WHITESPACE,
    lexemes_in,
)


WHITESPACE_CHARS = frozenset(WHITESPACE)
SYMBOL_CHARS = lexemes_in(TokenCategory.SYMBOL)
OPERATOR_CHARS = lexemes_in(TokenCategory.OPERATOR)
DIGIT_CHARS = frozenset(string.digits)


# =============================================================================
# Character Predicates
# =============================================================================

def is_whitespace(char: str) -> bool:
    """Tab, space or newline."""
    return char in WHITESPACE_CHARS


def is_symbol(char: str) -> bool:
    """Single-character punctuation, quote characters included."""
    return char in SYMBOL_CHARS


def is_operator(char: str) -> bool:
    return char in OPERATOR_CHARS


def is_digit(char: str) -> bool:
    """ASCII decimal digit."""
    return char in DIGIT_CHARS


def is_comment_delimiter(char: str) -> bool:
    return char == COMMENT_DELIMITER


def is_string_delimiter(char: str) -> bool:
    return char == STRING_DELIMITER


# =============================================================================
# Boundary Policy
# =============================================================================

def ends_token(current: str, next_char: str) -> bool:
    """
    Decide whether the lexeme ends after `current`.

    Evaluated after `current` has been appended to the lexeme buffer.

    Args:
        current: The character just appended
        next_char: The character after it

    Returns:
        True if the buffered lexeme is complete
    """
    # Whitespace after the lexeme is skipped entirely
    if is_whitespace(next_char):
        return True
    if is_symbol(current):
        return True
    if is_symbol(next_char):
        return True
    if is_operator(current):
        return True
    if is_operator(next_char):
        return True
    # Unreachable from the lexer: whitespace is filtered before accumulation
    if is_whitespace(current):
        return False
    return False
