"""
tildec Lexer
============

Converts source text into a stream of classified tokens.

Pipeline
--------
    Source text → CharacterCursor → boundary rule | delimited scanners
                → classifier → TokenStream

Usage
-----
>>> from tildec.lexer import lex, TokenKind
>>> tokens = lex('string name = "Jake";')
>>> tokens.kinds()[0] is TokenKind.STRING
True
"""

from tildec.lexer.charclass import (
    ends_token,
    is_comment_delimiter,
    is_digit,
    is_operator,
    is_string_delimiter,
    is_symbol,
    is_whitespace,
)
from tildec.lexer.classifier import classify, classify_lexeme
from tildec.lexer.cursor import CharacterCursor
from tildec.lexer.errors import (
    CursorUnderrunError,
    InsufficientPaddingError,
    LexerError,
    UnterminatedCommentError,
    UnterminatedLiteralError,
    UnterminatedStringError,
)
from tildec.lexer.lexer import (
    DEFAULT_PADDING,
    MIN_PADDING,
    Lexer,
    LexerOptions,
    is_padded,
    lex,
    pad_source,
)
from tildec.lexer.scanners import COMMENT_SCANNER, STRING_SCANNER, DelimitedScanner
from tildec.lexer.tokens import (
    LEXEME_KINDS,
    Token,
    TokenCategory,
    TokenKind,
    TokenStream,
)

__all__ = [
    # Lexer
    "Lexer",
    "LexerOptions",
    "lex",
    "pad_source",
    "is_padded",
    "MIN_PADDING",
    "DEFAULT_PADDING",
    # Tokens
    "Token",
    "TokenKind",
    "TokenCategory",
    "TokenStream",
    "LEXEME_KINDS",
    "classify",
    "classify_lexeme",
    # Scanning
    "CharacterCursor",
    "DelimitedScanner",
    "COMMENT_SCANNER",
    "STRING_SCANNER",
    "ends_token",
    "is_whitespace",
    "is_symbol",
    "is_operator",
    "is_digit",
    "is_comment_delimiter",
    "is_string_delimiter",
    # Errors
    "LexerError",
    "CursorUnderrunError",
    "InsufficientPaddingError",
    "UnterminatedLiteralError",
    "UnterminatedCommentError",
    "UnterminatedStringError",
]
