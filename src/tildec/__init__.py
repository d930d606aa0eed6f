"""
tildec - Front End for the Tilde Teaching Language
==================================================

This package provides the first stage of a compiler for a small,
C-flavoured teaching language: the lexer, which turns source text into an
ordered stream of classified tokens.

The language at a glance:

    fun factorial(int n) {
        int fact = 1;   ~ running product ~
        string name = "Jake";
        return fact;
    }

Main Components
---------------
- **lexer**: character cursor, boundary rule, comment/string scanners and
  the lexeme classifier
- **cli**: the `tildelex` command-line tool

Quick Start
-----------
    >>> from tildec import lex
    >>> for token in lex("int fact = 1;"):
    ...     print(token.kind.label, token.lexeme)
    Int int
    Identifier fact
    Assignment =
    NumericLiteral 1
    Semicolon ;

Or from the shell:
    $ tildelex -v factorial.tl
"""

__version__ = "0.3.0"

# =============================================================================
# Public API Exports
# =============================================================================

from tildec.errors import TildecError, SourceLocation
from tildec.lexer import (
    Lexer,
    LexerOptions,
    LexerError,
    Token,
    TokenKind,
    TokenCategory,
    TokenStream,
    lex,
    pad_source,
)

__all__ = [
    "__version__",
    "TildecError",
    "SourceLocation",
    "Lexer",
    "LexerOptions",
    "LexerError",
    "Token",
    "TokenKind",
    "TokenCategory",
    "TokenStream",
    "lex",
    "pad_source",
]
