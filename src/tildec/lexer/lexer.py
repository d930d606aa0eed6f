"""
Lexer
=====

Single left-to-right pass that turns padded source text into a TokenStream.

Scanning Loop
-------------
For each character position, while a lookahead character exists:

1. A comment delimiter (~) hands the cursor to the comment scanner.
2. A string delimiter (") hands the cursor to the string scanner.
3. Any other non-whitespace character is appended to the lexeme buffer;
   when the boundary rule says the lexeme is complete it is classified
   and appended to the stream.

Whitespace never enters the buffer and never becomes a token.

Padding
-------
A lexeme is only completed when the character after it is seen, so the
source must end in whitespace. Lexer() rejects unpadded text; lex() pads
for you:

>>> from tildec.lexer import lex
>>> [t.kind.label for t in lex("return 0;")]
['Return', 'NumericLiteral', 'Semicolon']
"""

import logging
from dataclasses import dataclass
from typing import Optional

from tildec.errors import SourceLocation
from tildec.lexer.charclass import ends_token, is_whitespace
from tildec.lexer.classifier import classify
from tildec.lexer.cursor import CharacterCursor
from tildec.lexer.errors import InsufficientPaddingError
from tildec.lexer.scanners import COMMENT_SCANNER, STRING_SCANNER, DelimitedScanner
from tildec.lexer.tokens import Token, TokenStream

logger = logging.getLogger(__name__)


# Minimum trailing whitespace the lexer needs after the last real character
MIN_PADDING = 2
DEFAULT_PADDING = " " * MIN_PADDING


# =============================================================================
# Options
# =============================================================================

@dataclass
class LexerOptions:
    """
    Lexer configuration options.

    Attributes:
        filename: Source name used in token locations and error messages
        padding: Whitespace appended by lex() and pad_source(); at least
                 MIN_PADDING characters, all whitespace
        trace: Log the character window at every position (DEBUG level)
    """
    filename: str = "<input>"
    padding: str = DEFAULT_PADDING
    trace: bool = False

    def __post_init__(self):
        if len(self.padding) < MIN_PADDING or not all(is_whitespace(c) for c in self.padding):
            raise ValueError(
                f"padding must be at least {MIN_PADDING} whitespace characters, "
                f"got {self.padding!r}"
            )


def pad_source(source: str, padding: str = DEFAULT_PADDING) -> str:
    """Append the trailing whitespace the lexer requires."""
    return source + padding


def is_padded(source: str) -> bool:
    """Return True if `source` ends with enough whitespace to be lexed."""
    tail = source[-MIN_PADDING:]
    return len(tail) == MIN_PADDING and all(is_whitespace(c) for c in tail)


# =============================================================================
# Lexer Implementation
# =============================================================================

class Lexer:
    """
    Tokenizes padded source text.

    Usage:
        lexer = Lexer(pad_source(text), LexerOptions(filename="fact.tl"))
        tokens = lexer.tokenize()

    Attributes:
        source: The padded source being tokenized
        options: Lexer configuration
    """

    SCANNERS: tuple[DelimitedScanner, ...] = (COMMENT_SCANNER, STRING_SCANNER)

    def __init__(self, source: str, options: Optional[LexerOptions] = None):
        """
        Initialize the lexer.

        Args:
            source: Source text ending in at least MIN_PADDING whitespace
                    characters
            options: Lexer configuration (uses defaults if None)

        Raises:
            InsufficientPaddingError: If the source is not padded
        """
        if not is_padded(source):
            raise InsufficientPaddingError(MIN_PADDING)

        self.source = source
        self.options = options or LexerOptions()

    @property
    def filename(self) -> str:
        return self.options.filename

    def tokenize(self) -> TokenStream:
        """
        Scan the whole source.

        Returns:
            Tokens in source order

        Raises:
            LexerError: If a comment or string is never closed
        """
        tokens = TokenStream()
        cursor = CharacterCursor(self.source)

        buffer: list[str] = []
        start: Optional[SourceLocation] = None

        while cursor.has_lookahead:
            char = cursor.current

            if self.options.trace:
                logger.debug(f"window {cursor.previous!r} {char!r} {cursor.next!r}")

            scanner = self._scanner_for(char)
            if scanner is not None:
                # A span opening mid-lexeme completes the pending lexeme
                if buffer:
                    tokens.append(self._emit(buffer, start))
                    buffer = []
                token, cursor = scanner.scan(cursor, self.filename)
                tokens.append(token)
                continue

            if not is_whitespace(char):
                if not buffer:
                    start = cursor.location(self.filename)
                buffer.append(char)
                if ends_token(char, cursor.next):
                    tokens.append(self._emit(buffer, start))
                    buffer = []

            cursor = cursor.advance()

        logger.debug(f"Tokenized {self.filename}: {len(tokens)} tokens")
        return tokens

    def _scanner_for(self, char: str) -> Optional[DelimitedScanner]:
        for scanner in self.SCANNERS:
            if scanner.opens(char):
                return scanner
        return None

    def _emit(self, buffer: list[str], start: Optional[SourceLocation]) -> Token:
        token = classify("".join(buffer), start)
        logger.debug(f"{token.kind.label}: {token.lexeme!r}")
        return token


def lex(
    source: str,
    filename: str = "<input>",
    options: Optional[LexerOptions] = None,
) -> TokenStream:
    """
    Pad and tokenize source text in one step.

    Args:
        source: Unpadded source text
        filename: Source name for locations (ignored if options are given)
        options: Lexer configuration

    Returns:
        Tokens in source order
    """
    if options is None:
        options = LexerOptions(filename=filename)
    return Lexer(pad_source(source, options.padding), options).tokenize()
