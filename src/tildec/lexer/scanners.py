"""
Delimited Scanners
==================

Sub-scanners for the two opaque spans of the language:

- Comments:         ~ any text ~
- String literals:  "any text"

Both spans open and close with the same character and have no escape
sequences, so the delimiter can never appear inside one. The lexer hands a
scanner its cursor when it sees an opening delimiter; the scanner consumes
the whole span and gives back the token plus a cursor positioned on the
first character after the closing delimiter.
"""

import logging
from dataclasses import dataclass

from tildec.lexer.cursor import CharacterCursor
from tildec.lexer.errors import (
    UnterminatedCommentError,
    UnterminatedLiteralError,
    UnterminatedStringError,
)
from tildec.lexer.tokens import (
    COMMENT_DELIMITER,
    STRING_DELIMITER,
    Token,
    TokenKind,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DelimitedScanner:
    """
    Scanner for a span that opens and closes with the same character.

    Attributes:
        delimiter: The opening and closing character
        kind: Kind of the token produced
        error: Exception raised when the span is never closed
    """
    delimiter: str
    kind: TokenKind
    error: type[UnterminatedLiteralError]

    def opens(self, char: str) -> bool:
        """Return True if `char` starts a span for this scanner."""
        return char == self.delimiter

    def scan(
        self,
        cursor: CharacterCursor,
        filename: str = "<input>",
    ) -> tuple[Token, CharacterCursor]:
        """
        Consume a delimited span starting at `cursor`.

        Args:
            cursor: Cursor positioned on the opening delimiter
            filename: Source name for token locations and errors

        Returns:
            The span's token (delimiters included in the lexeme) and a
            cursor on the character after the closing delimiter

        Raises:
            UnterminatedLiteralError: If the text ends before the span closes
        """
        start = cursor
        cursor = cursor.advance()  # opening delimiter

        body = []
        while True:
            if cursor.at_end:
                raise self.error(
                    self.delimiter,
                    start.location(filename),
                    start.line_text(),
                )
            char = cursor.current
            if char == self.delimiter:
                break
            body.append(char)
            cursor = cursor.advance()

        cursor = cursor.advance()  # closing delimiter

        lexeme = f"{self.delimiter}{''.join(body)}{self.delimiter}"
        logger.debug(f"Scanned {self.kind.label} at {start.line}:{start.column} ({len(body)} chars)")
        return Token(lexeme, self.kind, start.location(filename)), cursor


COMMENT_SCANNER = DelimitedScanner(
    COMMENT_DELIMITER,
    TokenKind.COMMENT,
    UnterminatedCommentError,
)

STRING_SCANNER = DelimitedScanner(
    STRING_DELIMITER,
    TokenKind.STRING_LITERAL,
    UnterminatedStringError,
)
