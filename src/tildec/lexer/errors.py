"""
Lexer Error Hierarchy
=====================

Exceptions raised while scanning source text. All of them abort the scan:
the lexer never returns a partial token stream.

Exception Hierarchy
-------------------
LexerError (base for all scanning errors)
├── CursorUnderrunError - the lookahead window was read past the text
├── InsufficientPaddingError - source does not end in enough whitespace
└── UnterminatedLiteralError - delimited span never closed
    ├── UnterminatedCommentError - missing closing '~'
    └── UnterminatedStringError - missing closing '"'
"""

from typing import Optional

from tildec.errors import TildecError, SourceLocation


class LexerError(TildecError):
    """
    Base exception for all lexer errors.

    Raised when the source cannot be scanned into tokens. Token
    classification itself never fails; every error here is a malformed
    or under-padded input.
    """
    pass


class CursorUnderrunError(LexerError, IndexError):
    """
    The character window was read or advanced past the end of the text.

    This is the fatal indexing fault of the scanner. It subclasses
    IndexError so code that treats the cursor like a sequence can
    catch it the usual way.
    """

    def __init__(self, index: int, length: int):
        self.index = index
        self.length = length
        super().__init__(
            f"character index {index} is outside the source text (length {length})",
            hint="pad the source with trailing whitespace before scanning",
        )


class InsufficientPaddingError(LexerError):
    """
    The source handed to the lexer does not end in the required whitespace.

    The final lexeme is only completed when a whitespace character follows
    it, so unpadded input would silently lose its last token.
    """

    def __init__(self, required: int):
        self.required = required
        super().__init__(
            f"source must end with at least {required} whitespace characters",
            hint="use pad_source() or lex(), which pad the source for you",
        )


class UnterminatedLiteralError(LexerError):
    """
    A comment or string was opened but never closed.

    Attributes:
        delimiter: The delimiter character that opened the span
    """

    description = "delimited span"

    def __init__(
        self,
        delimiter: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.delimiter = delimiter
        super().__init__(
            f"unterminated {self.description}",
            location=location,
            hint=f"add a closing '{delimiter}' to end the {self.description}",
            source_line=source_line,
        )


class UnterminatedCommentError(UnterminatedLiteralError):
    """
    Unterminated comment.

    Example:
        int x = 0; ~ starts at zero
    """

    description = "comment"


class UnterminatedStringError(UnterminatedLiteralError):
    """
    Unterminated string literal.

    Example:
        string name = "Jake;
    """

    description = "string literal"
