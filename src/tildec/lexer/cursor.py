"""
Character Cursor
================

An immutable position in the source text with a small lookahead window.

`advance()` returns a new cursor instead of moving this one, so a scanner
that is handed a cursor can consume characters without disturbing its
caller's view of the text:

    >>> cursor = CharacterCursor("ab  ")
    >>> cursor.current, cursor.next
    ('a', 'b')
    >>> cursor.advance().current
    'b'
    >>> cursor.current
    'a'
"""

from dataclasses import dataclass

from tildec.errors import SourceLocation
from tildec.lexer.errors import CursorUnderrunError


@dataclass(frozen=True)
class CharacterCursor:
    """
    Position in a source text.

    Attributes:
        text: The complete source being scanned
        index: Index of the current character
        line: Line number of the current character (1-indexed)
        column: Column number of the current character (1-indexed)
    """
    text: str
    index: int = 0
    line: int = 1
    column: int = 1

    # =========================================================================
    # Character Access
    # =========================================================================

    def peek(self, offset: int = 0) -> str:
        """
        Return the character at `index + offset`.

        Raises:
            CursorUnderrunError: If the position is outside the text
        """
        pos = self.index + offset
        if pos < 0 or pos >= len(self.text):
            raise CursorUnderrunError(pos, len(self.text))
        return self.text[pos]

    @property
    def current(self) -> str:
        return self.peek(0)

    @property
    def next(self) -> str:
        return self.peek(1)

    @property
    def previous(self) -> str:
        """The character before `current`, or "" at the start of the text."""
        if self.index == 0:
            return ""
        return self.peek(-1)

    @property
    def at_end(self) -> bool:
        """True once every character has been consumed."""
        return self.index >= len(self.text)

    @property
    def has_lookahead(self) -> bool:
        """True while both `current` and `next` can be read."""
        return self.index + 1 < len(self.text)

    # =========================================================================
    # Movement
    # =========================================================================

    def advance(self) -> "CharacterCursor":
        """
        Return a cursor one character further on.

        Raises:
            CursorUnderrunError: If this cursor is already past the end
        """
        char = self.current

        if char == "\n":
            return CharacterCursor(self.text, self.index + 1, self.line + 1, 1)
        return CharacterCursor(self.text, self.index + 1, self.line, self.column + 1)

    # =========================================================================
    # Error Reporting
    # =========================================================================

    def location(self, filename: str = "<input>") -> SourceLocation:
        return SourceLocation(filename, self.line, self.column)

    def line_text(self) -> str:
        """Return the source line containing the cursor, without its newline."""
        line_start = self.index - (self.column - 1)
        line_end = self.text.find("\n", line_start)
        if line_end == -1:
            line_end = len(self.text)
        return self.text[line_start:line_end]
