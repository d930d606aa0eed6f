"""
Token Definitions
=================

Token kinds, the lexeme table, and the token containers produced by the
lexer.

Every token kind belongs to exactly one category:

| Category  | Kinds                                                    |
|-----------|----------------------------------------------------------|
| TYPE      | char, int, prec, bool, string, byte, class, static       |
| BOOLEAN   | true, false                                              |
| KEYWORD   | fun, return, returns, while, do, for, in, if, else, ...  |
| OPERATOR  | + - * / ^ > <                                            |
| SYMBOL    | = ( ) { } [ ] . , : ; ' "                                |
| MARKER    | # & ?                                                    |
| TRIVIA    | space, tab, newline, comment                             |
| OTHER     | identifier, string literal, numeric literal              |

Symbols split the surrounding text into separate lexemes. Markers do not:
they are classified only when they stand alone, so `a&b` is one identifier.

The fixed lexemes of all kinds live in a single table, LEXEME_KINDS, which
is built once from four families (symbols, keywords, operators, whitespace).
Character predicates in tildec.lexer.charclass are derived from it.
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, overload

from tildec.errors import SourceLocation


# Delimiters of the two opaque spans
COMMENT_DELIMITER = "~"
STRING_DELIMITER = '"'


# =============================================================================
# Token Categories and Kinds
# =============================================================================

class TokenCategory(Enum):
    """Coarse grouping of token kinds."""

    TYPE = auto()           # Type names
    BOOLEAN = auto()        # Boolean literals
    KEYWORD = auto()        # Control and statement keywords
    OPERATOR = auto()       # Single-character operators
    SYMBOL = auto()         # Single-character punctuation
    MARKER = auto()         # Punctuation that does not split words
    TRIVIA = auto()         # Whitespace and comments
    OTHER = auto()          # Identifiers and literals


class TokenKind(Enum):
    """
    Token kinds of the language.

    The set is closed: the lexer never creates kinds at runtime. Use
    `kind.category` for the group a kind belongs to and `kind.label` for
    its display name in token listings.
    """

    # === Type Keywords ===
    CHAR = auto()           # char
    INT = auto()            # int
    PREC = auto()           # prec (precision number)
    BOOL = auto()           # bool
    STRING = auto()         # string
    BYTE = auto()           # byte
    CLASS = auto()          # class
    STATIC = auto()         # static

    # === Boolean Literals ===
    TRUE = auto()           # true
    FALSE = auto()          # false

    # === Control Keywords ===
    FUNCTION = auto()       # fun
    RETURN = auto()         # return
    RETURNS = auto()        # returns
    WHILE = auto()          # while
    DO = auto()             # do
    FOR = auto()            # for
    IN = auto()             # in
    IF = auto()             # if
    ELSE = auto()           # else
    INCLUDE = auto()        # include
    BREAK = auto()          # break
    CONTINUE = auto()       # continue

    # === Built-in Statements ===
    ASSERT = auto()         # assert
    PRINT = auto()          # print
    INPUT = auto()          # input

    # === Operators ===
    PLUS = auto()           # +
    MINUS = auto()          # -
    STAR = auto()           # *
    SLASH = auto()          # /
    CARET = auto()          # ^
    GREATER = auto()        # >
    LESS = auto()           # <

    # === Symbols ===
    ASSIGNMENT = auto()     # =
    LEFT_PAREN = auto()     # (
    RIGHT_PAREN = auto()    # )
    LEFT_BRACE = auto()     # {
    RIGHT_BRACE = auto()    # }
    LEFT_BRACKET = auto()   # [
    RIGHT_BRACKET = auto()  # ]
    DOT = auto()            # .
    COMMA = auto()          # ,
    COLON = auto()          # :
    SEMICOLON = auto()      # ;
    SINGLE_QUOTE = auto()   # '
    DOUBLE_QUOTE = auto()   # "

    # === Markers ===
    TAG = auto()            # #
    REFERENCE = auto()      # &
    QUESTION = auto()       # ?

    # === Trivia ===
    SPACE = auto()
    TAB = auto()
    NEWLINE = auto()
    COMMENT = auto()        # ~ ... ~

    # === Other ===
    IDENTIFIER = auto()
    STRING_LITERAL = auto()     # "..."
    NUMERIC_LITERAL = auto()

    @property
    def category(self) -> TokenCategory:
        """The category this kind belongs to."""
        return _CATEGORIES[self]

    @property
    def label(self) -> str:
        """CamelCase display name, e.g. 'NumericLiteral'."""
        return "".join(part.capitalize() for part in self.name.split("_"))


def _categorize() -> dict[TokenKind, TokenCategory]:
    groups = {
        TokenCategory.TYPE: (
            TokenKind.CHAR, TokenKind.INT, TokenKind.PREC, TokenKind.BOOL,
            TokenKind.STRING, TokenKind.BYTE, TokenKind.CLASS, TokenKind.STATIC,
        ),
        TokenCategory.BOOLEAN: (TokenKind.TRUE, TokenKind.FALSE),
        TokenCategory.KEYWORD: (
            TokenKind.FUNCTION, TokenKind.RETURN, TokenKind.RETURNS,
            TokenKind.WHILE, TokenKind.DO, TokenKind.FOR, TokenKind.IN,
            TokenKind.IF, TokenKind.ELSE, TokenKind.INCLUDE, TokenKind.BREAK,
            TokenKind.CONTINUE, TokenKind.ASSERT, TokenKind.PRINT,
            TokenKind.INPUT,
        ),
        TokenCategory.OPERATOR: (
            TokenKind.PLUS, TokenKind.MINUS, TokenKind.STAR, TokenKind.SLASH,
            TokenKind.CARET, TokenKind.GREATER, TokenKind.LESS,
        ),
        TokenCategory.SYMBOL: (
            TokenKind.ASSIGNMENT, TokenKind.LEFT_PAREN, TokenKind.RIGHT_PAREN,
            TokenKind.LEFT_BRACE, TokenKind.RIGHT_BRACE,
            TokenKind.LEFT_BRACKET, TokenKind.RIGHT_BRACKET, TokenKind.DOT,
            TokenKind.COMMA, TokenKind.COLON, TokenKind.SEMICOLON,
            TokenKind.SINGLE_QUOTE, TokenKind.DOUBLE_QUOTE,
        ),
        TokenCategory.MARKER: (
            TokenKind.TAG, TokenKind.REFERENCE, TokenKind.QUESTION,
        ),
        TokenCategory.TRIVIA: (
            TokenKind.SPACE, TokenKind.TAB, TokenKind.NEWLINE,
            TokenKind.COMMENT,
        ),
        TokenCategory.OTHER: (
            TokenKind.IDENTIFIER, TokenKind.STRING_LITERAL,
            TokenKind.NUMERIC_LITERAL,
        ),
    }
    categories = {
        kind: category
        for category, kinds in groups.items()
        for kind in kinds
    }
    missing = [kind.name for kind in TokenKind if kind not in categories]
    if missing:
        raise RuntimeError(f"token kinds without a category: {', '.join(missing)}")
    return categories


_CATEGORIES = _categorize()


# =============================================================================
# Lexeme Table
# =============================================================================

# Symbols and delimiter markers
SYMBOLS: dict[str, TokenKind] = {
    "=": TokenKind.ASSIGNMENT,
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
    "{": TokenKind.LEFT_BRACE,
    "}": TokenKind.RIGHT_BRACE,
    "[": TokenKind.LEFT_BRACKET,
    "]": TokenKind.RIGHT_BRACKET,
    ".": TokenKind.DOT,
    ",": TokenKind.COMMA,
    ":": TokenKind.COLON,
    ";": TokenKind.SEMICOLON,
    "'": TokenKind.SINGLE_QUOTE,
    STRING_DELIMITER: TokenKind.DOUBLE_QUOTE,
    COMMENT_DELIMITER: TokenKind.COMMENT,

    # Markers
    "#": TokenKind.TAG,
    "&": TokenKind.REFERENCE,
    "?": TokenKind.QUESTION,
}

# Keywords and type names
KEYWORDS: dict[str, TokenKind] = {
    # Types
    "char": TokenKind.CHAR,
    "int": TokenKind.INT,
    "prec": TokenKind.PREC,
    "bool": TokenKind.BOOL,
    "string": TokenKind.STRING,
    "byte": TokenKind.BYTE,
    "class": TokenKind.CLASS,
    "static": TokenKind.STATIC,
    "true": TokenKind.TRUE,
    "false": TokenKind.FALSE,

    # Built-in statements
    "assert": TokenKind.ASSERT,
    "print": TokenKind.PRINT,
    "input": TokenKind.INPUT,

    # Control flow
    "fun": TokenKind.FUNCTION,
    "return": TokenKind.RETURN,
    "returns": TokenKind.RETURNS,
    "while": TokenKind.WHILE,
    "do": TokenKind.DO,
    "for": TokenKind.FOR,
    "in": TokenKind.IN,
    "if": TokenKind.IF,
    "else": TokenKind.ELSE,
    "include": TokenKind.INCLUDE,
    "break": TokenKind.BREAK,
    "continue": TokenKind.CONTINUE,
}

OPERATORS: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "^": TokenKind.CARET,
    ">": TokenKind.GREATER,
    "<": TokenKind.LESS,
}

# Only used internally; whitespace never becomes a token
WHITESPACE: dict[str, TokenKind] = {
    " ": TokenKind.SPACE,
    "\t": TokenKind.TAB,
    "\n": TokenKind.NEWLINE,
}

LEXEME_KINDS: dict[str, TokenKind] = {
    **SYMBOLS,
    **KEYWORDS,
    **OPERATORS,
    **WHITESPACE,
}


def lexemes_in(category: TokenCategory) -> frozenset[str]:
    """Return every fixed lexeme whose kind belongs to `category`."""
    return frozenset(
        lexeme for lexeme, kind in LEXEME_KINDS.items()
        if kind.category is category
    )


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A classified lexeme.

    Equality compares the lexeme and kind only; two tokens with the same
    text and kind are equal wherever they occur in the source.

    Attributes:
        lexeme: The source text consumed for this token (delimiters included
            for comments and string literals)
        kind: The TokenKind classification
        location: Position of the first character, if known
    """
    lexeme: str
    kind: TokenKind
    location: Optional[SourceLocation] = field(default=None, compare=False)

    def __repr__(self) -> str:
        """Format token for debugging output."""
        if self.location is not None:
            return (
                f"Token({self.kind.name}, {self.lexeme!r}, "
                f"{self.location.line}:{self.location.column})"
            )
        return f"Token({self.kind.name}, {self.lexeme!r})"

    @property
    def category(self) -> TokenCategory:
        return self.kind.category

    def is_trivia(self) -> bool:
        """Return True if this token is whitespace or a comment."""
        return self.kind.category is TokenCategory.TRIVIA

    def is_type_keyword(self) -> bool:
        """Return True if this token names a type."""
        return self.kind.category is TokenCategory.TYPE


# =============================================================================
# Token Stream
# =============================================================================

class TokenStream(Sequence[Token]):
    """
    Append-only sequence of tokens in source order.

    Tokens are never reordered, removed or deduplicated once appended.
    """

    __hash__ = None

    def __init__(self, tokens: Optional[list[Token]] = None):
        self._tokens: list[Token] = []
        for token in tokens or ():
            self.append(token)

    def append(self, token: Token) -> None:
        if not isinstance(token, Token):
            raise TypeError(f"expected Token, got {type(token).__name__}")
        self._tokens.append(token)

    @overload
    def __getitem__(self, index: int) -> Token: ...

    @overload
    def __getitem__(self, index: slice) -> list[Token]: ...

    def __getitem__(self, index):
        return self._tokens[index]

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(self._tokens)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TokenStream):
            return self._tokens == other._tokens
        if isinstance(other, list):
            return self._tokens == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"TokenStream({self._tokens!r})"

    def kinds(self) -> list[TokenKind]:
        """Return the kind of every token, in order."""
        return [token.kind for token in self._tokens]

    def lexemes(self) -> list[str]:
        """Return the lexeme of every token, in order."""
        return [token.lexeme for token in self._tokens]

    def significant(self) -> list[Token]:
        """Return the tokens that are not trivia (comments dropped)."""
        return [token for token in self._tokens if not token.is_trivia()]

    def join(self) -> str:
        """Rebuild source text from the lexemes, separated by single spaces."""
        return " ".join(self.lexemes())
