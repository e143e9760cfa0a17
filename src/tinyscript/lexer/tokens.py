"""Token kinds, keywords and the Token dataclass for the tinyscript lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Keyword(Enum):
    """Reserved words of the language, valued by their spelling."""

    CONST = "const"
    ELSE = "else"
    FOR = "for"
    FUNCTION = "function"
    IF = "if"
    IMPORT = "import"
    RETURN = "return"
    VAR = "var"


class TokenKind(Enum):
    """Every distinct token the tinyscript lexer can produce."""

    # Structural punctuation
    COMMA = auto()          # ,
    SEMI = auto()           # ;
    OPEN_PAREN = auto()     # (
    CLOSE_PAREN = auto()    # )
    OPEN_BRACE = auto()     # {
    CLOSE_BRACE = auto()    # }
    OPEN_BRACKET = auto()   # [
    CLOSE_BRACKET = auto()  # ]

    # Words and literals
    KEYWORD = auto()
    IDENT = auto()
    NUMBER = auto()

    # Any other single character
    OP = auto()

    # Special
    LINE_COMMENT = auto()   # # ... end of line
    EOF = auto()


# Map keyword spellings to keywords (exact, case-sensitive)
KEYWORDS: dict[str, Keyword] = {kw.value: kw for kw in Keyword}

# Map single punctuation characters to token kinds
PUNCTUATION: dict[str, TokenKind] = {
    ";": TokenKind.SEMI,
    ",": TokenKind.COMMA,
    "(": TokenKind.OPEN_PAREN,
    ")": TokenKind.CLOSE_PAREN,
    "{": TokenKind.OPEN_BRACE,
    "}": TokenKind.CLOSE_BRACE,
    "[": TokenKind.OPEN_BRACKET,
    "]": TokenKind.CLOSE_BRACKET,
}


@dataclass(frozen=True, slots=True)
class Token:
    """A single token produced by the lexer.

    ``value`` holds the payload: a `Keyword` for KEYWORD, the text for
    IDENT, a float for NUMBER, the character for OP, and None otherwise.
    ``start`` and ``end`` delimit the consumed span of the source
    (``end`` exclusive); ``line`` and ``column`` are 1-based.
    """

    kind: TokenKind
    value: Keyword | str | float | None
    start: int
    end: int
    line: int
    column: int
    file: str = "<unknown>"

    @property
    def is_eof(self) -> bool:
        return self.kind is TokenKind.EOF

    def __repr__(self) -> str:
        if self.value is None:
            return f"Token({self.kind.name}, {self.line}:{self.column})"
        if isinstance(self.value, Keyword):
            return f"Token({self.kind.name}, {self.value.name}, {self.line}:{self.column})"
        return f"Token({self.kind.name}, {self.value!r}, {self.line}:{self.column})"
