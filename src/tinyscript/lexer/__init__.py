"""tinyscript lexer — single-token scanner with a lazy token stream."""

from tinyscript.lexer.tokens import KEYWORDS, PUNCTUATION, Keyword, Token, TokenKind
from tinyscript.lexer.lexer import Lexer, LexerError, LexResult, tokenize

__all__ = [
    "KEYWORDS",
    "PUNCTUATION",
    "Keyword",
    "Token",
    "TokenKind",
    "Lexer",
    "LexerError",
    "LexResult",
    "tokenize",
]
