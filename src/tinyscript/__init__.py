"""tinyscript — lexical front end for a small scripting language."""

from tinyscript.lexer import Keyword, Lexer, LexerError, LexResult, Token, TokenKind, tokenize

__version__ = "0.1.0"

__all__ = [
    "Keyword",
    "Lexer",
    "LexerError",
    "LexResult",
    "Token",
    "TokenKind",
    "tokenize",
    "__version__",
]
