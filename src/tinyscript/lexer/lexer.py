"""tinyscript lexer — hand-written scanner producing one token per call.

Design decisions:
- The token class is chosen by the first character only; every character
  starts exactly one class, with OP as the catch-all.
- Comments (# ...) run to and including the newline and are emitted as a
  payload-free LINE_COMMENT token.
- Number literals are scanned permissively (``.`` and hex digits) and then
  parsed strictly as floats; a span that does not parse is a LexerError.
- Iterating a Lexer stops silently on the first error, which is kept on
  ``Lexer.error``; ``tokenize()`` reports it on the returned LexResult.
"""

from __future__ import annotations

import string
from collections.abc import Iterator
from dataclasses import dataclass, field

from tinyscript.lexer.tokens import KEYWORDS, PUNCTUATION, Token, TokenKind
from tinyscript.utils.logger import get_logger

logger = get_logger(__name__)

_DIGITS = frozenset(string.digits)
_NUMBER_CHARS = frozenset(string.hexdigits + ".")
_IDENT_START = frozenset(string.ascii_letters + "_")


class LexerError(Exception):
    """Raised when a span of source cannot be turned into a token.

    ``offset`` is the character offset where the failing token starts.
    """

    def __init__(
        self,
        message: str,
        offset: int,
        line: int = 1,
        column: int = 1,
        file: str = "<unknown>",
    ) -> None:
        self.message = message
        self.offset = offset
        self.line = line
        self.column = column
        self.file = file
        super().__init__(f"{file}:{line}:{column}: {message}")


@dataclass(frozen=True, slots=True)
class LexResult:
    """Outcome of lexing a whole source text.

    ``tokens`` holds every token produced before the scan stopped. When the
    scan stopped on a lexing error rather than at end of input, ``error``
    carries it and ``truncated`` is true.
    """

    tokens: list[Token] = field(default_factory=list)
    error: LexerError | None = None

    @property
    def completed(self) -> bool:
        return self.error is None

    @property
    def truncated(self) -> bool:
        return self.error is not None

    def raise_for_error(self) -> None:
        """Re-raise the stored lexing error, if any."""
        if self.error is not None:
            raise self.error

    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)


class Lexer:
    """Scans tinyscript source into `Token` objects, one per call.

    Usage::

        lexer = Lexer(source_text, filename="example.ts")
        token = lexer.next_token()      # single token, may raise LexerError
        tokens = list(lexer)            # remaining tokens, stops on EOF/error

    A Lexer is single use: its cursor only moves forward.
    """

    def __init__(self, source: str, filename: str = "<unknown>") -> None:
        self.source = source
        self.filename = filename
        self.error: LexerError | None = None
        self._pos = 0
        self._line = 1
        self._column = 1

    @property
    def pos(self) -> int:
        """Offset of the next unconsumed character."""
        return self._pos

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def next_token(self) -> Token:
        """Scan and return the next token.

        Returns an EOF token once only whitespace remains. Raises
        `LexerError` if a number literal cannot be parsed; the cursor is
        left at the start of the literal in that case.
        """
        self._skip_whitespace()
        if self._at_end():
            return self._make_token(TokenKind.EOF, None, self._pos, self._line, self._column)

        start, line, column = self._pos, self._line, self._column
        ch = self._peek()

        if ch in PUNCTUATION:
            self._advance()
            return self._make_token(PUNCTUATION[ch], None, start, line, column)

        if ch == "#":
            self._skip_comment()
            return self._make_token(TokenKind.LINE_COMMENT, None, start, line, column)

        if ch == "." or ch in _DIGITS:
            return self._scan_number()

        if ch in _IDENT_START:
            return self._scan_identifier()

        self._advance()
        return self._make_token(TokenKind.OP, ch, start, line, column)

    def tokenize(self) -> LexResult:
        """Lex all remaining input and return the tokens with a final status."""
        tokens = list(self)
        logger.debug("Lexed %s: %d token(s)", self.filename, len(tokens))
        return LexResult(tokens, self.error)

    def __iter__(self) -> Iterator[Token]:
        self.error = None
        while True:
            try:
                token = self.next_token()
            except LexerError as e:
                self.error = e
                logger.warning("Token stream truncated: %s", e)
                return
            if token.is_eof:
                return
            yield token

    # ------------------------------------------------------------------
    # Token scanning
    # ------------------------------------------------------------------

    def _scan_number(self) -> Token:
        """Scan a number literal and parse it as a float."""
        start, line, column = self._pos, self._line, self._column
        end = start
        while end < len(self.source) and self.source[end] in _NUMBER_CHARS:
            end += 1

        text = self.source[start:end]
        try:
            value = float(text)
        except ValueError:
            raise LexerError(
                f"Invalid number literal: {text!r}",
                start, line, column, self.filename,
            ) from None

        while self._pos < end:
            self._advance()
        return self._make_token(TokenKind.NUMBER, value, start, line, column)

    def _scan_identifier(self) -> Token:
        """Scan an identifier or keyword."""
        start, line, column = self._pos, self._line, self._column

        while not self._at_end() and (self._peek().isalnum() or self._peek() == "_"):
            self._advance()

        word = self.source[start:self._pos]
        keyword = KEYWORDS.get(word)
        if keyword is not None:
            return self._make_token(TokenKind.KEYWORD, keyword, start, line, column)
        return self._make_token(TokenKind.IDENT, word, start, line, column)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _peek(self) -> str:
        """Return the current character without consuming it."""
        return self.source[self._pos]

    def _advance(self) -> str:
        """Consume and return the current character."""
        ch = self.source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
            self._column = 1
        else:
            self._column += 1
        return ch

    def _at_end(self) -> bool:
        return self._pos >= len(self.source)

    def _skip_whitespace(self) -> None:
        while not self._at_end() and self._peek().isspace():
            self._advance()

    def _skip_comment(self) -> None:
        """Skip from # through the end of the line, newline included."""
        while not self._at_end():
            if self._advance() == "\n":
                break

    def _make_token(
        self,
        kind: TokenKind,
        value: object,
        start: int,
        line: int,
        column: int,
    ) -> Token:
        return Token(kind, value, start, self._pos, line, column, self.filename)


def tokenize(source: str, filename: str = "<unknown>") -> LexResult:
    """Lex ``source`` from a fresh Lexer and return all tokens."""
    return Lexer(source, filename).tokenize()
