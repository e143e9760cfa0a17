"""Property-based tests for lexer invariants using Hypothesis."""

from hypothesis import given, settings
from hypothesis import strategies as st

from tinyscript.lexer.lexer import Lexer, LexerError, tokenize
from tinyscript.lexer.tokens import KEYWORDS, PUNCTUATION, Keyword, TokenKind

# Bias generated programs toward characters the lexer treats specially
SOURCE_CHARS = st.sampled_from(list("abcdefxyz_019.#;,(){}[]+-=*/ \t\n")) | st.characters()
sources = st.text(SOURCE_CHARS, max_size=300)


class TestStreamInvariants:
    @given(st.text(alphabet=" \t\n\r\f\v", max_size=100))
    def test_whitespace_only_is_empty(self, source: str) -> None:
        result = tokenize(source)
        assert result.tokens == []
        assert result.completed

    @given(sources)
    @settings(max_examples=300)
    def test_spans_reconstruct_source(self, source: str) -> None:
        """Only whitespace lies between consecutive token spans."""
        result = tokenize(source)

        prev = 0
        for token in result:
            assert token.start >= prev
            assert token.end > token.start
            assert source[prev:token.start].strip() == ""
            prev = token.end

        stop = result.error.offset if result.truncated else len(source)
        assert stop >= prev
        assert source[prev:stop].strip() == ""

    @given(sources)
    def test_token_text_matches_payload(self, source: str) -> None:
        for token in tokenize(source):
            text = source[token.start:token.end]
            if token.kind is TokenKind.KEYWORD:
                assert KEYWORDS[text] is token.value
            elif token.kind is TokenKind.IDENT:
                assert text == token.value
                assert text not in KEYWORDS
            elif token.kind is TokenKind.OP:
                assert text == token.value
                assert len(text) == 1
            elif token.kind is TokenKind.NUMBER:
                assert float(text) == token.value
            elif token.kind is TokenKind.LINE_COMMENT:
                assert text.startswith("#")
                assert "\n" not in text[:-1]
            else:
                assert PUNCTUATION[text] is token.kind

    @given(sources)
    def test_cursor_is_monotonic_and_bounded(self, source: str) -> None:
        lexer = Lexer(source)
        prev = lexer.pos
        while True:
            try:
                token = lexer.next_token()
            except LexerError:
                break
            assert prev <= lexer.pos <= len(source)
            prev = lexer.pos
            if token.is_eof:
                break

    @given(sources)
    def test_relexing_is_deterministic(self, source: str) -> None:
        first = tokenize(source)
        second = tokenize(source)
        assert first.tokens == second.tokens
        assert first.completed == second.completed
        if first.truncated:
            assert first.error.offset == second.error.offset

    @given(sources)
    def test_eof_never_emitted(self, source: str) -> None:
        assert all(not token.is_eof for token in tokenize(source))


class TestCommentInvariants:
    @given(st.text(st.characters(exclude_characters="\n"), max_size=80))
    def test_comment_contents_are_discarded(self, body: str) -> None:
        kinds = [(t.kind, t.value) for t in tokenize(f"#{body}\nvar")]
        assert kinds == [
            (TokenKind.LINE_COMMENT, None),
            (TokenKind.KEYWORD, Keyword.VAR),
        ]

    @given(st.text(st.characters(exclude_characters="\n"), max_size=80))
    def test_trailing_comment_terminates(self, body: str) -> None:
        result = tokenize(f"#{body}")
        assert [t.kind for t in result] == [TokenKind.LINE_COMMENT]
        assert result.tokens[0].end == len(body) + 1
