"""Tests for the JSON token cursor."""

import pytest

from shapeshift_client.core.exceptions import MalformedDocumentError
from shapeshift_client.mapping.tokens import Token, TokenKind, open_document


def kinds_and_values(text):
    return [(t.kind, t.value) for t in open_document(text)]


class TestTokenStream:
    """Tests for token production."""

    def test_object_with_mixed_scalars(self):
        """Numbers, booleans and null come through as raw text / None."""
        tokens = kinds_and_values('{"a": 1.50, "b": [true, null, 7], "c": "x"}')

        assert tokens == [
            (TokenKind.OBJECT_START, None),
            (TokenKind.FIELD_NAME, "a"),
            (TokenKind.SCALAR, "1.50"),
            (TokenKind.FIELD_NAME, "b"),
            (TokenKind.ARRAY_START, None),
            (TokenKind.SCALAR, "true"),
            (TokenKind.SCALAR, None),
            (TokenKind.SCALAR, "7"),
            (TokenKind.ARRAY_END, None),
            (TokenKind.FIELD_NAME, "c"),
            (TokenKind.SCALAR, "x"),
            (TokenKind.OBJECT_END, None),
        ]

    def test_empty_array(self):
        """An empty array is just start and end."""
        assert kinds_and_values("[]") == [
            (TokenKind.ARRAY_START, None),
            (TokenKind.ARRAY_END, None),
        ]

    def test_duplicate_keys_kept_in_order(self):
        """Repeated keys are not collapsed."""
        names = [t.value for t in open_document('{"a": "1", "a": "2"}') if t.kind == TokenKind.FIELD_NAME]
        assert names == ["a", "a"]

    def test_null_token(self):
        """Null is a scalar flagged as null."""
        token = Token(TokenKind.SCALAR, None)
        assert token.is_null
        assert not Token(TokenKind.SCALAR, "").is_null

    def test_bytes_input(self):
        """UTF-8 bytes are accepted."""
        tokens = kinds_and_values('{"name": "Bitcoin ₿"}'.encode("utf-8"))
        assert tokens[2] == (TokenKind.SCALAR, "Bitcoin ₿")


class TestCursor:
    """Tests for cursor behavior."""

    def test_forward_only(self):
        """Once exhausted, the cursor keeps returning end of stream."""
        cursor = open_document('{"a": "1"}')
        seen = list(cursor)

        assert len(seen) == 4
        assert cursor.advance() is None
        assert cursor.advance() is None
        assert list(cursor) == []

    def test_advance(self):
        """advance() steps one token at a time."""
        cursor = open_document('["x"]')
        assert cursor.advance() == Token(TokenKind.ARRAY_START)
        assert cursor.advance() == Token(TokenKind.SCALAR, "x")
        assert cursor.advance() == Token(TokenKind.ARRAY_END)
        assert cursor.advance() is None


class TestMalformedDocuments:
    """Tests for invalid input."""

    @pytest.mark.parametrize(
        "text",
        [
            '{"pair": ',
            "<html>502 Bad Gateway</html>",
            "",
            "NaN",
            '{"rate": Infinity}',
            b"\xff\xfe",
        ],
    )
    def test_malformed_raises(self, text):
        """Anything that is not well-formed JSON is rejected up front."""
        with pytest.raises(MalformedDocumentError):
            open_document(text)

    def test_excessive_nesting(self):
        """Nesting beyond what the parser can handle is a malformed document, not a crash."""
        with pytest.raises(MalformedDocumentError) as exc_info:
            open_document("[" * 100000 + "]" * 100000)
        assert exc_info.value.reason == "nesting too deep"


class TestNesting:
    """Tests for nested structures."""

    def test_nested_tokens_in_order(self):
        """Objects inside arrays inside objects replay depth-first."""
        assert kinds_and_values('{"a": [{"b": []}, "c"], "d": {}}') == [
            (TokenKind.OBJECT_START, None),
            (TokenKind.FIELD_NAME, "a"),
            (TokenKind.ARRAY_START, None),
            (TokenKind.OBJECT_START, None),
            (TokenKind.FIELD_NAME, "b"),
            (TokenKind.ARRAY_START, None),
            (TokenKind.ARRAY_END, None),
            (TokenKind.OBJECT_END, None),
            (TokenKind.SCALAR, "c"),
            (TokenKind.ARRAY_END, None),
            (TokenKind.FIELD_NAME, "d"),
            (TokenKind.OBJECT_START, None),
            (TokenKind.OBJECT_END, None),
            (TokenKind.OBJECT_END, None),
        ]

    def test_deep_document_replays(self):
        """A deeply nested document replays without recursion."""
        depth = 200
        tokens = kinds_and_values("[" * depth + '"x"' + "]" * depth)

        assert len(tokens) == 2 * depth + 1
        assert tokens[depth] == (TokenKind.SCALAR, "x")

    def test_scalar_document(self):
        assert kinds_and_values('"only"') == [(TokenKind.SCALAR, "only")]
