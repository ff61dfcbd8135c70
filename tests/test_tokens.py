"""Tests for Token and TokenType."""

from dataclasses import FrozenInstanceError

import pytest

from chainlex import tokenize
from chainlex.tokens import Token, TokenType


class TestTokenType:
    """Type tags and composite classification."""

    def test_tags(self) -> None:
        assert {t.value for t in TokenType} == {
            "whitespace",
            "identifier",
            "keyword",
            "number",
            "string",
            "boolean",
            "null",
            "array",
            "object",
            "key",
        }

    def test_composites(self) -> None:
        composites = {t for t in TokenType if t.is_composite}
        assert composites == {TokenType.ARRAY, TokenType.OBJECT}


class TestToken:
    """Token construction and immutability."""

    def test_scalar_has_no_children(self) -> None:
        token = Token(TokenType.NUMBER, "1", 0, 1)
        assert token.children == ()
        assert not token.is_composite

    def test_composite_value_is_own_tag(self) -> None:
        child = Token(TokenType.NUMBER, "1", 1, 1)
        token = Token.composite(TokenType.ARRAY, 0, 1, [child])
        assert token.value == "array"
        assert token.children == (child,)
        assert token.is_composite

    def test_composite_rejects_scalar_type(self) -> None:
        with pytest.raises(ValueError, match="NUMBER"):
            Token.composite(TokenType.NUMBER, 0, 1, [])

    def test_frozen(self) -> None:
        token = Token(TokenType.NUMBER, "1", 0, 1)
        with pytest.raises(FrozenInstanceError):
            token.value = "2"  # type: ignore[misc]

    def test_relabel_returns_new_token(self) -> None:
        token = Token(TokenType.STRING, '"k"', 3, 2)
        key = token.relabel(TokenType.KEY)
        assert key.type is TokenType.KEY
        assert (key.value, key.position, key.lineno) == ('"k"', 3, 2)
        assert token.type is TokenType.STRING

    def test_equality(self) -> None:
        assert Token(TokenType.NULL, "null", 0, 1) == Token(TokenType.NULL, "null", 0, 1)

    def test_repr(self) -> None:
        assert repr(Token(TokenType.NUMBER, "42", 5, 1)) == "Token(NUMBER, '42', line 1, offset 5)"
        long = Token(TokenType.STRING, '"' + "x" * 30 + '"', 0, 1)
        assert "..." in repr(long)


class TestWalk:
    """walk() visits the tree depth-first, parents before children."""

    def test_walk_order(self) -> None:
        (root,) = tokenize("[1,[2,3],5]")
        walked = [(t.type, t.value) for t in root.walk()]
        assert walked == [
            (TokenType.ARRAY, "array"),
            (TokenType.NUMBER, "1"),
            (TokenType.ARRAY, "array"),
            (TokenType.NUMBER, "2"),
            (TokenType.NUMBER, "3"),
            (TokenType.NUMBER, "5"),
        ]

    def test_walk_scalar(self) -> None:
        token = Token(TokenType.NUMBER, "1", 0, 1)
        assert list(token.walk()) == [token]
