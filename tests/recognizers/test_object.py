"""Tests for ObjectRecognizer: key/value children and hard failures."""

import pytest

from chainlex import (
    Dispatcher,
    InvalidValue,
    MalformedObject,
    MissingColon,
    MissingKey,
    Token,
    TokenType,
    UnterminatedObject,
    tokenize,
)
from chainlex.diagnostics import UNTERMINATED_STRING


def _children(source: str) -> list[tuple[TokenType, str]]:
    (token,) = tokenize(source)
    assert token.type is TokenType.OBJECT
    return [(c.type, c.value) for c in token.children]


class TestObjectStructure:
    """Well-formed objects."""

    def test_empty(self) -> None:
        (token,) = tokenize("{}")
        assert token.type is TokenType.OBJECT
        assert token.value == "object"
        assert token.children == ()

    def test_key_value_pairs_alternate(self) -> None:
        assert _children('{"key":1,"k2":2}') == [
            (TokenType.KEY, '"key"'),
            (TokenType.NUMBER, "1"),
            (TokenType.KEY, '"k2"'),
            (TokenType.NUMBER, "2"),
        ]

    def test_whitespace_between_parts(self) -> None:
        assert _children('{ "a" : 1 ,\n  "b" :\ttrue }') == [
            (TokenType.KEY, '"a"'),
            (TokenType.NUMBER, "1"),
            (TokenType.KEY, '"b"'),
            (TokenType.BOOLEAN, "true"),
        ]

    def test_key_keeps_string_position(self) -> None:
        (token,) = tokenize('{"a": 1}')
        key = token.children[0]
        assert key.type is TokenType.KEY
        assert (key.position, key.lineno) == (1, 1)

    def test_nested_values(self) -> None:
        (token,) = tokenize('{"list": [1, {"x": null}], "obj": {}}')
        list_value = token.children[1]
        assert list_value.type is TokenType.ARRAY
        inner = list_value.children[1]
        assert inner.type is TokenType.OBJECT
        assert [(c.type, c.value) for c in inner.children] == [
            (TokenType.KEY, '"x"'),
            (TokenType.NULL, "null"),
        ]
        assert token.children[3] == Token(TokenType.OBJECT, "object", 34, 1)

    def test_missing_comma_accepted(self) -> None:
        assert len(_children('{"a":1 "b":2}')) == 4

    def test_comma_before_close_accepted(self) -> None:
        assert _children('{"a":1,}') == [(TokenType.KEY, '"a"'), (TokenType.NUMBER, "1")]


class TestObjectErrors:
    """Hard failures abort the run with a specific error."""

    @pytest.mark.parametrize("source", ["{1:2}", "{a:1}", '{"a":1, b:2}', "{,}"])
    def test_missing_key(self, source: str) -> None:
        with pytest.raises(MissingKey):
            tokenize(source)

    def test_unterminated_key_is_missing_key(self) -> None:
        dispatcher = Dispatcher('{"a:1}')
        with pytest.raises(MissingKey) as exc_info:
            dispatcher.next()
        assert exc_info.value.offset == 1
        assert dispatcher.diagnostics[0].code == UNTERMINATED_STRING

    @pytest.mark.parametrize("source", ['{"a" 1}', '{"a"=1}', '{"a";1}'])
    def test_missing_colon(self, source: str) -> None:
        with pytest.raises(MissingColon):
            tokenize(source)

    @pytest.mark.parametrize("source", ['{"a":}', '{"a": =}', '{"a": "x}'])
    def test_invalid_value(self, source: str) -> None:
        with pytest.raises(InvalidValue):
            tokenize(source)

    @pytest.mark.parametrize("source", ["{", '{"a"', '{"a":', '{"a":1', '{"a":1,', '{"a": [1]'])
    def test_unterminated(self, source: str) -> None:
        with pytest.raises(UnterminatedObject):
            tokenize(source)

    def test_unterminated_reports_opening_line_and_column(self) -> None:
        with pytest.raises(UnterminatedObject) as exc_info:
            tokenize('\n {"a": 1')
        assert "object opened at 2:2 is not closed" in str(exc_info.value)

    def test_specific_errors_are_malformed_objects(self) -> None:
        for error_type in (MissingKey, MissingColon, InvalidValue, UnterminatedObject):
            assert issubclass(error_type, MalformedObject)

    def test_error_in_nested_object(self) -> None:
        with pytest.raises(MissingColon):
            tokenize('[{"a": {"b" 1}}]')
