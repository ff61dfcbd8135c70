"""Identifier recognizer."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, ClassVar

from chainlex.tokens import Token, TokenType

if TYPE_CHECKING:
    from chainlex.cursor import Cursor
    from chainlex.dispatcher import Dispatcher


def _is_identifier_start(char: str) -> bool:
    return char.isalpha() or char == "_"


def _is_identifier_char(cursor: Cursor) -> bool:
    char = cursor.look_ahead()
    return char.isalnum() or char == "_"


class IdentifierRecognizer:
    """Consumes a letter or underscore followed by letters, digits and underscores.

    Identifiers whose full text appears in `keywords` are typed KEYWORD
    instead of IDENTIFIER. With no keywords, every match is an IDENTIFIER.

    Keywords are matched case-sensitively against the whole run, so with
    keywords=("if",) the input "iffy" is still an identifier.
    """

    __slots__ = ("_keywords",)

    token_type: ClassVar[TokenType] = TokenType.IDENTIFIER

    def __init__(self, keywords: Iterable[str] = ()) -> None:
        self._keywords = frozenset(keywords)

    @property
    def keywords(self) -> frozenset[str]:
        return self._keywords

    def applies(self, dispatcher: Dispatcher) -> bool:
        return _is_identifier_start(dispatcher.cursor.look_ahead())

    def consume(self, dispatcher: Dispatcher) -> Token | None:
        cursor = dispatcher.cursor
        position, lineno = cursor.mark
        text = cursor.consume_while(_is_identifier_char)
        token_type = TokenType.KEYWORD if text in self._keywords else self.token_type
        return Token(token_type, text, position, lineno)
