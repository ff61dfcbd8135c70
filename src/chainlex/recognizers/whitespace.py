"""Whitespace recognizer."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from chainlex.tokens import Token, TokenType

if TYPE_CHECKING:
    from chainlex.cursor import Cursor
    from chainlex.dispatcher import Dispatcher


def _is_whitespace(cursor: Cursor) -> bool:
    return cursor.look_ahead().isspace()


class WhitespaceRecognizer:
    """Consumes a run of whitespace characters into one token."""

    token_type: ClassVar[TokenType] = TokenType.WHITESPACE

    def applies(self, dispatcher: Dispatcher) -> bool:
        return _is_whitespace(dispatcher.cursor)

    def consume(self, dispatcher: Dispatcher) -> Token | None:
        cursor = dispatcher.cursor
        position, lineno = cursor.mark
        return Token(self.token_type, cursor.consume_while(_is_whitespace), position, lineno)
