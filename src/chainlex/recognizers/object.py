"""Object recognizer.

Builds an OBJECT token from `{ "key": value, ... }`. Children alternate
key and value: each key is a STRING token relabelled KEY, read with the
string recognizer directly; each value comes from the dispatcher.

Whitespace around keys, colons and values is skipped. Like arrays, the
comma between members is optional and a comma before `}` is accepted.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from chainlex.errors import InvalidValue, MissingColon, MissingKey, UnterminatedObject
from chainlex.recognizers.string import StringRecognizer
from chainlex.tokens import Token, TokenType

if TYPE_CHECKING:
    from chainlex.dispatcher import Dispatcher

OPEN = "{"
CLOSE = "}"
COLON = ":"
SEPARATOR = ","


class ObjectRecognizer:
    """Consumes a braced list of key/value members."""

    __slots__ = ("_keys",)

    token_type: ClassVar[TokenType] = TokenType.OBJECT

    def __init__(self) -> None:
        self._keys = StringRecognizer()

    def applies(self, dispatcher: Dispatcher) -> bool:
        return dispatcher.cursor.look_ahead() == OPEN

    def consume(self, dispatcher: Dispatcher) -> Token | None:
        """Consume the object.

        Raises:
            MissingKey: A member does not start with a complete string
            MissingColon: A key is not followed by `:`
            InvalidValue: No recognizer produced a value
            UnterminatedObject: Input ended before `}`
            NestingTooDeep: Nesting exceeds config.max_depth
        """
        cursor = dispatcher.cursor
        position, lineno = cursor.mark
        col = cursor.col
        children: list[Token] = []

        def unterminated() -> UnterminatedObject:
            return cursor.error(
                UnterminatedObject, f"object opened at {lineno}:{col} is not closed"
            )

        with dispatcher.descend():
            cursor.advance()
            while True:
                dispatcher.skip_whitespace()
                if cursor.exhausted:
                    raise unterminated()
                if cursor.look_ahead() == CLOSE:
                    cursor.advance()
                    return Token.composite(self.token_type, position, lineno, children)

                children.append(self._key(dispatcher))

                dispatcher.skip_whitespace()
                if cursor.exhausted:
                    raise unterminated()
                if cursor.look_ahead() != COLON:
                    raise cursor.error(MissingColon, f"expected ':' after key {children[-1].value}")
                cursor.advance()

                dispatcher.skip_whitespace()
                if cursor.exhausted:
                    raise unterminated()
                children.append(self._value(dispatcher))

                dispatcher.skip_whitespace()
                if cursor.look_ahead() == SEPARATOR:
                    cursor.advance()

    def _key(self, dispatcher: Dispatcher) -> Token:
        cursor = dispatcher.cursor
        offset, lineno = cursor.mark
        token = self._keys.consume(dispatcher) if self._keys.applies(dispatcher) else None
        if token is None:
            raise cursor.error(MissingKey, "expected a string key", offset=offset, lineno=lineno)
        return token.relabel(TokenType.KEY)

    def _value(self, dispatcher: Dispatcher) -> Token:
        cursor = dispatcher.cursor
        offset, lineno = cursor.mark
        token = dispatcher.next()
        if token is None:
            raise cursor.error(InvalidValue, "expected a value", offset=offset, lineno=lineno)
        return token
