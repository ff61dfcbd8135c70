"""Number recognizer.

Accepts a superset of numeric syntax: any contiguous run of digits, dots,
signs, and an `e` that is followed by a sign. Runs such as "1.2.3" or
"+-1" come out as single NUMBER tokens; validating them is left to
whatever consumes the tokens.

An `e` is only taken when a sign follows it, so "1e5" is the number "1"
followed by the identifier "e5".
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from chainlex.tokens import Token, TokenType

if TYPE_CHECKING:
    from chainlex.cursor import Cursor
    from chainlex.dispatcher import Dispatcher

_SIGNS = frozenset("+-")
_EXPONENT = "e"


def _is_number_start(char: str) -> bool:
    return char.isdigit() or char in _SIGNS or char == "."


def _is_number_char(cursor: Cursor) -> bool:
    char = cursor.look_ahead()
    if char.isdigit() or char == "." or char in _SIGNS:
        return True
    return char == _EXPONENT and cursor.look_ahead(2) in _SIGNS


class NumberRecognizer:
    """Consumes a numeric run. The token value is the raw text."""

    token_type: ClassVar[TokenType] = TokenType.NUMBER

    def applies(self, dispatcher: Dispatcher) -> bool:
        return _is_number_start(dispatcher.cursor.look_ahead())

    def consume(self, dispatcher: Dispatcher) -> Token | None:
        cursor = dispatcher.cursor
        position, lineno = cursor.mark
        return Token(self.token_type, cursor.consume_while(_is_number_char), position, lineno)
