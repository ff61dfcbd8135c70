"""Array recognizer.

Builds an ARRAY token whose children are the elements between `[` and
`]`. Every element, nested arrays and objects included, is requested
from the dispatcher, so the full recognizer chain applies at every depth.

Whitespace between elements and separators is skipped and does not
appear among the children. Separators are lenient: `[1 2]` and `[,1]`
are accepted. The one separator error is a comma directly before the
closing bracket.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from chainlex.errors import InvalidArrayElement, MalformedArray, TrailingComma, UnterminatedArray
from chainlex.tokens import Token, TokenType

if TYPE_CHECKING:
    from chainlex.dispatcher import Dispatcher

OPEN = "["
CLOSE = "]"
SEPARATOR = ","
_NESTED_OPENERS = frozenset("[{")


class ArrayRecognizer:
    """Consumes a bracketed, comma-separated element list."""

    token_type: ClassVar[TokenType] = TokenType.ARRAY

    def applies(self, dispatcher: Dispatcher) -> bool:
        return dispatcher.cursor.look_ahead() == OPEN

    def consume(self, dispatcher: Dispatcher) -> Token | None:
        """Consume the array.

        Raises:
            TrailingComma: `,` directly before `]`
            InvalidArrayElement: No recognizer produced an element
            MalformedArray: A nested array or object produced no token
            UnterminatedArray: Input ended before `]`
            NestingTooDeep: Nesting exceeds config.max_depth
        """
        cursor = dispatcher.cursor
        position, lineno = cursor.mark
        col = cursor.col
        children: list[Token] = []

        with dispatcher.descend():
            cursor.advance()
            while True:
                dispatcher.skip_whitespace()
                if cursor.exhausted:
                    raise cursor.error(
                        UnterminatedArray, f"array opened at {lineno}:{col} is not closed"
                    )

                char = cursor.look_ahead()
                if char == CLOSE:
                    cursor.advance()
                    return Token.composite(self.token_type, position, lineno, children)

                if char == SEPARATOR:
                    cursor.advance()
                    dispatcher.skip_whitespace()
                    if cursor.look_ahead() == CLOSE:
                        raise cursor.error(TrailingComma, "trailing comma before ']'")
                    continue

                children.append(self._element(dispatcher, char))

    def _element(self, dispatcher: Dispatcher, char: str) -> Token:
        cursor = dispatcher.cursor
        offset, lineno = cursor.mark
        token = dispatcher.next()
        if token is not None:
            return token
        if char in _NESTED_OPENERS:
            raise cursor.error(
                MalformedArray, f"nested {char!r} produced no token", offset=offset, lineno=lineno
            )
        raise cursor.error(
            InvalidArrayElement, f"invalid array element at {char!r}", offset=offset, lineno=lineno
        )
