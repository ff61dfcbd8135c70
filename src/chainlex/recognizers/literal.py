"""Fixed-literal recognizers for `true`, `false` and `null`.

Matching is exact and case-sensitive against the upcoming characters.
No word boundary is required: "nullable" is NULL followed by the
identifier "able".
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from chainlex.tokens import Token, TokenType

if TYPE_CHECKING:
    from chainlex.cursor import Cursor
    from chainlex.dispatcher import Dispatcher


class _LiteralRecognizer:
    """Base for recognizers that match one of a fixed set of words."""

    token_type: ClassVar[TokenType]
    literals: ClassVar[tuple[str, ...]]

    def _match(self, cursor: Cursor) -> str | None:
        for literal in self.literals:
            if cursor.look_ahead_text(len(literal)) == literal:
                return literal
        return None

    def applies(self, dispatcher: Dispatcher) -> bool:
        return self._match(dispatcher.cursor) is not None

    def consume(self, dispatcher: Dispatcher) -> Token | None:
        # Re-matched rather than remembered from applies() to keep the
        # recognizer stateless.
        cursor = dispatcher.cursor
        literal = self._match(cursor)
        if literal is None:
            return None
        position, lineno = cursor.mark
        cursor.advance(len(literal))
        return Token(self.token_type, literal, position, lineno)


class BooleanRecognizer(_LiteralRecognizer):
    """Matches `true` or `false`."""

    token_type: ClassVar[TokenType] = TokenType.BOOLEAN
    literals: ClassVar[tuple[str, ...]] = ("true", "false")


class NullRecognizer(_LiteralRecognizer):
    """Matches `null`."""

    token_type: ClassVar[TokenType] = TokenType.NULL
    literals: ClassVar[tuple[str, ...]] = ("null",)
