"""Recognizer protocol for pluggable token recognition.

A recognizer answers two questions about the dispatcher's cursor: does
the next character start one of my tokens (applies), and if so, what is
the token (consume). The dispatcher asks each recognizer in order and
hands control to the first that applies.

Thread Safety:
Recognizers must be stateless. All state lives on the Cursor, which is
owned by a single Dispatcher. Multiple dispatchers may call the same
recognizer instance concurrently.

Example:
    >>> class HashRecognizer:
    ...     token_type = TokenType.IDENTIFIER
    ...
    ...     def applies(self, dispatcher):
    ...         return dispatcher.cursor.look_ahead() == "#"
    ...
    ...     def consume(self, dispatcher):
    ...         cursor = dispatcher.cursor
    ...         position, lineno = cursor.mark
    ...         text = cursor.consume_while(lambda c: c.look_ahead() not in "\\n\\0")
    ...         return Token(self.token_type, text, position, lineno)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from chainlex.dispatcher import Dispatcher
    from chainlex.tokens import Token, TokenType


@runtime_checkable
class Recognizer(Protocol):
    """Protocol for recognizer implementations.

    Attributes:
        token_type: Type of the tokens this recognizer produces.

    """

    token_type: ClassVar[TokenType]

    def applies(self, dispatcher: Dispatcher) -> bool:
        """Test whether the next character starts a token of this kind.

        Must not move the cursor.
        """
        ...

    def consume(self, dispatcher: Dispatcher) -> Token | None:
        """Consume input and build a token.

        Called only right after applies() returned True. Returns None for
        a soft failure; raises a TokenizeError for a hard one.
        """
        ...
