"""String recognizer.

A string runs from an opening double quote to the next unescaped double
quote. The token value is the raw source text including both quotes;
escapes are not decoded, a backslash only stops the character after it
from closing the string.

Reaching the end of input first is a soft failure: consume() returns
None and the partial text is recorded as a Diagnostic on the dispatcher.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from chainlex.diagnostics import UNTERMINATED_STRING, Diagnostic
from chainlex.tokens import Token, TokenType
from chainlex.utils.logger import get_logger

if TYPE_CHECKING:
    from chainlex.dispatcher import Dispatcher

logger = get_logger(__name__)

QUOTE = '"'
ESCAPE = "\\"


class StringRecognizer:
    """Consumes a double-quoted string."""

    token_type: ClassVar[TokenType] = TokenType.STRING

    def applies(self, dispatcher: Dispatcher) -> bool:
        return dispatcher.cursor.look_ahead() == QUOTE

    def consume(self, dispatcher: Dispatcher) -> Token | None:
        cursor = dispatcher.cursor
        position, lineno = cursor.mark
        chunks = [cursor.advance().current]

        while cursor.has_forward():
            char = cursor.advance().current
            chunks.append(char)
            if char == ESCAPE:
                if cursor.has_forward():
                    chunks.append(cursor.advance().current)
            elif char == QUOTE:
                return Token(self.token_type, "".join(chunks), position, lineno)

        partial = "".join(chunks)
        logger.debug("Unterminated string at line %d, offset %d: %r", lineno, position, partial)
        dispatcher.report(
            Diagnostic(
                code=UNTERMINATED_STRING,
                message="input ended before the closing quote",
                position=position,
                lineno=lineno,
                text=partial,
            )
        )
        return None
