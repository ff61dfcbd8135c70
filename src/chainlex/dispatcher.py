"""Recognizer dispatch over a shared cursor.

Each call to Dispatcher.next() scans the recognizer chain in order and
delegates to the first recognizer that applies. Composite recognizers
call next() again to build their children, so one dispatcher and one
cursor serve the whole recursive descent.

Thread Safety:
Dispatcher instances are single-use. Create one per source string.
Recognizers and RecognizerChain may be shared; the cursor may not.

"""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

from chainlex.config import TokenizerConfig, get_tokenizer_config
from chainlex.cursor import Cursor
from chainlex.errors import NestingTooDeep
from chainlex.recognizers.registry import RecognizerChain, create_default_chain
from chainlex.utils.logger import get_logger

if TYPE_CHECKING:
    from chainlex.diagnostics import Diagnostic
    from chainlex.recognizers.protocol import Recognizer
    from chainlex.tokens import Token

logger = get_logger(__name__)


def _is_whitespace(cursor: Cursor) -> bool:
    return cursor.look_ahead().isspace()


class Dispatcher:
    """First-match-wins dispatcher over an ordered recognizer chain.

    Usage:
            >>> dispatcher = Dispatcher("[1, true]")
            >>> token = dispatcher.next()
            >>> token
            Token(ARRAY, 2 children, line 1, offset 0)
            >>> dispatcher.next() is None
            True

    """

    __slots__ = (
        "_cursor",
        "_recognizers",
        "_config",
        "_depth",
        "_diagnostics",
        "_history",
    )

    def __init__(
        self,
        source: str | Cursor,
        recognizers: RecognizerChain | Iterable[Recognizer] | None = None,
        *,
        config: TokenizerConfig | None = None,
    ) -> None:
        """Initialize dispatcher.

        Args:
            source: Source text, or an existing cursor to continue from
            recognizers: Ordered recognizers; the default chain if None
            config: Configuration; the active context config if None
        """
        self._cursor = source if isinstance(source, Cursor) else Cursor(source)
        if recognizers is None:
            recognizers = create_default_chain()
        self._recognizers: tuple[Recognizer, ...] = tuple(recognizers)
        self._config = config if config is not None else get_tokenizer_config()
        self._depth = 0
        self._diagnostics: list[Diagnostic] = []
        self._history: list[Token] = []

    @property
    def cursor(self) -> Cursor:
        return self._cursor

    @property
    def recognizers(self) -> tuple[Recognizer, ...]:
        return self._recognizers

    @property
    def config(self) -> TokenizerConfig:
        return self._config

    @property
    def depth(self) -> int:
        """Current composite nesting depth (0 at top level)."""
        return self._depth

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """Soft failures recorded so far."""
        return self._diagnostics

    @property
    def history(self) -> list[Token]:
        """Top-level tokens returned so far, if config.record_history is set."""
        return self._history

    def next(self) -> Token | None:
        """Produce the next token, or None at end of stream.

        None means the cursor is exhausted, no recognizer applies to the
        next character, or the recognizer that applied failed softly.

        Raises:
            TokenizeError: On a hard failure inside a recognizer
            NestingTooDeep: Also raised when the interpreter's recursion
                limit is hit before config.max_depth
        """
        if self._depth:
            return self._dispatch()
        try:
            return self._dispatch()
        except RecursionError:
            # Stack is unwound here, so building the error is safe.
            self._depth = 0
            cursor = self._cursor
            limit = sys.getrecursionlimit()
            logger.debug("Recursion limit %d hit at offset %d", limit, cursor.position + 1)
            raise NestingTooDeep(
                self._config.max_depth,
                lineno=cursor.lineno,
                col_offset=cursor.col,
                offset=cursor.position + 1,
                message=(
                    f"nesting exceeds the interpreter recursion limit ({limit}) "
                    f"before max_depth={self._config.max_depth}"
                ),
            ) from None

    def _dispatch(self) -> Token | None:
        for recognizer in self._recognizers:
            if recognizer.applies(self):
                token = recognizer.consume(self)
                if token is not None and self._depth == 0 and self._config.record_history:
                    self._history.append(token)
                return token

        cursor = self._cursor
        if cursor.exhausted:
            logger.debug("End of input at offset %d", cursor.position + 1)
        else:
            logger.debug(
                "No recognizer for %r at %d:%d",
                cursor.look_ahead(),
                cursor.lineno,
                cursor.col,
            )
        return None

    def tokenize_all(self) -> list[Token]:
        """Collect tokens until end of stream."""
        return list(self)

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next()
            if token is None:
                return
            yield token

    # =========================================================================
    # Services for recognizers
    # =========================================================================

    def report(self, diagnostic: Diagnostic) -> None:
        """Record a soft failure."""
        self._diagnostics.append(diagnostic)

    def skip_whitespace(self) -> str:
        """Consume whitespace between composite members.

        Returns:
            The skipped text
        """
        return self._cursor.consume_while(_is_whitespace)

    @contextmanager
    def descend(self) -> Iterator[None]:
        """Enter one level of composite nesting.

        Raises:
            NestingTooDeep: If the new depth would exceed config.max_depth
        """
        if self._depth >= self._config.max_depth:
            cursor = self._cursor
            raise NestingTooDeep(
                self._config.max_depth,
                lineno=cursor.lineno,
                col_offset=cursor.col,
                offset=cursor.position + 1,
            )
        self._depth += 1
        try:
            yield
        finally:
            self._depth -= 1
