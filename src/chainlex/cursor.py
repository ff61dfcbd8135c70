"""Character cursor over an immutable source buffer.

The cursor starts *before* the first character (position -1). Recognizers
inspect upcoming characters with look_ahead() and take them with advance()
or consume_while(), after which the last taken character is `current`.

One cursor serves a whole run. Composite recognizers hand the same
instance down through recursive dispatch, so position only ever moves
forward across a run (retreat() exists but no built-in recognizer uses it).

Thread Safety:
Cursor instances are single-use and mutable. Do not share one between
threads.

"""

from __future__ import annotations

from collections.abc import Callable
from typing import Final, TypeVar

from chainlex.errors import InvalidStep, OutOfBounds, TokenizeError

NUL: Final[str] = "\0"

_E = TypeVar("_E", bound=TokenizeError)


class Cursor:
    """Read position over a fixed source string.

    Usage:
            >>> cursor = Cursor("ab")
            >>> cursor.look_ahead()
            'a'
            >>> cursor.advance().current
            'a'
            >>> cursor.consume_while(lambda c: c.look_ahead() == "b")
            'b'
            >>> cursor.exhausted
            True

    """

    __slots__ = ("_source", "_length", "_position", "_lineno")

    def __init__(self, source: str) -> None:
        self._source = source
        self._length = len(source)
        self._position = -1
        self._lineno = 1

    @property
    def source(self) -> str:
        return self._source

    @property
    def length(self) -> int:
        return self._length

    @property
    def position(self) -> int:
        """Index of the last taken character, -1 before the first step."""
        return self._position

    @property
    def lineno(self) -> int:
        """Line of the next character (1-indexed)."""
        return self._lineno

    @property
    def col(self) -> int:
        """Column of the next character (1-indexed)."""
        next_index = self._position + 1
        return next_index - self._source.rfind("\n", 0, next_index)

    @property
    def mark(self) -> tuple[int, int]:
        """(offset, lineno) of the next character, for locating later errors."""
        return self._position + 1, self._lineno

    @property
    def current(self) -> str:
        """Character at the current position, or NUL before the first step."""
        if self._position > -1:
            return self._source[self._position]
        return NUL

    @property
    def exhausted(self) -> bool:
        return not self.has_forward()

    # =========================================================================
    # Bounds
    # =========================================================================

    def has_forward(self, n: int = 1) -> bool:
        """Whether n more characters can be taken.

        Raises:
            InvalidStep: If n <= 0
        """
        if n <= 0:
            raise self.error(InvalidStep, f"invalid step count {n}")
        return self._position + n < self._length

    def has_backward(self, n: int = 1) -> bool:
        """Whether the cursor can retreat n characters.

        Raises:
            InvalidStep: If n <= 0
        """
        if n <= 0:
            raise self.error(InvalidStep, f"invalid step count {n}")
        return self._position - n > -1

    # =========================================================================
    # Movement
    # =========================================================================

    def advance(self, n: int = 1) -> Cursor:
        """Move forward n characters.

        Returns:
            self, so calls can be chained with `.current`

        Raises:
            OutOfBounds: If fewer than n characters remain
        """
        if not self.has_forward(n):
            raise self.error(OutOfBounds, f"cannot advance {n} past end of input")
        start = self._position + 1
        self._position += n
        self._lineno += self._source.count("\n", start, self._position + 1)
        return self

    def retreat(self, n: int = 1) -> Cursor:
        """Move back n characters.

        Raises:
            OutOfBounds: If the cursor would move before the first character
        """
        if not self.has_backward(n):
            raise self.error(OutOfBounds, f"cannot retreat {n} before start of input")
        end = self._position + 1
        self._position -= n
        self._lineno -= self._source.count("\n", self._position + 1, end)
        return self

    def reset(self) -> Cursor:
        """Rewind to before the first character."""
        self._position = -1
        self._lineno = 1
        return self

    # =========================================================================
    # Inspection
    # =========================================================================

    def look_ahead(self, n: int = 1) -> str:
        """Character n positions ahead, or NUL past the end."""
        if self.has_forward(n):
            return self._source[self._position + n]
        return NUL

    def look_ahead_text(self, n: int) -> str:
        """Up to n upcoming characters, without moving."""
        start = self._position + 1
        return self._source[start : start + n]

    def look_behind(self, n: int = 1) -> str:
        """The current character if n positions back are in bounds, else NUL.

        Note this reports the *current* character, not the one n back. No
        built-in recognizer calls it; it is kept for custom recognizers that
        need to test the character just taken, such as a sign following an
        exponent marker.
        """
        if self.has_backward(n):
            return self._source[self._position]
        return NUL

    # =========================================================================
    # Consumption
    # =========================================================================

    def consume_while(self, predicate: Callable[[Cursor], bool]) -> str:
        """Advance one character at a time while predicate holds.

        The predicate sees the cursor before each step and normally tests
        look_ahead().

        Returns:
            The characters taken, or "" if none
        """
        taken: list[str] = []
        while self.has_forward() and predicate(self):
            taken.append(self.advance().current)
        return "".join(taken)

    # =========================================================================
    # Errors
    # =========================================================================

    def error(
        self,
        error_type: type[_E],
        message: str,
        *,
        offset: int | None = None,
        lineno: int | None = None,
    ) -> _E:
        """Build an error located at the next character.

        Pass offset and lineno to locate the error at an earlier point,
        such as the first character of the token that failed.
        """
        if offset is None or lineno is None:
            offset, lineno = self._position + 1, self._lineno
        return error_type(
            message,
            lineno=lineno,
            col_offset=offset - self._source.rfind("\n", 0, offset),
            offset=offset,
        )

    def __repr__(self) -> str:
        return f"Cursor(position={self._position}, length={self._length}, lineno={self._lineno})"
