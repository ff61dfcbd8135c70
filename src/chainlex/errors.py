"""Exception classes for chainlex.

Tokenization has two failure tiers. Soft failures (an unterminated string,
or no recognizer claiming the next character) are not exceptions: the
dispatcher returns None. Everything here is a hard failure that aborts the
whole run.

Every TokenizeError subclass is a distinct kind so callers can tell causes
apart without inspecting messages.
"""

from __future__ import annotations


class ChainlexError(Exception):
    """Base exception for all chainlex errors.

    Subclass this for specific error categories.
    """

    pass


class TokenizeError(ChainlexError):
    """Error during tokenization.

    Raised when a recognizer meets input it cannot accept and the run
    cannot continue.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        offset: int | None = None,
    ) -> None:
        """Initialize tokenize error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            offset: Absolute index into the source buffer
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.offset = offset

        location = ""
        if lineno is not None:
            location = f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class CursorError(TokenizeError):
    """Cursor was asked to move in a way it cannot."""

    pass


class InvalidStep(CursorError):
    """Step count was zero or negative."""

    pass


class OutOfBounds(CursorError):
    """Step would move the cursor outside the source buffer."""

    pass


class MalformedArray(TokenizeError):
    """Array could not be tokenized.

    Raised directly when a nested array yields no token; also the base
    class for the more specific array errors.
    """

    pass


class TrailingComma(MalformedArray):
    """A separator comma is immediately followed by the closing bracket."""

    pass


class InvalidArrayElement(MalformedArray):
    """No recognizer produced a token for an array element."""

    pass


class UnterminatedArray(MalformedArray):
    """Input ended before the closing bracket."""

    pass


class MalformedObject(TokenizeError):
    """Object could not be tokenized.

    Base class for the specific object errors.
    """

    pass


class MissingKey(MalformedObject):
    """Object member does not start with a string key."""

    pass


class MissingColon(MalformedObject):
    """Object key is not followed by a colon."""

    pass


class InvalidValue(MalformedObject):
    """No recognizer produced a token for an object value."""

    pass


class UnterminatedObject(MalformedObject):
    """Input ended before the closing brace."""

    pass


class NestingTooDeep(TokenizeError):
    """Arrays and objects are nested deeper than the configured limit."""

    def __init__(
        self,
        max_depth: int,
        lineno: int | None = None,
        col_offset: int | None = None,
        offset: int | None = None,
        *,
        message: str | None = None,
    ) -> None:
        """Initialize nesting error.

        Args:
            max_depth: The limit that was exceeded
            lineno: Line number of the composite that crossed the limit
            col_offset: Column of the composite that crossed the limit
            offset: Absolute index of the composite that crossed the limit
            message: Replaces the default "nesting exceeds max_depth" text
        """
        self.max_depth = max_depth
        super().__init__(
            message or f"nesting exceeds max_depth={max_depth}",
            lineno=lineno,
            col_offset=col_offset,
            offset=offset,
        )


class RegistryError(ChainlexError):
    """Error in recognizer registration.

    Raised when a recognizer does not satisfy the Recognizer protocol
    or is registered twice.
    """

    def __init__(self, recognizer_name: str, message: str) -> None:
        """Initialize registry error.

        Args:
            recognizer_name: Class name of the offending recognizer
            message: Description of the error
        """
        self.recognizer_name = recognizer_name
        super().__init__(f"Recognizer '{recognizer_name}': {message}")
