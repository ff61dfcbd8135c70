"""Diagnostics for soft tokenization failures.

A soft failure ends the current token without raising. The dispatcher
keeps a Diagnostic for each one so callers can report what was dropped.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

UNTERMINATED_STRING: Final[str] = "unterminated-string"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Record of a soft failure.

    Attributes:
        code: Stable identifier for the failure kind
        message: Human-readable description
        position: Index of the first character of the failed token
        lineno: Line of the first character of the failed token
        text: Raw partial content consumed before the failure
    """

    code: str
    message: str
    position: int
    lineno: int
    text: str = ""

    def __str__(self) -> str:
        return f"{self.code} at line {self.lineno}, offset {self.position}: {self.message}"
