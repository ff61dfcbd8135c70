"""Token and TokenType definitions for chainlex.

Recognizers produce Token objects; array and object recognizers produce
composite tokens whose children are tokens built by further dispatch.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, replace
from enum import Enum


class TokenType(Enum):
    """Token type tags.

    The enum value is the tag string. Composite tokens use it as their
    own value.

    """

    # Scalars
    WHITESPACE = "whitespace"
    IDENTIFIER = "identifier"
    KEYWORD = "keyword"  # identifier listed in IdentifierRecognizer.keywords
    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"
    NULL = "null"

    # Composites
    ARRAY = "array"
    OBJECT = "object"

    # Relabelled string inside an object
    KEY = "key"

    @property
    def is_composite(self) -> bool:
        return self is TokenType.ARRAY or self is TokenType.OBJECT


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by a recognizer.

    Attributes:
        type: The token type (from TokenType enum)
        value: Raw source text for scalars; the type tag for composites
        position: Index of the token's first character in the source
        lineno: Line of the token's first character (1-indexed)
        children: Child tokens, in source order. Empty for scalars. For
            objects the children alternate key, value.

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.

    """

    type: TokenType
    value: str
    position: int
    lineno: int
    children: tuple[Token, ...] = ()

    @classmethod
    def composite(
        cls,
        token_type: TokenType,
        position: int,
        lineno: int,
        children: tuple[Token, ...] | list[Token],
    ) -> Token:
        """Build an array or object token whose value is its own tag."""
        if not token_type.is_composite:
            msg = f"{token_type.name} is not a composite token type"
            raise ValueError(msg)
        return cls(token_type, token_type.value, position, lineno, tuple(children))

    @property
    def is_composite(self) -> bool:
        return self.type.is_composite

    def relabel(self, token_type: TokenType) -> Token:
        """Return a copy of this token with a different type."""
        return replace(self, type=token_type)

    def walk(self) -> Iterator[Token]:
        """Yield this token and all descendants, depth-first pre-order."""
        stack = [self]
        while stack:
            token = stack.pop()
            yield token
            stack.extend(reversed(token.children))

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        where = f"line {self.lineno}, offset {self.position}"
        if self.children:
            return f"Token({self.type.name}, {len(self.children)} children, {where})"
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {where})"
