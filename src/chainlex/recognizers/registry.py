"""Recognizer chain construction.

The chain is the ordered recognizer list a Dispatcher scans. Order is a
priority, first match wins: whitespace is claimed before values, and the
composites sit ahead of the scalars.

Thread Safety:
RecognizerChain is immutable after creation. Safe to share.
Use RecognizerChainBuilder for mutable construction.

Example:
    >>> builder = create_chain_with_defaults(keywords=("if", "else"))
    >>> builder.register(HashCommentRecognizer(), before=WhitespaceRecognizer)
    >>> chain = builder.build()
    >>> Dispatcher(source, chain)
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from chainlex.errors import RegistryError

if TYPE_CHECKING:
    from chainlex.recognizers.protocol import Recognizer
    from chainlex.tokens import TokenType


class RecognizerChain:
    """Immutable, ordered sequence of recognizers.

    Thread Safety:
        Immutable after creation. Safe to share across threads.
    """

    __slots__ = ("_recognizers",)

    def __init__(self, recognizers: tuple[Recognizer, ...]) -> None:
        """Initialize chain with an ordered tuple.

        Use RecognizerChainBuilder to create instances.
        """
        self._recognizers = recognizers

    @property
    def recognizers(self) -> tuple[Recognizer, ...]:
        return self._recognizers

    @property
    def token_types(self) -> frozenset[TokenType]:
        """Token types produced by the registered recognizers."""
        return frozenset(r.token_type for r in self._recognizers)

    def get(self, recognizer_type: type) -> Recognizer | None:
        """Get the first registered recognizer of the given class."""
        for recognizer in self._recognizers:
            if isinstance(recognizer, recognizer_type):
                return recognizer
        return None

    def __iter__(self) -> Iterator[Recognizer]:
        return iter(self._recognizers)

    def __len__(self) -> int:
        return len(self._recognizers)

    def __contains__(self, recognizer_type: object) -> bool:
        """Support 'RecognizerClass in chain' syntax."""
        return isinstance(recognizer_type, type) and self.get(recognizer_type) is not None


class RecognizerChainBuilder:
    """Mutable builder for RecognizerChain.

    Example:
        >>> builder = RecognizerChainBuilder()
        >>> builder.register(WhitespaceRecognizer()).register(NumberRecognizer())
        >>> chain = builder.build()
    """

    __slots__ = ("_recognizers",)

    def __init__(self) -> None:
        self._recognizers: list[Recognizer] = []

    def register(
        self, recognizer: Recognizer, *, before: type | None = None
    ) -> RecognizerChainBuilder:
        """Register a recognizer.

        Args:
            recognizer: Object implementing the Recognizer protocol
            before: Insert ahead of the first registered recognizer of this
                class instead of appending (lowest priority)

        Returns:
            Self for chaining

        Raises:
            RegistryError: If the recognizer is incomplete, its class is
                already registered, or `before` names an unregistered class
        """
        name = type(recognizer).__name__

        for attr in ("token_type", "applies", "consume"):
            if not hasattr(recognizer, attr):
                raise RegistryError(name, f"missing '{attr}' attribute")

        for existing in self._recognizers:
            if type(existing) is type(recognizer):
                raise RegistryError(name, "already registered")

        if before is None:
            self._recognizers.append(recognizer)
            return self

        for index, existing in enumerate(self._recognizers):
            if isinstance(existing, before):
                self._recognizers.insert(index, recognizer)
                return self
        raise RegistryError(name, f"cannot insert before unregistered {before.__name__}")

    def register_all(self, recognizers: Iterable[Recognizer]) -> RecognizerChainBuilder:
        """Register multiple recognizers, in order."""
        for recognizer in recognizers:
            self.register(recognizer)
        return self

    def build(self) -> RecognizerChain:
        """Build immutable chain from registered recognizers."""
        return RecognizerChain(tuple(self._recognizers))

    def __len__(self) -> int:
        return len(self._recognizers)


def create_chain_with_defaults(keywords: Iterable[str] = ()) -> RecognizerChainBuilder:
    """Create a builder pre-populated with the built-in recognizers.

    Default priority order:
        whitespace, array, object, string, boolean, null, number, identifier

    Boolean and null precede identifier so the literals are not read as
    identifiers.

    Args:
        keywords: Words the identifier recognizer should type as KEYWORD

    Returns:
        RecognizerChainBuilder with defaults already registered
    """
    from chainlex.recognizers.array import ArrayRecognizer
    from chainlex.recognizers.identifier import IdentifierRecognizer
    from chainlex.recognizers.literal import BooleanRecognizer, NullRecognizer
    from chainlex.recognizers.number import NumberRecognizer
    from chainlex.recognizers.object import ObjectRecognizer
    from chainlex.recognizers.string import StringRecognizer
    from chainlex.recognizers.whitespace import WhitespaceRecognizer

    return RecognizerChainBuilder().register_all(
        [
            WhitespaceRecognizer(),
            ArrayRecognizer(),
            ObjectRecognizer(),
            StringRecognizer(),
            BooleanRecognizer(),
            NullRecognizer(),
            NumberRecognizer(),
            IdentifierRecognizer(keywords),
        ]
    )


# Cached singleton; RecognizerChain is immutable
_DEFAULT_CHAIN: RecognizerChain | None = None


def create_default_chain() -> RecognizerChain:
    """Get the default recognizer chain (cached singleton)."""
    global _DEFAULT_CHAIN
    if _DEFAULT_CHAIN is None:
        _DEFAULT_CHAIN = create_chain_with_defaults().build()
    return _DEFAULT_CHAIN
