"""Tokenizer settings scoped to the current context.

A Dispatcher built without an explicit config picks up whatever
TokenizerConfig is active when it is constructed, and keeps it for its
whole run. Changing the active config later does not affect it.

Usage:
    with tokenizer_config_context(TokenizerConfig(max_depth=32)):
        dispatcher = Dispatcher(source)
    tokens = dispatcher.tokenize_all()  # still uses max_depth=32

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class TokenizerConfig:
    """Immutable tokenizer configuration.

    Attributes:
        max_depth: Deepest array/object nesting accepted before
            NestingTooDeep is raised. Deep input that exhausts the
            interpreter recursion limit first raises NestingTooDeep too.
        record_history: Keep every top-level token returned by
            Dispatcher.next() in Dispatcher.history.

    """

    max_depth: int = 128
    record_history: bool = False

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            msg = f"max_depth must be >= 1, got {self.max_depth}"
            raise ValueError(msg)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "TokenizerConfig":
        """Build a config from loose settings, such as a parsed settings file.

        Keys that are not TokenizerConfig fields are dropped.

        Example:
            >>> config = TokenizerConfig.from_dict({"max_depth": 16, "colour": "red"})
            >>> config.max_depth
            16

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


_DEFAULT_CONFIG: TokenizerConfig = TokenizerConfig()

_tokenizer_config: ContextVar[TokenizerConfig] = ContextVar(
    "tokenizer_config",
    default=_DEFAULT_CONFIG,
)


def get_tokenizer_config() -> TokenizerConfig:
    """Config a new Dispatcher would use."""
    return _tokenizer_config.get()


def set_tokenizer_config(config: TokenizerConfig) -> None:
    """Make config active for the current context."""
    _tokenizer_config.set(config)


def reset_tokenizer_config() -> None:
    """Go back to the default TokenizerConfig()."""
    _tokenizer_config.set(_DEFAULT_CONFIG)


@contextmanager
def tokenizer_config_context(config: TokenizerConfig) -> Iterator[None]:
    """Activate config for the duration of a with block.

    Example:
        >>> with tokenizer_config_context(TokenizerConfig(max_depth=4)):
        ...     get_tokenizer_config().max_depth
        4

    """
    previous = _tokenizer_config.get()
    _tokenizer_config.set(config)
    try:
        yield
    finally:
        _tokenizer_config.set(previous)


__all__ = [
    "TokenizerConfig",
    "get_tokenizer_config",
    "set_tokenizer_config",
    "reset_tokenizer_config",
    "tokenizer_config_context",
]
