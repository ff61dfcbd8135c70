"""
chainlex: recursive tokenizer built from a chain of recognizers.

Splits a text buffer into typed tokens. Arrays and objects come back as
composite tokens whose children were tokenized by the same chain, so
nested input yields a token tree. Numbers and strings stay raw text.

Quick Start:
    >>> from chainlex import tokenize
    >>> tokenize('[1, "a", null]')
    [Token(ARRAY, 3 children, line 1, offset 0)]

    >>> # Step through tokens yourself
    >>> from chainlex import Dispatcher
    >>> dispatcher = Dispatcher("true false")
    >>> dispatcher.next()
    Token(BOOLEAN, 'true', line 1, offset 0)

Custom Recognizers:
    >>> from chainlex import Dispatcher, create_chain_with_defaults
    >>>
    >>> builder = create_chain_with_defaults(keywords=("if", "else"))
    >>> builder.register(MyRecognizer(), before=IdentifierRecognizer)
    >>> dispatcher = Dispatcher(source, builder.build())

Installation:
    pip install chainlex             # Core (zero deps)
    pip install chainlex[test]       # + pytest, hypothesis
"""

from collections.abc import Iterable, Iterator

from chainlex.config import (
    TokenizerConfig,
    get_tokenizer_config,
    reset_tokenizer_config,
    set_tokenizer_config,
    tokenizer_config_context,
)
from chainlex.cursor import NUL, Cursor
from chainlex.diagnostics import Diagnostic
from chainlex.dispatcher import Dispatcher
from chainlex.errors import (
    ChainlexError,
    CursorError,
    InvalidArrayElement,
    InvalidStep,
    InvalidValue,
    MalformedArray,
    MalformedObject,
    MissingColon,
    MissingKey,
    NestingTooDeep,
    OutOfBounds,
    RegistryError,
    TokenizeError,
    TrailingComma,
    UnterminatedArray,
    UnterminatedObject,
)
from chainlex.recognizers import (
    ArrayRecognizer,
    BooleanRecognizer,
    IdentifierRecognizer,
    NullRecognizer,
    NumberRecognizer,
    ObjectRecognizer,
    Recognizer,
    RecognizerChain,
    RecognizerChainBuilder,
    StringRecognizer,
    WhitespaceRecognizer,
    create_chain_with_defaults,
    create_default_chain,
)
from chainlex.tokens import Token, TokenType

__version__ = "0.1.0"


def iter_tokens(
    source: str,
    recognizers: RecognizerChain | Iterable[Recognizer] | None = None,
    *,
    config: TokenizerConfig | None = None,
) -> Iterator[Token]:
    """Yield top-level tokens until end of stream.

    Args:
        source: Text to tokenize
        recognizers: Ordered recognizers (default chain if None)
        config: Tokenizer configuration (active context config if None)

    Yields:
        Token objects one at a time

    Raises:
        TokenizeError: On malformed arrays or objects
    """
    yield from Dispatcher(source, recognizers, config=config)


def tokenize(
    source: str,
    recognizers: RecognizerChain | Iterable[Recognizer] | None = None,
    *,
    config: TokenizerConfig | None = None,
) -> list[Token]:
    """Tokenize source into a list of top-level tokens.

    Stops at the first character no recognizer accepts (or at an
    unterminated string); anything after it is left untokenized. Use a
    Dispatcher directly to inspect where it stopped and why.

    Example:
        >>> [t.type.value for t in tokenize("x = 1")]
        ['identifier', 'whitespace']
    """
    return Dispatcher(source, recognizers, config=config).tokenize_all()


__all__ = [
    # Entry points
    "tokenize",
    "iter_tokens",
    "Dispatcher",
    # Core types
    "Cursor",
    "NUL",
    "Token",
    "TokenType",
    "Diagnostic",
    # Recognizers
    "Recognizer",
    "RecognizerChain",
    "RecognizerChainBuilder",
    "create_chain_with_defaults",
    "create_default_chain",
    "WhitespaceRecognizer",
    "IdentifierRecognizer",
    "NumberRecognizer",
    "StringRecognizer",
    "BooleanRecognizer",
    "NullRecognizer",
    "ArrayRecognizer",
    "ObjectRecognizer",
    # Configuration
    "TokenizerConfig",
    "get_tokenizer_config",
    "set_tokenizer_config",
    "reset_tokenizer_config",
    "tokenizer_config_context",
    # Errors
    "ChainlexError",
    "TokenizeError",
    "CursorError",
    "InvalidStep",
    "OutOfBounds",
    "MalformedArray",
    "TrailingComma",
    "InvalidArrayElement",
    "UnterminatedArray",
    "MalformedObject",
    "MissingKey",
    "MissingColon",
    "InvalidValue",
    "UnterminatedObject",
    "NestingTooDeep",
    "RegistryError",
    # Version
    "__version__",
]
