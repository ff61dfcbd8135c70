"""Recognizers for the chainlex dispatcher.

Each recognizer implements the Recognizer protocol: applies() tests the
next character, consume() builds a token. Leaf recognizers produce
scalars; ArrayRecognizer and ObjectRecognizer recurse through the
dispatcher to produce composites.

Layout:
recognizers/
├── protocol.py     # Recognizer protocol
├── registry.py     # RecognizerChain, builder, default chain
├── whitespace.py   # Whitespace runs
├── identifier.py   # Identifiers and keywords
├── number.py       # Numeric runs (superset, unvalidated)
├── string.py       # Double-quoted strings
├── literal.py      # true / false / null
├── array.py        # [ ... ]
└── object.py       # { "key": value, ... }
"""

from chainlex.recognizers.array import ArrayRecognizer
from chainlex.recognizers.identifier import IdentifierRecognizer
from chainlex.recognizers.literal import BooleanRecognizer, NullRecognizer
from chainlex.recognizers.number import NumberRecognizer
from chainlex.recognizers.object import ObjectRecognizer
from chainlex.recognizers.protocol import Recognizer
from chainlex.recognizers.registry import (
    RecognizerChain,
    RecognizerChainBuilder,
    create_chain_with_defaults,
    create_default_chain,
)
from chainlex.recognizers.string import StringRecognizer
from chainlex.recognizers.whitespace import WhitespaceRecognizer

__all__ = [
    "ArrayRecognizer",
    "BooleanRecognizer",
    "IdentifierRecognizer",
    "NullRecognizer",
    "NumberRecognizer",
    "ObjectRecognizer",
    "Recognizer",
    "RecognizerChain",
    "RecognizerChainBuilder",
    "StringRecognizer",
    "WhitespaceRecognizer",
    "create_chain_with_defaults",
    "create_default_chain",
]
