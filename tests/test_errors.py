"""Error hierarchy and formatting tests.

Complements the per-recognizer error tests with checks on message
formatting and on the two failure tiers.
"""

import pytest

from chainlex import (
    ChainlexError,
    CursorError,
    Dispatcher,
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
    tokenize,
)

# =========================================================================
# TokenizeError construction and formatting
# =========================================================================


class TestTokenizeErrorFormatting:
    """Verify TokenizeError produces well-formatted messages."""

    def test_message_only(self) -> None:
        err = TokenizeError("unexpected character")
        assert str(err) == "unexpected character"
        assert err.lineno is None
        assert err.col_offset is None
        assert err.offset is None

    def test_with_line_number(self) -> None:
        err = TokenizeError("bad", lineno=42)
        assert str(err) == "42 bad"

    def test_with_line_and_column(self) -> None:
        err = TokenizeError("missing bracket", lineno=10, col_offset=5, offset=99)
        assert str(err) == "10:5 missing bracket"
        assert err.offset == 99

    def test_is_chainlex_error(self) -> None:
        assert isinstance(TokenizeError("x"), ChainlexError)


class TestHierarchy:
    """Every hard failure is a distinct TokenizeError subclass."""

    @pytest.mark.parametrize(
        "error_type",
        [
            InvalidStep,
            OutOfBounds,
            MalformedArray,
            TrailingComma,
            InvalidArrayElement,
            UnterminatedArray,
            MissingKey,
            MissingColon,
            InvalidValue,
            UnterminatedObject,
            NestingTooDeep,
        ],
    )
    def test_is_tokenize_error(self, error_type: type) -> None:
        assert issubclass(error_type, TokenizeError)

    def test_families_are_disjoint(self) -> None:
        assert not issubclass(MalformedArray, MalformedObject)
        assert not issubclass(MalformedObject, MalformedArray)
        assert not issubclass(CursorError, MalformedArray)

    def test_registry_error_is_not_tokenize_error(self) -> None:
        err = RegistryError("Foo", "missing 'applies' attribute")
        assert str(err) == "Recognizer 'Foo': missing 'applies' attribute"
        assert err.recognizer_name == "Foo"
        assert not isinstance(err, TokenizeError)

    def test_nesting_too_deep_message(self) -> None:
        err = NestingTooDeep(4, lineno=1, col_offset=5, offset=4)
        assert err.max_depth == 4
        assert str(err) == "1:5 nesting exceeds max_depth=4"


class TestFailureTiers:
    """Soft failures return None; hard failures raise."""

    @pytest.mark.parametrize("source", ['"unterminated', "@", "", "}"])
    def test_soft(self, source: str) -> None:
        assert Dispatcher(source).next() is None

    @pytest.mark.parametrize(
        "source,error_type",
        [
            ("[1,]", TrailingComma),
            ("[1", UnterminatedArray),
            ("{1:1}", MissingKey),
            ('{"a"}', MissingColon),
            ('{"a":@}', InvalidValue),
            ("{", UnterminatedObject),
        ],
    )
    def test_hard(self, source: str, error_type: type[TokenizeError]) -> None:
        with pytest.raises(error_type):
            tokenize(source)

    def test_hard_failure_reports_line(self) -> None:
        with pytest.raises(MissingColon) as exc_info:
            tokenize('{\n  "a"\n  1\n}')
        assert exc_info.value.lineno == 3
        assert exc_info.value.col_offset == 3
