"""Tests for error types and codes."""

import pytest

from tsdecl.core.errors import (
    ConfigError,
    ErrorCode,
    SourceError,
    TsdeclError,
)


class TestErrorCode:
    """Error code value tests."""

    @pytest.mark.parametrize(
        ("code", "expected_range"),
        [
            (ErrorCode.CONFIG_PARSE_ERROR, 2000),
            (ErrorCode.CONFIG_INVALID_VALUE, 2000),
            (ErrorCode.SOURCE_NOT_FOUND, 3000),
            (ErrorCode.KIND_TABLE_INVALID, 3000),
        ],
    )
    def test_given_error_code_when_checked_then_in_correct_range(
        self, code: ErrorCode, expected_range: int
    ) -> None:
        """Error codes fall within their designated numeric range."""
        assert expected_range <= code.value < expected_range + 1000


class TestTsdeclError:
    """Base error behavior tests."""

    def test_given_error_when_to_dict_then_serializes_all_fields(self) -> None:
        """Error serializes to dict with all required fields."""
        # Given
        error = TsdeclError(
            code=ErrorCode.SOURCE_PARSE_ERROR,
            message="Test message",
            details={"key": "value"},
        )

        # When
        result = error.to_dict()

        # Then
        assert result == {
            "code": 3003,
            "error": "SOURCE_PARSE_ERROR",
            "message": "Test message",
            "details": {"key": "value"},
        }

    def test_given_error_when_str_then_human_readable(self) -> None:
        """Error string representation is human readable."""
        error = TsdeclError(code=ErrorCode.SOURCE_NOT_FOUND, message="gone")

        assert str(error) == "[3001] SOURCE_NOT_FOUND: gone"

    def test_error_is_raisable(self) -> None:
        with pytest.raises(TsdeclError):
            raise SourceError.not_found("/missing.ts")


class TestConfigError:
    """ConfigError factory method tests."""

    @pytest.mark.parametrize(
        ("factory", "kwargs", "expected_code"),
        [
            ("parse_error", {"path": "/foo", "reason": "bad yaml"}, ErrorCode.CONFIG_PARSE_ERROR),
            (
                "invalid_value",
                {"field": "walk.max_depth", "value": -1, "reason": "negative"},
                ErrorCode.CONFIG_INVALID_VALUE,
            ),
            ("file_not_found", {"path": "/missing"}, ErrorCode.CONFIG_FILE_NOT_FOUND),
        ],
    )
    def test_given_factory_when_called_then_correct_code(
        self, factory: str, kwargs: dict[str, object], expected_code: ErrorCode
    ) -> None:
        """Factory methods produce errors with correct error codes."""
        error = getattr(ConfigError, factory)(**kwargs)

        assert error.code == expected_code

    def test_invalid_value_stringifies_value(self) -> None:
        error = ConfigError.invalid_value("walk.max_depth", -1, "must be positive")

        assert error.details == {
            "field": "walk.max_depth",
            "value": "-1",
            "reason": "must be positive",
        }


class TestSourceError:
    """SourceError factory method tests."""

    def test_unsupported_includes_suffix(self) -> None:
        error = SourceError.unsupported("/a/b.py", ".py")

        assert error.code == ErrorCode.SOURCE_UNSUPPORTED
        assert error.details["suffix"] == ".py"
        assert ".py" in error.message

    def test_grammar_missing(self) -> None:
        error = SourceError.grammar_missing("tree_sitter_typescript.language_typescript")

        assert error.code == ErrorCode.SOURCE_GRAMMAR_MISSING

    def test_invalid_kind_table(self) -> None:
        error = SourceError.invalid_kind_table("/kinds.json", "expected a mapping")

        assert error.code == ErrorCode.KIND_TABLE_INVALID
        assert error.details == {"path": "/kinds.json", "reason": "expected a mapping"}
