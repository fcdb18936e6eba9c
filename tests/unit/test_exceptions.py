"""Unit tests for the exception hierarchy and recovery hints."""

from __future__ import annotations

import pytest

from wikiviews.core.exceptions import (
    CodecError,
    ConfigurationError,
    IdentifierResolutionError,
    InvalidSecurityIdentifierError,
    MalformedLineError,
    NumericParseError,
    ParseError,
    StorageAccessError,
    StorageError,
    StorageNotFoundError,
    WikiviewsError,
)


@pytest.mark.core
class TestHierarchy:
    """Every library error can be caught as WikiviewsError."""

    @pytest.mark.parametrize(
        "error",
        [
            MalformedLineError("a,b", field_count=2),
            NumericParseError("a,b,x,1,2", field="page_views", position=3, token="x"),
            IdentifierResolutionError("T,A,1,2,3", token="T"),
            InvalidSecurityIdentifierError("bad", "reason"),
            StorageNotFoundError("missing", source="/x"),
            StorageAccessError("denied", source="s3://b/k"),
            CodecError("broken", codec="json"),
            ConfigurationError("bad config"),
        ],
    )
    def test_is_wikiviews_error(self, error: WikiviewsError) -> None:
        assert isinstance(error, WikiviewsError)

    @pytest.mark.parametrize(
        "error_type", [MalformedLineError, NumericParseError, IdentifierResolutionError]
    )
    def test_decode_errors_are_parse_errors(self, error_type: type) -> None:
        assert issubclass(error_type, ParseError)

    def test_storage_errors_share_base(self) -> None:
        assert issubclass(StorageNotFoundError, StorageError)
        assert issubclass(StorageAccessError, StorageError)


@pytest.mark.core
class TestParseErrors:
    """Decode errors carry the offending line and stage."""

    def test_malformed_line(self) -> None:
        error = MalformedLineError("a,b,c", field_count=3)

        assert error.line == "a,b,c"
        assert error.field_count == 3
        assert error.stage == "split"
        assert "Expected 5 fields, found 3" in str(error)
        assert "'a,b,c'" in str(error)

    def test_numeric_error_names_field(self) -> None:
        cause = ValueError("nope")
        error = NumericParseError(
            "T,A,x,1,2", field="page_views", position=3, token="x", cause=cause
        )

        assert error.stage == "numeric"
        assert error.field == "page_views"
        assert error.position == 3
        assert error.token == "x"
        assert error.cause is cause
        assert "page_views" in error.recovery_hint
        assert "3" in error.recovery_hint

    def test_identifier_error(self) -> None:
        error = IdentifierResolutionError("?,A,1,2,3", token="?")

        assert error.stage == "identifier"
        assert error.token == "?"
        assert error.recovery_hint is not None

    def test_base_recovery_hint(self) -> None:
        error = ParseError("Broken", "line")

        assert error.recovery_hint == "Skip the offending line or fix the upstream file"


@pytest.mark.core
class TestRecoveryHints:
    """Tests for recovery_hint on non-parse errors."""

    def test_base_has_no_hint(self) -> None:
        assert WikiviewsError("x").recovery_hint is None
        assert ConfigurationError("x").recovery_hint is None

    def test_configuration_hint_is_passed_through(self) -> None:
        error = ConfigurationError("bad scheme", hint="Use s3://bucket/prefix")

        assert str(error) == "bad scheme"
        assert error.recovery_hint == "Use s3://bucket/prefix"

    def test_not_found_hint_includes_source(self) -> None:
        error = StorageNotFoundError("missing", source="/data/20200315.csv")

        assert "/data/20200315.csv" in error.recovery_hint

    def test_access_hint_mentions_credentials(self) -> None:
        error = StorageAccessError("denied", source="s3://b/k")

        assert "credentials" in error.recovery_hint.lower()

    def test_codec_hint_names_codec(self) -> None:
        error = CodecError("broken", codec="arrow")

        assert error.codec == "arrow"
        assert "arrow" in error.recovery_hint

    def test_storage_error_keeps_cause(self) -> None:
        cause = OSError("disk")
        error = StorageError("failed", source="/x", cause=cause)

        assert error.source == "/x"
        assert error.cause is cause
        assert str(error) == "failed"
