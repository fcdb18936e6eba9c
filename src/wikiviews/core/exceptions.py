"""Domain exceptions for wikiviews.

All library errors inherit from WikiviewsError, allowing users to catch
any library exception with a single except clause. Each exception provides
a recovery_hint property with guidance on resolving the error.
"""

from __future__ import annotations


class WikiviewsError(Exception):
    """Base class for all wikiviews exceptions.

    Catch this to handle any error from the library.
    """

    @property
    def recovery_hint(self) -> str | None:
        """Optional guidance on how to resolve this error."""
        return None


class ParseError(WikiviewsError):
    """Base class for failures decoding a single universe line.

    Attributes:
        line: The raw line that could not be decoded.
        stage: Which decoding stage failed ("split", "numeric", "identifier").
        cause: The underlying exception, if any.
    """

    stage = "parse"

    def __init__(
        self,
        message: str,
        line: str,
        cause: Exception | None = None,
    ) -> None:
        self.line = line
        self.cause = cause
        super().__init__(f"{message}: {line!r}")

    @property
    def recovery_hint(self) -> str:
        """Suggest skipping the line."""
        return "Skip the offending line or fix the upstream file"


class MalformedLineError(ParseError):
    """Raised when a line does not split into the five expected fields.

    Attributes:
        field_count: Number of comma-separated tokens actually found.
    """

    stage = "split"

    def __init__(self, line: str, field_count: int) -> None:
        self.field_count = field_count
        super().__init__(f"Expected 5 fields, found {field_count}", line)

    @property
    def recovery_hint(self) -> str:
        """Describe the expected layout."""
        return "Lines must be: sid,ticker,page_views,pct_change_week,pct_change_month"


class NumericParseError(ParseError):
    """Raised when a numeric field is not a valid decimal.

    Attributes:
        field: Name of the offending field (e.g. "page_views").
        position: 1-based position of the field in the line.
        token: The raw token that failed to parse.
    """

    stage = "numeric"

    def __init__(
        self,
        line: str,
        field: str,
        position: int,
        token: str,
        cause: Exception | None = None,
    ) -> None:
        self.field = field
        self.position = position
        self.token = token
        super().__init__(
            f"Invalid decimal {token!r} for field '{field}' (position {position})",
            line,
            cause=cause,
        )

    @property
    def recovery_hint(self) -> str:
        """Point at the bad field."""
        return f"Check field {self.position} ({self.field}) of the line"


class IdentifierResolutionError(ParseError):
    """Raised when the security identifier token cannot be resolved.

    Attributes:
        token: The identifier token that failed to resolve.
    """

    stage = "identifier"

    def __init__(
        self, line: str, token: str, cause: Exception | None = None
    ) -> None:
        self.token = token
        super().__init__(
            f"Cannot resolve security identifier {token!r}", line, cause=cause
        )

    @property
    def recovery_hint(self) -> str:
        """Suggest checking the identifier encoding."""
        return "Identifiers look like 'AAPL R735QTJ8XC9X' (symbol, base36 properties)"


class InvalidSecurityIdentifierError(WikiviewsError):
    """Raised when an identifier token is not a valid encoded identifier.

    Attributes:
        token: The rejected token.
    """

    def __init__(self, token: str, reason: str) -> None:
        self.token = token
        self.reason = reason
        super().__init__(f"Invalid security identifier {token!r}: {reason}")


class StorageError(WikiviewsError):
    """Base class for storage-related errors.

    Raised when reading from storage (S3, filesystem) fails.

    Attributes:
        source: The storage path/URI that caused the error.
        cause: The underlying exception, if any.
    """

    def __init__(
        self,
        message: str,
        source: str,
        cause: Exception | None = None,
    ) -> None:
        self.source = source
        self.cause = cause
        super().__init__(message)


class StorageNotFoundError(StorageError):
    """Raised when the requested file/object doesn't exist in storage."""

    @property
    def recovery_hint(self) -> str:
        """Suggest verifying the path."""
        return f"Verify the source path exists: {self.source}"


class StorageAccessError(StorageError):
    """Raised when access is denied to storage (permissions, credentials)."""

    @property
    def recovery_hint(self) -> str:
        """Suggest checking permissions."""
        return "Check credentials and bucket/path permissions"


class CodecError(WikiviewsError):
    """Raised when an encoded payload cannot be decoded.

    Attributes:
        codec: Name of the codec that failed ("json" or "arrow").
        cause: The underlying exception, if any.
    """

    def __init__(
        self, message: str, codec: str, cause: Exception | None = None
    ) -> None:
        self.codec = codec
        self.cause = cause
        super().__init__(message)

    @property
    def recovery_hint(self) -> str:
        """Suggest re-exporting the payload."""
        return f"Re-export the records with the {self.codec} codec"


class ConfigurationError(WikiviewsError):
    """Raised for configuration problems (missing or invalid settings).

    Attributes:
        hint: Optional guidance returned as the recovery hint.
    """

    def __init__(self, message: str, hint: str | None = None) -> None:
        self.hint = hint
        super().__init__(message)

    @property
    def recovery_hint(self) -> str | None:
        """Return the hint given at construction, if any."""
        return self.hint
