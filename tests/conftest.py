"""Pytest configuration and shared fixtures.

This module registers custom markers for CI job separation and provides
shared fixtures for the test suite.
"""

from __future__ import annotations

import builtins
import fnmatch
from datetime import date
from typing import TYPE_CHECKING

import pytest
from loguru import logger

from wikiviews.core.exceptions import StorageNotFoundError
from wikiviews.core.identifiers import SecurityIdentifier, SecurityType


if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from pathlib import Path


UNIVERSE_PARTS = ("alternative", "quiver", "wikipedia", "universe")


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "core: Core models, decoder, and services")
    config.addinivalue_line("markers", "storage: Storage adapters (s3, filesystem)")
    config.addinivalue_line("markers", "codec: JSON and Arrow record codecs")
    config.addinivalue_line("markers", "readers: DataFrame reader adapters")
    config.addinivalue_line("markers", "cli: CLI tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests")
    config.addinivalue_line("markers", "property: Property-based tests (hypothesis)")
    config.addinivalue_line(
        "markers", "tra: Test Responsibility Anchor (TRA) - namespace.Anchor format"
    )
    config.addinivalue_line(
        "markers",
        "tier: Test tier for CI job separation (0=instant, 1=fast, 2=standard, 3=slow, 4=manual)",
    )


@pytest.fixture(autouse=True)
def _reset_loguru() -> Iterator[None]:
    """Drop handlers added by configure_logging() so tests don't leak sinks."""
    yield
    logger.remove()
    logger.disable("wikiviews")


@pytest.fixture
def fake_resolver() -> Callable[[str], SecurityIdentifier]:
    """Resolver that accepts any bare token as a US equity symbol."""

    def resolve(token: str) -> SecurityIdentifier:
        if not token or " " in token:
            raise ValueError(f"unresolvable token {token!r}")
        return SecurityIdentifier.generate(
            token, SecurityType.EQUITY, "usa", date(1998, 1, 2)
        )

    return resolve


class FakeStorage:
    """In-memory StoragePort keyed by source path."""

    def __init__(self, files: dict[str, builtins.list[str]] | None = None) -> None:
        self.files = dict(files or {})
        self.reads: builtins.list[str] = []
        self.checks: builtins.list[str] = []

    def exists(self, source: str) -> bool:
        self.checks.append(source)
        return source in self.files

    def read_lines(self, source: str) -> builtins.list[str]:
        self.reads.append(source)
        if source not in self.files:
            raise StorageNotFoundError(f"File not found: {source}", source=source)
        return builtins.list(self.files[source])

    def list(self, prefix: str, pattern: str | None = None) -> builtins.list[str]:
        base = prefix.rstrip("/") + "/"
        matches = [
            path
            for path in self.files
            if path.startswith(base)
            and (pattern is None or fnmatch.fnmatch(path[len(base) :], pattern))
        ]
        if not matches:
            raise StorageNotFoundError(f"Directory not found: {prefix}", source=prefix)
        return sorted(matches)


@pytest.fixture
def fake_storage() -> FakeStorage:
    """Reusable in-memory storage adapter.

    Tests add files with ``fake_storage.files[path] = [lines...]``.
    """
    return FakeStorage()


@pytest.fixture
def universe_dir(tmp_path: Path) -> Path:
    """Create <tmp>/data/alternative/quiver/wikipedia/universe/."""
    directory = tmp_path.joinpath("data", *UNIVERSE_PARTS)
    directory.mkdir(parents=True)
    return directory


@pytest.fixture
def write_universe(universe_dir: Path) -> Callable[[date, builtins.list[str]], Path]:
    """Write a universe file for a date and return its path."""

    def write(day: date, lines: builtins.list[str]) -> Path:
        path = universe_dir / f"{day:%Y%m%d}.csv"
        path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        return path

    return write


@pytest.fixture
def sample_lines() -> builtins.list[str]:
    """Two well-formed universe lines with real encoded identifiers."""
    return [
        "AAPL R735QTJ8XC9X,AAPL,1500000,12.5,-3.2",
        "MSFT R735QTJ8XC9X,MSFT,980000,-4,7.25",
    ]
