"""Core domain services for wikiviews."""

from datetime import date, datetime, timedelta
from pathlib import Path

from loguru import logger

from wikiviews.config import ERROR_POLICIES, ErrorPolicy, WikiviewsConfig
from wikiviews.core.exceptions import (
    ConfigurationError,
    ParseError,
    StorageNotFoundError,
)
from wikiviews.core.identifiers import parse_security_identifier
from wikiviews.core.models import SubscriptionDataSource, WikipediaUniverse, as_date
from wikiviews.core.ports import ExecutorPort, IdentifierResolver, StoragePort
from wikiviews.core.universe import (
    DATE_FORMAT,
    decode,
    get_source,
    universe_directory,
)


class UniverseReader:
    """Drives locate, read and decode for Wikipedia page-view universe files."""

    def __init__(
        self,
        storage: StoragePort,
        config: WikiviewsConfig,
        resolver: IdentifierResolver = parse_security_identifier,
        executor: ExecutorPort | None = None,
    ) -> None:
        self._storage = storage
        self._config = config
        self._resolver = resolver
        self._executor = executor

    @classmethod
    def from_directory(
        cls,
        directory: Path | None = None,
        data_folder: Path | str = "data",
        on_error: ErrorPolicy = "raise",
        max_workers: int = 1,
    ) -> "UniverseReader":
        """Create a UniverseReader with default adapters.

        Args:
            directory: Start directory for root discovery (defaults to cwd).
            data_folder: Data folder relative to project root, absolute, or a URI.
            on_error: Error policy for undecodable lines.
            max_workers: Parallelism for read_range().

        Returns:
            UniverseReader with RouterStorage and a resolved config.
        """
        from wikiviews.adapters.storage import create_router

        config = WikiviewsConfig.from_directory(
            directory,
            data_folder=data_folder,
            on_error=on_error,
            max_workers=max_workers,
        )
        return cls(storage=create_router(), config=config)

    @property
    def config(self) -> WikiviewsConfig:
        """The reader's configuration."""
        return self._config

    def source_for(
        self, reference_date: date | datetime, live_mode: bool = False
    ) -> SubscriptionDataSource:
        """Locate the universe file for a date under the configured data folder."""
        return get_source(self._config.data_folder, reference_date, live_mode)

    def _resolve_policy(self, on_error: ErrorPolicy | None) -> ErrorPolicy:
        policy = on_error or self._config.on_error
        if policy not in ERROR_POLICIES:
            raise ConfigurationError(f"Unknown error policy '{policy}'")
        return policy

    def read(
        self,
        reference_date: date | datetime,
        *,
        on_error: ErrorPolicy | None = None,
    ) -> list[WikipediaUniverse]:
        """Read and decode every record for a date, in file order.

        Args:
            reference_date: Date whose universe file to read.
            on_error: Overrides the configured error policy for this call.

        Returns:
            Decoded records. Blank lines are ignored.

        Raises:
            StorageNotFoundError: If no file exists for the date.
            ParseError: If a line fails to decode and the policy is "raise".
        """
        policy = self._resolve_policy(on_error)
        source = self.source_for(reference_date).source
        lines = self._storage.read_lines(source)

        records: list[WikipediaUniverse] = []
        skipped = 0
        for number, line in enumerate(lines, 1):
            if not line.strip():
                continue
            try:
                records.append(decode(line, reference_date, self._resolver))
            except ParseError as e:
                if policy == "raise":
                    raise
                skipped += 1
                logger.warning(
                    "Skipping {}:{} ({} stage): {}", source, number, e.stage, e
                )

        logger.debug(
            "Decoded {} records from {} ({} skipped)", len(records), source, skipped
        )
        return records

    def _read_if_present(
        self, day: date, on_error: ErrorPolicy | None
    ) -> list[WikipediaUniverse] | None:
        if not self._storage.exists(self.source_for(day).source):
            logger.debug("No universe file for {}", day)
            return None
        try:
            return self.read(day, on_error=on_error)
        except StorageNotFoundError:
            # Removed between the existence check and the read
            logger.debug("Universe file for {} disappeared before reading", day)
            return None

    def read_range(
        self,
        start: date | datetime,
        end: date | datetime,
        *,
        on_error: ErrorPolicy | None = None,
    ) -> dict[date, list[WikipediaUniverse]]:
        """Read every date in [start, end] that has a universe file.

        Dates are read through the executor: the injected one if any,
        otherwise one sized by config.max_workers. Each date is checked
        with the storage exists() call first, so dates with no file are never
        downloaded.

        Args:
            start: First date (inclusive).
            end: Last date (inclusive).
            on_error: Overrides the configured error policy for this call.

        Returns:
            Mapping of date to records, in ascending date order. Dates with no
            file are omitted.

        Raises:
            ValueError: If end is before start.
            ParseError: If a line fails to decode and the policy is "raise".
        """
        first, last = as_date(start), as_date(end)
        if last < first:
            raise ValueError(f"end ({last}) is before start ({first})")

        days = [first + timedelta(days=i) for i in range((last - first).days + 1)]

        if self._executor is not None:
            executor = self._executor
        else:
            from wikiviews.adapters.executor.executor import make_executor

            executor = make_executor(self._config.max_workers)

        results: dict[date, list[WikipediaUniverse]] = {}
        with executor:
            futures = [
                (day, executor.submit(self._read_if_present, day, on_error))
                for day in days
            ]
            for day, future in futures:
                batch = future.result()
                if batch is not None:
                    results[day] = batch  # type: ignore[assignment]

        return results

    def available_dates(self) -> list[date]:
        """List dates that have a universe file, oldest first.

        Files whose name is not YYYYMMDD.csv are ignored. A missing universe
        directory yields an empty list.
        """
        directory = universe_directory(self._config.data_folder)
        try:
            files = self._storage.list(directory, "*.csv")
        except StorageNotFoundError:
            logger.debug("Universe directory not found: {}", directory)
            return []

        dates: list[date] = []
        for path in files:
            stem = Path(path).stem
            if len(stem) != 8 or not stem.isdigit():
                logger.debug("Ignoring non-date file {}", path)
                continue
            try:
                dates.append(datetime.strptime(stem, DATE_FORMAT).date())
            except ValueError:
                logger.debug("Ignoring non-date file {}", path)
        return sorted(dates)
