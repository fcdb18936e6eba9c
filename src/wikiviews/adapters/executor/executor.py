"""Executor adapters implementing ExecutorPort."""

from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from collections.abc import Callable

    from wikiviews.core.ports import ExecutorPort


class SynchronousExecutor:
    """Runs tasks immediately in the calling thread.

    The default for UniverseReader.read_range() when max_workers is 1.
    """

    def submit(
        self,
        fn: Callable[..., object],
        *args: object,
        **kwargs: object,
    ) -> Future[object]:
        """Execute fn now and return an already completed future.

        Exceptions raised by fn are stored on the future, as a thread pool
        would, and re-raised by future.result().
        """
        future: Future[object] = Future()
        try:
            future.set_result(fn(*args, **kwargs))
        except Exception as e:
            future.set_exception(e)
        return future

    def __enter__(self) -> SynchronousExecutor:
        """Enter context manager."""
        return self

    def __exit__(
        self, exc_type: object, exc_val: object, exc_tb: object
    ) -> object | None:
        """Exit context manager (nothing to shut down)."""
        return None


class ThreadPoolExecutorAdapter:
    """Adapter wrapping ThreadPoolExecutor to implement ExecutorPort.

    Used to read several universe dates concurrently. Decoding is pure, so
    workers share nothing but the storage adapter.
    """

    def __init__(self, max_workers: int | None = None) -> None:
        """Initialize thread pool executor adapter.

        Args:
            max_workers: Maximum number of worker threads. None uses default.
        """
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="wikiviews"
        )

    def submit(
        self,
        fn: Callable[..., object],
        *args: object,
        **kwargs: object,
    ) -> Future[object]:
        """Submit fn to the thread pool."""
        return self._executor.submit(fn, *args, **kwargs)

    def __enter__(self) -> ThreadPoolExecutorAdapter:
        """Enter context manager."""
        self._executor.__enter__()
        return self

    def __exit__(
        self, exc_type: object, exc_val: object, exc_tb: object
    ) -> object | None:
        """Shut down the pool, waiting for pending reads."""
        return self._executor.__exit__(exc_type, exc_val, exc_tb)  # type: ignore[arg-type]


def make_executor(max_workers: int) -> ExecutorPort:
    """Return a synchronous executor for one worker, a thread pool otherwise."""
    if max_workers <= 1:
        return SynchronousExecutor()
    return ThreadPoolExecutorAdapter(max_workers=max_workers)
