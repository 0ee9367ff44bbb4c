"""Bounded worker pools for blocking delegate libraries."""

import asyncio
import functools
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable

logger = logging.getLogger(__name__)


class DelegatePool:
    """Thread pool reserved for one delegate library.

    Blocking calls run here instead of the event loop's default executor, so a
    delegate that hangs can only exhaust its own workers.
    """

    def __init__(self, name: str, max_workers: int):
        self.name = name
        self.max_workers = max_workers
        self._executor: ThreadPoolExecutor | None = None

    def _get_executor(self) -> ThreadPoolExecutor:
        if self._executor is None:
            self._executor = ThreadPoolExecutor(
                max_workers=self.max_workers,
                thread_name_prefix=f"delegate-{self.name}",
            )
            logger.info("Delegate pool %s created with %d workers", self.name, self.max_workers)
        return self._executor

    async def run(self, func: Callable[..., Any], *args: Any, timeout: float) -> Any:
        """Run func(*args) on the pool and wait at most timeout seconds.

        Raises:
            TimeoutError: If the call does not finish in time. A call still
                queued at that point is cancelled before it starts.
        """
        loop = asyncio.get_running_loop()
        future = loop.run_in_executor(self._get_executor(), functools.partial(func, *args))
        return await asyncio.wait_for(future, timeout=timeout)

    def shutdown(self) -> None:
        """Stop the pool without waiting for running calls; drop queued ones."""
        if self._executor:
            self._executor.shutdown(wait=False, cancel_futures=True)
            self._executor = None
            logger.info("Delegate pool %s shut down", self.name)
