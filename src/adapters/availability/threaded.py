"""
Threaded availability checker - Runs a blocking checker off the event loop.

The blocking call executes on an executor thread; awaiting the returned
future resumes on the event loop thread, which is where the result is
handed back to the pipeline.
"""

import asyncio
import logging
from concurrent.futures import Executor, ThreadPoolExecutor

from src.domain.ports import BlockingAvailabilityChecker
from src.domain.result import AvailabilityResult

logger = logging.getLogger(__name__)


class ThreadedAvailabilityChecker:
    """Implements AvailabilityChecker on top of a BlockingAvailabilityChecker."""

    def __init__(
        self,
        checker: BlockingAvailabilityChecker,
        executor: Executor | None = None,
    ) -> None:
        """
        Args:
            checker: Blocking checker to run on worker threads
            executor: Executor to use; a private ThreadPoolExecutor if omitted
        """
        self._checker = checker
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=4, thread_name_prefix="availability"
        )

    async def check_availability(self, username: str) -> AvailabilityResult:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self._executor, self._checker.check_availability, username)

    async def aclose(self) -> None:
        """Shut down an owned executor and close the wrapped checker if it can be closed."""
        if self._owns_executor:
            self._executor.shutdown(wait=False, cancel_futures=True)
        close = getattr(self._checker, "close", None)
        if close is not None:
            close()
