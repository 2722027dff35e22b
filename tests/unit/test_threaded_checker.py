"""
Unit tests for ThreadedAvailabilityChecker.

Tests verify blocking checkers run off the event loop thread and that the
result is delivered back on the loop.
"""

import threading
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import Mock

import pytest

from src.adapters.availability.threaded import ThreadedAvailabilityChecker
from src.domain.exceptions import ServerError
from src.domain.result import AvailabilityResult, Err, Ok


class RecordingBlockingChecker:
    """Blocking checker that records the thread it ran on."""

    def __init__(self, outcome: AvailabilityResult) -> None:
        self.outcome = outcome
        self.threads: list[int] = []

    def check_availability(self, username: str) -> AvailabilityResult:
        self.threads.append(threading.get_ident())
        return self.outcome


class TestThreadedChecker:
    """Tests for executor handoff."""

    @pytest.mark.asyncio
    async def test_runs_on_worker_thread(self) -> None:
        blocking = RecordingBlockingChecker(Ok(True))
        checker = ThreadedAvailabilityChecker(blocking)

        result = await checker.check_availability("alice")

        assert result == Ok(True)
        assert blocking.threads and blocking.threads[0] != threading.get_ident()
        await checker.aclose()

    @pytest.mark.asyncio
    async def test_err_passed_through(self) -> None:
        error = ServerError(502)
        checker = ThreadedAvailabilityChecker(RecordingBlockingChecker(Err(error)))

        assert await checker.check_availability("alice") == Err(error)
        await checker.aclose()

    @pytest.mark.asyncio
    async def test_supplied_executor_not_shut_down(self) -> None:
        """An executor passed in stays usable after aclose()."""
        with ThreadPoolExecutor(max_workers=1) as executor:
            checker = ThreadedAvailabilityChecker(RecordingBlockingChecker(Ok(False)), executor)
            assert await checker.check_availability("bob") == Ok(False)
            await checker.aclose()

            assert executor.submit(lambda: 42).result() == 42

    @pytest.mark.asyncio
    async def test_aclose_closes_wrapped_checker(self) -> None:
        blocking = Mock()
        checker = ThreadedAvailabilityChecker(blocking)

        await checker.aclose()

        blocking.close.assert_called_once_with()
