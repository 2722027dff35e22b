"""
Test doubles and event-loop helpers shared across test suites.

- ControlledChecker: availability checker whose calls settle only when
  the test resolves them, in any order
- StaticChecker: availability checker answering immediately from a table
- JitteryChecker, GatedBlockingChecker: out-of-order reply generators
- wait_for_debounce / drain: let timers fire and tasks settle
"""

import asyncio
import random
import threading
import time

from src.domain.result import AvailabilityResult, Ok

# Short window keeps tests fast while staying well above timer jitter
DEBOUNCE = 0.05


async def drain() -> None:
    """Run pending callbacks and task steps on the current loop."""
    for _ in range(10):
        await asyncio.sleep(0)


async def wait_for_debounce() -> None:
    """Sleep past the debounce window and let dispatched tasks run."""
    await asyncio.sleep(DEBOUNCE * 3)
    await drain()


class ControlledChecker:
    """Availability checker whose results are released manually."""

    def __init__(self) -> None:
        self.calls: list[str] = []
        self._pending: dict[str, list[asyncio.Future[AvailabilityResult]]] = {}

    async def check_availability(self, username: str) -> AvailabilityResult:
        self.calls.append(username)
        future: asyncio.Future[AvailabilityResult] = asyncio.get_running_loop().create_future()
        self._pending.setdefault(username, []).append(future)
        return await future

    def pending(self, username: str) -> int:
        return len([f for f in self._pending.get(username, []) if not f.done()])

    def resolve(self, username: str, outcome: AvailabilityResult) -> None:
        """Settle the oldest pending call for ``username``."""
        future = next(f for f in self._pending[username] if not f.done())
        future.set_result(outcome)

    def fail(self, username: str, exc: BaseException) -> None:
        """Make the oldest pending call for ``username`` raise."""
        future = next(f for f in self._pending[username] if not f.done())
        future.set_exception(exc)


class StaticChecker:
    """Availability checker answering immediately from a lookup table."""

    def __init__(self, outcomes: dict[str, AvailabilityResult] | None = None) -> None:
        self.calls: list[str] = []
        self._outcomes = outcomes or {}

    async def check_availability(self, username: str) -> AvailabilityResult:
        self.calls.append(username)
        return self._outcomes.get(username, Ok(True))


class JitteryChecker:
    """Async checker whose replies arrive after a random delay."""

    def __init__(self, seed: int, max_delay: float = 0.05) -> None:
        self._random = random.Random(seed)
        self._max_delay = max_delay
        self.calls: list[str] = []

    async def check_availability(self, username: str) -> AvailabilityResult:
        self.calls.append(username)
        await asyncio.sleep(self._random.uniform(0, self._max_delay))
        return Ok(len(username) % 2 == 0)


class GatedBlockingChecker:
    """
    Blocking checker held at a gate until released; once released, earlier
    calls take longer than later ones, so replies arrive in reverse order.
    """

    def __init__(self) -> None:
        self.calls: list[str] = []
        self.release = threading.Event()
        self._lock = threading.Lock()

    def check_availability(self, username: str) -> AvailabilityResult:
        with self._lock:
            self.calls.append(username)
            position = len(self.calls)
        self.release.wait(timeout=5)
        time.sleep(max(0.0, 0.2 - 0.05 * position))
        return Ok(username.endswith("ok"))
