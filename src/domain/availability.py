"""
Username availability pipeline - Debounce, dedup and latest-key-wins.

Pipeline (per username change):
================================

    username change -> (re)start debounce timer
    timer fires     -> value == last dispatched?  -> suppress (dedup)
                    -> otherwise dispatch check, sequence += 1
    check settles   -> sequence == latest?        -> publish AvailabilityCheck
                    -> otherwise discard (stale)

All state lives on the event loop thread. The debounce timer is a
scheduled callback and each remote check is an asyncio task; settling
always happens on the loop, so no locking is needed.

Superseded checks are not cancelled, they are allowed to finish and then
ignored. Only close() cancels running checks.
"""

import asyncio
import logging

from .exceptions import AvailabilityError
from .observable import Observable, Slot
from .ports import AvailabilityChecker, FailurePolicy, PipelineState
from .result import AvailabilityCheck, AvailabilityResult, Err, Ok

logger = logging.getLogger(__name__)

DEFAULT_DEBOUNCE_SECONDS = 0.5


class UsernameAvailabilityPipeline:
    """
    Turns username edits into at most one live availability check.

    The published result is shared by every subscriber; the remote call
    is made once per dispatched username regardless of subscriber count.
    """

    def __init__(
        self,
        username: Observable[str],
        checker: AvailabilityChecker,
        *,
        debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
        failure_policy: FailurePolicy = FailurePolicy.SURFACE,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        """
        Attach the pipeline to a username observable.

        Args:
            username: Source of username edits
            checker: Availability checker port
            debounce_seconds: Quiet period before a value is dispatched
            failure_policy: Whether failures surface as Err or as "taken"
            loop: Event loop owning the form; defaults to the running loop
                at the first username change. Required when edits arrive
                from code that is not running inside that loop
        """
        self._username = username
        self._checker = checker
        self._debounce_seconds = debounce_seconds
        self._failure_policy = failure_policy
        self._loop = loop

        self._result: Slot[AvailabilityCheck | None] = Slot(None)
        self._timer: asyncio.TimerHandle | None = None
        self._last_dispatched: str | None = None
        self._sequence = 0
        self._live_task: asyncio.Task[None] | None = None
        self._tasks: set[asyncio.Task[None]] = set()
        self._closed = False

        self._unsubscribe = username.subscribe(self._on_username_changed)

    @property
    def result(self) -> Observable[AvailabilityCheck | None]:
        """Latest settled check for the most recently dispatched username."""
        return self._result

    @property
    def state(self) -> PipelineState:
        if self._timer is not None:
            return PipelineState.DEBOUNCING
        if self._live_task is not None and not self._live_task.done():
            return PipelineState.IN_FLIGHT
        return PipelineState.IDLE

    @property
    def dispatched_count(self) -> int:
        """Number of checks issued to the checker so far."""
        return self._sequence

    def close(self) -> None:
        """Stop reacting to edits and cancel the timer and running checks."""
        if self._closed:
            return
        self._closed = True
        self._unsubscribe()
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        for task in self._tasks:
            task.cancel()
        logger.debug("Availability pipeline closed, %d check(s) cancelled", len(self._tasks))

    async def aclose(self) -> None:
        """Close and wait for cancelled checks to unwind."""
        pending = list(self._tasks)
        self.close()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)

    def _on_username_changed(self, username: str) -> None:
        if self._closed:
            return
        if self._loop is None:
            try:
                self._loop = asyncio.get_running_loop()
            except RuntimeError as exc:
                raise RuntimeError(
                    "username changed outside a running event loop; pass loop= to the form"
                ) from exc
        if self._timer is not None:
            self._timer.cancel()
            logger.debug("Debounce restarted for %r", username)
        self._timer = self._loop.call_later(self._debounce_seconds, self._on_debounce_elapsed)

    def _on_debounce_elapsed(self) -> None:
        self._timer = None
        username = self._username.value
        if username == self._last_dispatched:
            logger.debug("Suppressed duplicate availability check for %r", username)
            return
        self._dispatch(username)

    def _dispatch(self, username: str) -> None:
        assert self._loop is not None
        self._sequence += 1
        sequence = self._sequence
        self._last_dispatched = username

        logger.info("Checking availability of %r (request #%d)", username, sequence)
        task = self._loop.create_task(self._run_check(username, sequence))
        self._live_task = task
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _run_check(self, username: str, sequence: int) -> None:
        outcome: AvailabilityResult
        try:
            outcome = await self._checker.check_availability(username)
        except AvailabilityError as exc:
            outcome = Err(exc)
        except Exception as exc:
            logger.exception("Availability checker raised for %r", username)
            outcome = Err(AvailabilityError(f"Unexpected checker failure: {exc}"))
        self._settle(username, sequence, outcome)

    def _settle(self, username: str, sequence: int, outcome: AvailabilityResult) -> None:
        if self._closed:
            return
        if sequence != self._sequence:
            logger.debug(
                "Discarded stale availability result for %r (request #%d, latest #%d)",
                username,
                sequence,
                self._sequence,
            )
            return

        if isinstance(outcome, Err):
            if self._failure_policy is FailurePolicy.UNAVAILABLE:
                logger.warning(
                    "Availability check for %r failed, treating as unavailable: %s",
                    username,
                    outcome.error,
                )
                outcome = Ok(False)
            else:
                logger.warning("Availability check for %r failed: %s", username, outcome.error)

        logger.info("Availability of %r settled: %s", username, outcome)
        self._result.set(AvailabilityCheck(username=username, outcome=outcome))
