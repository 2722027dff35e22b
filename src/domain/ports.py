"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.
"""

from enum import Enum
from typing import Protocol

from .result import AvailabilityResult


class PipelineState(str, Enum):
    """
    Observable state of the username availability pipeline.

    Transitions:
    - IDLE -> DEBOUNCING (username changed)
    - DEBOUNCING -> DEBOUNCING (username changed again, timer restarted)
    - DEBOUNCING -> IN_FLIGHT (quiet period elapsed, new value dispatched)
    - DEBOUNCING -> IDLE (quiet period elapsed, value already dispatched;
      IN_FLIGHT instead if that dispatch has not settled yet)
    - IN_FLIGHT -> IDLE (live check settled and published)

    A superseded check may still be running while the state is IDLE or
    DEBOUNCING; its result is discarded when it settles.
    """

    IDLE = "IDLE"
    DEBOUNCING = "DEBOUNCING"
    IN_FLIGHT = "IN_FLIGHT"


class FailurePolicy(str, Enum):
    """
    How a failed availability check is published.

    SURFACE keeps the error so the user sees why the check failed.
    UNAVAILABLE publishes the failure as "username taken".
    """

    SURFACE = "surface"
    UNAVAILABLE = "unavailable"


class AvailabilityChecker(Protocol):
    """Port interface for the asynchronous username availability check."""

    async def check_availability(self, username: str) -> AvailabilityResult:
        """
        Ask whether a username is still free.

        Completes exactly once per call. Failures are returned as Err,
        not raised.

        Args:
            username: Raw username field value

        Returns:
            Ok(True) if available, Ok(False) if taken, Err(error) on failure
        """
        ...


class BlockingAvailabilityChecker(Protocol):
    """Port interface for a checker that blocks the calling thread."""

    def check_availability(self, username: str) -> AvailabilityResult:
        """Same contract as AvailabilityChecker, but synchronous."""
        ...
