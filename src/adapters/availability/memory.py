"""
In-memory availability checker - Implements AvailabilityChecker locally.

Answers from a fixed set of taken usernames, for demos and local
development without an availability server.
"""

import asyncio
import logging
from collections.abc import Iterable

from src.domain.result import AvailabilityResult, Ok

logger = logging.getLogger(__name__)


class InMemoryAvailabilityChecker:
    """
    Implements AvailabilityChecker from a set of taken usernames.

    Comparison is case-insensitive. An optional latency simulates a
    network round trip.
    """

    def __init__(self, taken_usernames: Iterable[str] = (), latency_seconds: float = 0.0) -> None:
        self._taken = {name.lower() for name in taken_usernames}
        self._latency_seconds = latency_seconds

    async def check_availability(self, username: str) -> AvailabilityResult:
        if self._latency_seconds:
            await asyncio.sleep(self._latency_seconds)
        available = username.lower() not in self._taken
        logger.info("[AVAILABILITY] Username: %s Available: %s", username, available)
        return Ok(available)
