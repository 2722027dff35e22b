"""Availability checker adapters - HTTP, threaded and in-memory implementations."""

from .http import BlockingHttpAvailabilityChecker, HttpAvailabilityChecker
from .memory import InMemoryAvailabilityChecker
from .models import UserNameAvailableMessage
from .threaded import ThreadedAvailabilityChecker

__all__ = [
    "BlockingHttpAvailabilityChecker",
    "HttpAvailabilityChecker",
    "InMemoryAvailabilityChecker",
    "ThreadedAvailabilityChecker",
    "UserNameAvailableMessage",
]
