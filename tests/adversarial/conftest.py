"""
Shared fixtures for adversarial tests.

Provides checkers that reply out of order to stress the ordering of
overlapping availability checks.
"""

from collections.abc import Generator

import pytest

from tests.support import GatedBlockingChecker

# Module-level marker for all adversarial tests
pytestmark = pytest.mark.adversarial


@pytest.fixture
def gated_checker() -> Generator[GatedBlockingChecker, None, None]:
    checker = GatedBlockingChecker()
    yield checker
    # Never leave worker threads parked at the gate
    checker.release.set()
