"""
Result values - Tagged union for availability outcomes.

Errors flow through the validation graph as ``Err`` values instead of
exceptions. ``AvailabilityCheck`` binds an outcome to the username that
produced it.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from .exceptions import AvailabilityError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying a value."""

    value: T


@dataclass(frozen=True)
class Err:
    """Failed outcome carrying the availability error."""

    error: AvailabilityError


AvailabilityResult = Ok[bool] | Err


@dataclass(frozen=True)
class AvailabilityCheck:
    """
    Settled availability outcome for one username.

    Attributes:
        username: The exact field value that was sent to the checker
        outcome: Ok(is_available) or Err(error)
    """

    username: str
    outcome: AvailabilityResult

    @property
    def is_available(self) -> bool:
        """True only for a successful check reporting the name as free."""
        return self.outcome == Ok(True)
