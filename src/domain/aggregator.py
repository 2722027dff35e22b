"""
Form validity aggregator - Combines field rules and availability.

ValidationState is a pure function of (username-length-valid,
availability for the current username, password-valid). An availability
check settled for a different username than the one currently in the
field counts as "not checked yet": no message, and the form is not valid.
"""

from dataclasses import dataclass

from . import validators
from .observable import Derived, Observable
from .result import AvailabilityCheck, AvailabilityResult, Err, Ok


@dataclass(frozen=True)
class ValidationState:
    """Derived, user-facing validation outcome."""

    is_valid: bool = False
    username_message: str = ""
    password_message: str = ""


def username_message(length_valid: bool, availability: AvailabilityResult | None) -> str:
    if not length_valid:
        return validators.USERNAME_TOO_SHORT
    if isinstance(availability, Err):
        return validators.USERNAME_CHECK_FAILED.format(error=availability.error)
    if availability == Ok(False):
        return validators.USERNAME_TAKEN
    return ""


def password_message(password_empty: bool, password_matching: bool) -> str:
    if password_empty:
        return validators.PASSWORD_EMPTY
    if not password_matching:
        return validators.PASSWORDS_DO_NOT_MATCH
    return ""


def aggregate(
    length_valid: bool,
    availability: AvailabilityResult | None,
    password_empty: bool,
    password_matching: bool,
) -> ValidationState:
    """Compute the validation state from already-derived inputs."""
    password_valid = not password_empty and password_matching
    return ValidationState(
        is_valid=length_valid and availability == Ok(True) and password_valid,
        username_message=username_message(length_valid, availability),
        password_message=password_message(password_empty, password_matching),
    )


class FormValidityAggregator:
    """
    Wires local validators and the availability result into ValidationState.

    The intermediate derivations are exposed for consumers that want a
    single rule; ``state`` is the combined ValidationState.
    """

    def __init__(
        self,
        username: Observable[str],
        password: Observable[str],
        password_confirmation: Observable[str],
        availability: Observable[AvailabilityCheck | None],
    ) -> None:
        self.username_length_valid = Derived(
            lambda: validators.username_length_valid(username.value), username
        )
        self.password_empty = Derived(lambda: validators.password_empty(password.value), password)
        self.password_matching = Derived(
            lambda: validators.password_matching(password.value, password_confirmation.value),
            password,
            password_confirmation,
        )
        self.password_valid = Derived(
            lambda: validators.password_valid(password.value, password_confirmation.value),
            password,
            password_confirmation,
        )
        self.current_availability = Derived(
            lambda: _availability_for(username.value, availability.value),
            username,
            availability,
        )
        # Computed from raw inputs in one step: subscribers never see a
        # half-updated combination.
        self.state = Derived(
            lambda: aggregate(
                validators.username_length_valid(username.value),
                _availability_for(username.value, availability.value),
                validators.password_empty(password.value),
                validators.password_matching(password.value, password_confirmation.value),
            ),
            username,
            password,
            password_confirmation,
            availability,
        )
        self._nodes = [
            self.username_length_valid,
            self.password_empty,
            self.password_matching,
            self.password_valid,
            self.current_availability,
            self.state,
        ]

    def dispose(self) -> None:
        for node in self._nodes:
            node.dispose()


def _availability_for(
    username: str, check: AvailabilityCheck | None
) -> AvailabilityResult | None:
    if check is None or check.username != username:
        return None
    return check.outcome
