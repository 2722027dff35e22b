"""
Sign-up form - Composition root of the validation graph.

The presentation layer writes raw field text through the setters and
reads ``is_valid``, ``username_message`` and ``password_message``.
Everything must be driven from the event loop thread that owns the form.
"""

import asyncio
import logging
from collections.abc import Callable
from types import TracebackType

from .aggregator import FormValidityAggregator, ValidationState
from .availability import DEFAULT_DEBOUNCE_SECONDS, UsernameAvailabilityPipeline
from .exceptions import FormNotSubmittable
from .fields import FieldStore, FormState
from .ports import AvailabilityChecker, FailurePolicy, PipelineState

logger = logging.getLogger(__name__)


class SignUpForm:
    """
    Real-time validated sign-up form.

    Orchestrates the field store, the availability pipeline and the
    validity aggregator. The form does not own the checker; closing the
    form cancels in-flight checks but leaves the checker open.

    Without ``loop`` the form binds to the running loop at the first
    username edit, so synchronous callers must pass the loop they will
    run. Editing the username with neither raises RuntimeError.
    """

    def __init__(
        self,
        checker: AvailabilityChecker,
        *,
        debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
        failure_policy: FailurePolicy = FailurePolicy.SURFACE,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        self.fields = FieldStore()
        self.availability = UsernameAvailabilityPipeline(
            self.fields.username,
            checker,
            debounce_seconds=debounce_seconds,
            failure_policy=failure_policy,
            loop=loop,
        )
        self.aggregator = FormValidityAggregator(
            self.fields.username,
            self.fields.password,
            self.fields.password_confirmation,
            self.availability.result,
        )

    # Inputs

    def set_username(self, value: str) -> None:
        self.fields.set_username(value)

    def set_password(self, value: str) -> None:
        self.fields.set_password(value)

    def set_password_confirmation(self, value: str) -> None:
        self.fields.set_password_confirmation(value)

    # Outputs

    @property
    def validation_state(self) -> ValidationState:
        return self.aggregator.state.value

    @property
    def is_valid(self) -> bool:
        return self.validation_state.is_valid

    @property
    def username_message(self) -> str:
        return self.validation_state.username_message

    @property
    def password_message(self) -> str:
        return self.validation_state.password_message

    @property
    def form_state(self) -> FormState:
        return self.fields.snapshot()

    @property
    def availability_state(self) -> PipelineState:
        return self.availability.state

    def subscribe(self, callback: Callable[[ValidationState], None]) -> Callable[[], None]:
        """Call ``callback`` with every changed ValidationState."""
        return self.aggregator.state.subscribe(callback)

    def submit(self) -> FormState:
        """
        Return the submitted field values.

        Raises:
            FormNotSubmittable: If the form is not currently valid
        """
        if not self.is_valid:
            raise FormNotSubmittable(
                self.username_message or self.password_message or "Username availability not confirmed"
            )
        state = self.form_state
        logger.info("Signing up as %s", state.username)
        return state

    # Lifecycle

    def close(self) -> None:
        self.availability.close()
        self.aggregator.dispose()

    async def aclose(self) -> None:
        await self.availability.aclose()
        self.aggregator.dispose()

    async def __aenter__(self) -> "SignUpForm":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
