"""
Dependency wiring - Factories for checkers and sign-up form sessions.

This module builds the availability checker adapter selected by settings
and manages the lifetime of a form together with the resources it uses.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import httpx

from src.adapters.availability import (
    BlockingHttpAvailabilityChecker,
    HttpAvailabilityChecker,
    InMemoryAvailabilityChecker,
    ThreadedAvailabilityChecker,
)
from src.config.settings import Settings, get_settings
from src.domain.ports import AvailabilityChecker
from src.domain.signup_form import SignUpForm

logger = logging.getLogger(__name__)


def create_availability_checker(settings: Settings) -> AvailabilityChecker:
    """
    Create the availability checker chosen by ``availability_transport``.

    HTTP-based checkers own their client; close them with ``aclose()``.
    """
    if settings.availability_transport == "memory":
        logger.info("Using in-memory availability checker")
        return InMemoryAvailabilityChecker(settings.taken_usernames)

    if settings.availability_transport == "threaded":
        logger.info("Using threaded availability checker at %s", settings.availability_base_url)
        client = httpx.Client(
            base_url=settings.availability_base_url,
            timeout=settings.availability_timeout_seconds,
        )
        return ThreadedAvailabilityChecker(
            BlockingHttpAvailabilityChecker(client, settings.availability_path)
        )

    logger.info("Using HTTP availability checker at %s", settings.availability_base_url)
    async_client = httpx.AsyncClient(
        base_url=settings.availability_base_url,
        timeout=settings.availability_timeout_seconds,
    )
    return HttpAvailabilityChecker(async_client, settings.availability_path)


def create_signup_form(settings: Settings, checker: AvailabilityChecker) -> SignUpForm:
    """Create a sign-up form configured from settings."""
    return SignUpForm(
        checker,
        debounce_seconds=settings.debounce_seconds,
        failure_policy=settings.availability_failure_policy,
    )


@asynccontextmanager
async def signup_form_session(
    settings: Settings | None = None,
    checker: AvailabilityChecker | None = None,
) -> AsyncGenerator[SignUpForm, None]:
    """
    Sign-up form session context manager.

    Manages the form lifecycle:
    - Creates the availability checker (unless one is supplied)
    - Creates the form
    - On exit, cancels in-flight checks and closes a checker it created
    """
    settings = settings or get_settings()
    owns_checker = checker is None
    checker = checker or create_availability_checker(settings)

    form = create_signup_form(settings, checker)
    logger.info("Sign-up form session started")
    try:
        yield form
    finally:
        await form.aclose()
        aclose = getattr(checker, "aclose", None)
        if owns_checker and aclose is not None:
            await aclose()
        logger.info("Sign-up form session closed")
