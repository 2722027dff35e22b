"""
Domain exceptions - Semantic error types for sign-up validation.

Availability errors are carried as values inside ``Err`` results rather
than raised past the pipeline. Each error renders a human-readable message
that is shown verbatim to the user.
"""


class AvailabilityError(Exception):
    """Base class for username availability check failures."""

    pass


class TransportError(AvailabilityError):
    """Network failure while talking to the availability endpoint."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"Transport error: {cause}")
        self.cause = cause


class ServerError(AvailabilityError):
    """Availability endpoint answered with a non-2xx status code."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Server responded with status code {status_code}")
        self.status_code = status_code


class NoData(AvailabilityError):
    """Availability endpoint answered with an empty body."""

    def __init__(self) -> None:
        super().__init__("Server returned no data")


class DecodingError(AvailabilityError):
    """Response body is not a valid availability message."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"Could not decode server response: {cause}")
        self.cause = cause


class EncodingError(AvailabilityError):
    """Request could not be encoded (e.g. username not representable in UTF-8)."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"Could not encode request: {cause}")
        self.cause = cause


class InvalidRequest(AvailabilityError):
    """Request URL or input is malformed."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Invalid request: {reason}")
        self.reason = reason


class SignUpFormError(Exception):
    """Base class for sign-up form errors."""

    pass


class FormNotSubmittable(SignUpFormError):
    """Submit was attempted while the form is not valid."""

    pass
