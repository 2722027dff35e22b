"""
Domain layer - Pure business logic with zero framework imports.

This package contains the reactive validation graph for the sign-up form:
field store, local validators, the debounced username availability
pipeline and the form validity aggregator. It defines its own port
interfaces so availability checkers stay swappable.
"""

from .aggregator import FormValidityAggregator, ValidationState
from .availability import UsernameAvailabilityPipeline
from .exceptions import (
    AvailabilityError,
    DecodingError,
    EncodingError,
    FormNotSubmittable,
    InvalidRequest,
    NoData,
    ServerError,
    SignUpFormError,
    TransportError,
)
from .fields import FieldStore, FormState
from .ports import AvailabilityChecker, BlockingAvailabilityChecker, FailurePolicy, PipelineState
from .result import AvailabilityCheck, AvailabilityResult, Err, Ok
from .signup_form import SignUpForm

__all__ = [
    "AvailabilityCheck",
    "AvailabilityChecker",
    "AvailabilityError",
    "AvailabilityResult",
    "BlockingAvailabilityChecker",
    "DecodingError",
    "EncodingError",
    "Err",
    "FailurePolicy",
    "FieldStore",
    "FormNotSubmittable",
    "FormState",
    "FormValidityAggregator",
    "InvalidRequest",
    "NoData",
    "Ok",
    "PipelineState",
    "ServerError",
    "SignUpForm",
    "SignUpFormError",
    "TransportError",
    "UsernameAvailabilityPipeline",
    "ValidationState",
]
