"""
HTTP availability checker adapters - Implement the checker ports via httpx.

Both adapters call ``GET {path}?userName=<value>`` and decode
``{"isAvailable": bool, "userName": str}``. Every failure is returned as
an ``Err`` carrying a typed domain error; nothing is raised to the caller.

Error mapping:
- invalid URL / unsupported scheme  -> InvalidRequest
- query cannot be encoded           -> EncodingError
- undecodable content encoding      -> DecodingError
- other httpx request failures      -> TransportError (timeouts and
                                       redirect loops included)
- non-2xx status                    -> ServerError(status_code)
- empty body                        -> NoData
- invalid JSON or wrong shape       -> DecodingError
"""

import logging

import httpx
from pydantic import ValidationError

from src.domain.exceptions import (
    DecodingError,
    EncodingError,
    InvalidRequest,
    NoData,
    ServerError,
    TransportError,
)
from src.domain.result import AvailabilityResult, Err, Ok

from .models import UserNameAvailableMessage

logger = logging.getLogger(__name__)

DEFAULT_PATH = "/isUserNameAvailable"


def _map_request_error(exc: Exception) -> Err:
    if isinstance(exc, (httpx.InvalidURL, httpx.UnsupportedProtocol)):
        return Err(InvalidRequest(str(exc) or "URL invalid"))
    if isinstance(exc, UnicodeEncodeError):
        return Err(EncodingError(exc))
    if isinstance(exc, httpx.DecodingError):
        return Err(DecodingError(exc))
    return Err(TransportError(exc))


def _interpret_response(response: httpx.Response) -> AvailabilityResult:
    if not response.is_success:
        return Err(ServerError(response.status_code))
    if not response.content:
        return Err(NoData())
    try:
        message = UserNameAvailableMessage.model_validate_json(response.content)
    except ValidationError as exc:
        return Err(DecodingError(exc))
    return Ok(message.is_available)


class HttpAvailabilityChecker:
    """
    Implements AvailabilityChecker via httpx.AsyncClient.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, client: httpx.AsyncClient, path: str = DEFAULT_PATH) -> None:
        """
        Initialize checker with an async HTTP client.

        Args:
            client: httpx.AsyncClient, usually created with base_url and timeout
            path: Endpoint path relative to the client's base URL
        """
        self._client = client
        self._path = path

    async def check_availability(self, username: str) -> AvailabilityResult:
        try:
            response = await self._client.get(self._path, params={"userName": username})
        except (httpx.InvalidURL, httpx.RequestError, UnicodeEncodeError) as exc:
            logger.debug("Availability request for %r failed: %s", username, exc)
            return _map_request_error(exc)
        return _interpret_response(response)

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()
        logger.info("Availability HTTP client closed")


class BlockingHttpAvailabilityChecker:
    """
    Implements BlockingAvailabilityChecker via httpx.Client.

    Blocks the calling thread; wrap in ThreadedAvailabilityChecker to use
    it from the event loop.
    """

    def __init__(self, client: httpx.Client, path: str = DEFAULT_PATH) -> None:
        self._client = client
        self._path = path

    def check_availability(self, username: str) -> AvailabilityResult:
        try:
            response = self._client.get(self._path, params={"userName": username})
        except (httpx.InvalidURL, httpx.RequestError, UnicodeEncodeError) as exc:
            logger.debug("Availability request for %r failed: %s", username, exc)
            return _map_request_error(exc)
        return _interpret_response(response)

    def close(self) -> None:
        self._client.close()
        logger.info("Availability HTTP client closed")
