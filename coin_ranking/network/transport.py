"""
Transport abstraction over "send a request, get bytes and a status".
"""

import logging
from typing import Protocol

import aiohttp
from pydantic import BaseModel, ConfigDict

from ..shared.errors import NetworkError
from .request import PreparedRequest
from .settings import network_settings

logger = logging.getLogger(__name__)


class TransportResponse(BaseModel):
    """Raw HTTP response: status code and body bytes."""

    model_config = ConfigDict(frozen=True)

    status: int
    body: bytes


class Transport(Protocol):
    async def send(self, request: PreparedRequest) -> TransportResponse: ...


class AiohttpTransport:
    """Transport backed by an aiohttp client session per request."""

    def __init__(self, timeout: float | None = None) -> None:
        if timeout is None:
            timeout = network_settings.request_timeout
        self.timeout = timeout

    async def send(self, request: PreparedRequest) -> TransportResponse:
        """
        Send a prepared request.

        The status code is returned as-is; judging it is up to the caller.

        Raises:
            NetworkError: timeout, no_internet when the host cannot be reached,
                unknown for any other client failure
        """
        try:
            async with (
                aiohttp.ClientSession(
                    timeout=aiohttp.ClientTimeout(total=self.timeout)
                ) as session,
                session.request(
                    request.method.value,
                    request.url,
                    headers=request.headers,
                    data=request.body,
                ) as response,
            ):
                body = await response.read()
                logger.debug(
                    f"{request.method} {request.url} -> {response.status} ({len(body)} bytes)"
                )
                return TransportResponse(status=response.status, body=body)
        except TimeoutError as e:
            logger.warning(f"Request to {request.url} timed out")
            raise NetworkError.timeout(e) from e
        except aiohttp.ClientConnectionError as e:
            logger.warning(f"Cannot reach {request.url}: {e}")
            raise NetworkError.no_internet(e) from e
        except aiohttp.ClientError as e:
            logger.error(f"Request to {request.url} failed: {e}")
            raise NetworkError.unknown(e) from e
