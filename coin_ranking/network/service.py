"""
Fetch service composing request building, transport and decoding.
"""

import logging
from typing import ClassVar, Generic, TypeVar

from pydantic import BaseModel

from ..shared.errors import AppError, NetworkError
from .processor import decode_response
from .request import PreparedRequest, RequestDescriptor, build_request
from .transport import AiohttpTransport, Transport, TransportResponse

ModelT = TypeVar("ModelT", bound=BaseModel)

logger = logging.getLogger(__name__)


class FetchService(Generic[ModelT]):
    """
    Fetch a descriptor and decode the response into ``response_model``.

    Subclasses bind ``response_model`` to one resource type. Every failure
    leaves this class as a RequestError or NetworkError.
    """

    response_model: ClassVar[type[BaseModel]]

    def __init__(self, transport: Transport | None = None) -> None:
        self.transport = transport or AiohttpTransport()

    async def fetch(self, descriptor: RequestDescriptor) -> ModelT:
        request = build_request(descriptor)
        data = await self._fetch_data(request)
        return decode_response(self.response_model, data)  # type: ignore[return-value]

    async def _fetch_data(self, request: PreparedRequest) -> bytes:
        try:
            response = await self.transport.send(request)
        except AppError:
            raise
        except Exception as e:
            logger.error(f"Transport failed for {request.url}: {e}")
            raise NetworkError.unknown(e) from e

        if not isinstance(response, TransportResponse):
            raise NetworkError.invalid_response()

        if not 200 <= response.status <= 299:
            logger.warning(f"{request.url} returned status {response.status}")
            raise NetworkError.server_error(response.status)

        return response.body
