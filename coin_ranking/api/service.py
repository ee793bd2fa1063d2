"""FastAPI application exposing coin rankings and favorites."""

import logging
from collections.abc import AsyncGenerator
from typing import Annotated, Final

import uvicorn
from fastapi import Depends, FastAPI, Path, Query, Request, Response
from fastapi.responses import JSONResponse

from ..coins.detail import chart_points
from ..coins.listing import MAX_RECORDS, PAGE_SIZE
from ..coins.models import CoinDetailResponse, CoinListResponse
from ..coins.requests import (
    SortDirection,
    SortKey,
    TimePeriod,
    coin_details_request,
    coin_list_request,
    coin_price_history_request,
)
from ..coins.services import CoinDetailService, CoinListService, CoinPriceHistoryService
from ..favorites.handler import FavoriteCoinHandler, FavoriteCoinsController
from ..favorites.models import FavoriteCoin
from ..favorites.storage import FavoriteCoinStorage
from ..network.transport import AiohttpTransport, Transport
from ..shared.errors import NetworkError, NetworkErrorKind, RequestError, StorageError
from .models import ChartResponse, ErrorResponse
from .settings import api_settings

ERROR_COIN_NOT_FOUND: Final[str] = "coin_not_found"
ERROR_FAVORITE_NOT_FOUND: Final[str] = "favorite_not_found"
ERROR_INVALID_RANGE: Final[str] = "invalid_range"
ERROR_STORAGE: Final[str] = "storage_error"
ERROR_INTERNAL_ERROR: Final[str] = "internal_error"
ERROR_NOT_FOUND: Final[str] = "not_found"

logger = logging.getLogger(__name__)


def get_transport() -> Transport:
    """Dependency function to provide the HTTP transport."""
    return AiohttpTransport()


def get_coin_list_service(
    transport: Annotated[Transport, Depends(get_transport)],
) -> CoinListService:
    return CoinListService(transport)


def get_coin_detail_service(
    transport: Annotated[Transport, Depends(get_transport)],
) -> CoinDetailService:
    return CoinDetailService(transport)


def get_price_history_service(
    transport: Annotated[Transport, Depends(get_transport)],
) -> CoinPriceHistoryService:
    return CoinPriceHistoryService(transport)


async def get_favorite_storage() -> AsyncGenerator[FavoriteCoinStorage, None]:
    """
    Dependency function to provide storage instance.

    Returns:
        FavoriteCoinStorage: Initialized storage instance
    """
    storage = FavoriteCoinStorage()
    try:
        await storage.initialize()
        yield storage
    finally:
        await storage.close()


def get_favorite_handler(
    storage: Annotated[FavoriteCoinStorage, Depends(get_favorite_storage)],
) -> FavoriteCoinHandler:
    return FavoriteCoinHandler(storage)


CoinId = Annotated[
    str,
    Path(
        min_length=1,
        max_length=64,
        pattern=r"^[A-Za-z0-9_-]+$",
        description="Coin uuid",
        examples=["Qwsogvtv82FCd"],
    ),
]

TimePeriodQuery = Annotated[
    TimePeriod, Query(description="Time window for change and history")
]

SortKeyQuery = Annotated[
    SortKey | None,
    Query(
        description="Sort key: "
        + ", ".join(f"{key.value} ({key.label})" for key in SortKey)
    ),
]

SortDirectionQuery = Annotated[
    SortDirection | None,
    Query(
        description="Sort direction: "
        + ", ".join(f"{item.value} ({item.label})" for item in SortDirection)
    ),
]


app = FastAPI(
    title="Coin Ranking API",
    description="Cryptocurrency rankings, coin details, price history and favorites",
    version="1.0.0",
)


@app.get("/", response_model=dict[str, str])
async def root() -> dict[str, str]:
    """Health check endpoint.

    Returns:
        dict[str, str]: Health status information
    """
    return {"message": "Coin Ranking API is running", "status": "healthy"}


@app.get(
    "/coins",
    response_model=CoinListResponse,
    responses={422: {"model": ErrorResponse}},
)
async def list_coins(
    service: Annotated[CoinListService, Depends(get_coin_list_service)],
    offset: Annotated[int, Query(ge=0, lt=MAX_RECORDS)] = 0,
    limit: Annotated[int, Query(ge=1, le=MAX_RECORDS)] = PAGE_SIZE,
    time_period: TimePeriodQuery = TimePeriod.TWENTY_FOUR_HOURS,
    order_by: SortKeyQuery = None,
    order_direction: SortDirectionQuery = None,
) -> CoinListResponse | JSONResponse:
    """
    List coins by rank, optionally sorted by price or 24h change.

    Args:
        service: Coin list fetch service
        offset: Number of coins to skip
        limit: Page size
        time_period: Time window for change and sparkline
        order_by: Optional sort key
        order_direction: Optional sort direction

    Returns:
        CoinListResponse: The upstream list response, or 422 when the
            requested window reaches past the record cap
    """
    if offset + limit > MAX_RECORDS:
        return JSONResponse(
            status_code=422,
            content=ErrorResponse(
                error=ERROR_INVALID_RANGE,
                message=f"offset + limit must not exceed {MAX_RECORDS}",
            ).model_dump(),
        )
    return await service.fetch(
        coin_list_request(offset, limit, time_period, order_by, order_direction)
    )


@app.get(
    "/coins/{uuid}",
    response_model=CoinDetailResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_coin(
    uuid: CoinId,
    service: Annotated[CoinDetailService, Depends(get_coin_detail_service)],
    time_period: TimePeriodQuery = TimePeriod.TWENTY_FOUR_HOURS,
) -> CoinDetailResponse | JSONResponse:
    """Fetch details for one coin."""
    response = await service.fetch(coin_details_request(uuid, time_period))
    if response.data.coin is None:
        return JSONResponse(
            status_code=404,
            content=ErrorResponse(
                error=ERROR_COIN_NOT_FOUND, message=f"No details available for coin {uuid}"
            ).model_dump(),
        )
    return response


@app.get("/coins/{uuid}/history", response_model=ChartResponse)
async def get_coin_history(
    uuid: CoinId,
    service: Annotated[CoinPriceHistoryService, Depends(get_price_history_service)],
    time_period: TimePeriodQuery = TimePeriod.TWENTY_FOUR_HOURS,
) -> ChartResponse:
    """Fetch a coin's price history ordered for charting."""
    response = await service.fetch(coin_price_history_request(uuid, time_period))
    return ChartResponse(
        uuid=uuid,
        change=response.data.change,
        history=chart_points(response.data.history),
    )


@app.get("/favorites", response_model=list[FavoriteCoin])
async def list_favorites(
    handler: Annotated[FavoriteCoinHandler, Depends(get_favorite_handler)],
) -> list[FavoriteCoin]:
    """List favorite coins ordered by name."""
    controller = FavoriteCoinsController(handler)
    await controller.load()
    return controller.favorite_coins


@app.put("/favorites", response_model=FavoriteCoin)
async def save_favorite(
    coin: FavoriteCoin,
    storage: Annotated[FavoriteCoinStorage, Depends(get_favorite_storage)],
) -> FavoriteCoin:
    """Add a coin to favorites, replacing any row with the same uuid."""
    await storage.save(coin)
    return coin


@app.delete(
    "/favorites/{uuid}",
    status_code=204,
    responses={404: {"model": ErrorResponse}},
)
async def delete_favorite(
    uuid: CoinId,
    handler: Annotated[FavoriteCoinHandler, Depends(get_favorite_handler)],
) -> Response:
    """Remove a coin from favorites."""
    if not await handler.remove(uuid):
        return JSONResponse(
            status_code=404,
            content=ErrorResponse(
                error=ERROR_FAVORITE_NOT_FOUND, message=f"Coin {uuid} is not a favorite"
            ).model_dump(),
        )
    return Response(status_code=204)


def network_error_status(error: NetworkError) -> int:
    match error.kind:
        case NetworkErrorKind.TIMEOUT:
            return 504
        case NetworkErrorKind.NO_INTERNET:
            return 503
        case _:
            return 502


@app.exception_handler(RequestError)
async def request_error_handler(_: Request, exc: RequestError) -> JSONResponse:
    """Handle requests that could not be built."""
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(error=exc.kind.value, message=str(exc)).model_dump(),
    )


@app.exception_handler(NetworkError)
async def network_error_handler(_: Request, exc: NetworkError) -> JSONResponse:
    """Handle upstream failures.

    Args:
        exc: The network error raised by a fetch service

    Returns:
        JSONResponse: Error response with a gateway status code
    """
    logger.error(f"Upstream error: {exc!r}")
    return JSONResponse(
        status_code=network_error_status(exc),
        content=ErrorResponse(error=exc.kind.value, message=str(exc)).model_dump(),
    )


@app.exception_handler(StorageError)
async def storage_error_handler(_: Request, exc: StorageError) -> JSONResponse:
    """Handle favorites database failures."""
    logger.error(f"Storage error: {exc} ({exc.detail})")
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(error=ERROR_STORAGE, message=str(exc)).model_dump(),
    )


@app.exception_handler(404)
async def not_found_handler(_: Request, __: Exception) -> JSONResponse:
    """Handle 404 errors.

    Returns:
        JSONResponse: Error response in JSON format
    """
    return JSONResponse(
        status_code=404,
        content=ErrorResponse(
            error=ERROR_NOT_FOUND, message="Endpoint not found"
        ).model_dump(),
    )


@app.exception_handler(500)
async def internal_error_handler(_: Request, exc: Exception) -> JSONResponse:
    """Handle internal server errors.

    Args:
        exc: The exception that was raised

    Returns:
        JSONResponse: Error response in JSON format
    """
    logger.error(f"Internal server error: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            error=ERROR_INTERNAL_ERROR, message="An internal server error occurred"
        ).model_dump(),
    )


async def main() -> None:
    """Main entry point for the API server."""
    config = uvicorn.Config(
        app,
        host=api_settings.host,
        port=api_settings.port,
        log_level=api_settings.log_level.lower(),
    )
    server = uvicorn.Server(config)
    await server.serve()


if __name__ == "__main__":
    import asyncio

    asyncio.run(main())
