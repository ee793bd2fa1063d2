"""
Load state for a single coin's details and price chart.
"""

import asyncio
import logging
from enum import StrEnum

from ..shared.errors import AppError
from .models import PriceHistoryPoint
from .presenter import CoinPresenter
from .requests import TimePeriod, coin_details_request, coin_price_history_request
from .services import CoinDetailService, CoinPriceHistoryService

logger = logging.getLogger(__name__)


class ViewState(StrEnum):
    LOADING = "loading"
    LOADED = "loaded"
    EMPTY = "empty"
    ERROR = "error"


def chart_points(history: list[PriceHistoryPoint]) -> list[PriceHistoryPoint]:
    """Drop points without a price and order the rest oldest first."""
    return sorted(
        (point for point in history if point.price is not None),
        key=lambda point: point.timestamp,
    )


class CoinDetailController:
    """Fetches details and price history for one coin."""

    def __init__(
        self,
        coin_id: str,
        detail_service: CoinDetailService,
        history_service: CoinPriceHistoryService,
    ) -> None:
        self.coin_id = coin_id
        self.detail_service = detail_service
        self.history_service = history_service
        self.state = ViewState.LOADING
        self.presenter: CoinPresenter | None = None
        self.history: list[PriceHistoryPoint] | None = None
        self.time_period = TimePeriod.TWENTY_FOUR_HOURS

    async def fetch_coin_details(self, time_period: TimePeriod) -> None:
        self.state = ViewState.LOADING
        try:
            response = await self.detail_service.fetch(
                coin_details_request(self.coin_id, time_period)
            )
        except AppError as e:
            logger.error(f"Error fetching coin details for {self.coin_id}: {e}")
            self.presenter = None
            self.state = ViewState.ERROR
            return

        if response.data.coin is None:
            self.presenter = None
            self.state = ViewState.EMPTY
        else:
            self.presenter = CoinPresenter(response.data.coin)
            self.state = ViewState.LOADED

    async def fetch_price_history(self, time_period: TimePeriod) -> None:
        try:
            response = await self.history_service.fetch(
                coin_price_history_request(self.coin_id, time_period)
            )
        except AppError as e:
            logger.error(f"Error fetching price history for {self.coin_id}: {e}")
            self.history = None
            return

        self.history = chart_points(response.data.history)

    async def load(self, time_period: TimePeriod | None = None) -> None:
        """Fetch details and history together for the selected period."""
        if time_period is not None:
            self.time_period = time_period

        async with asyncio.TaskGroup() as tg:
            tg.create_task(self.fetch_coin_details(self.time_period))
            tg.create_task(self.fetch_price_history(self.time_period))

    def chart_data(self) -> list[PriceHistoryPoint]:
        if self.state is not ViewState.LOADED or self.history is None:
            return []
        return list(self.history)
