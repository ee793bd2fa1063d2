"""
Pagination and filter state for the coin ranking list.
"""

import logging
from typing import Final

from ..favorites.handler import FavoriteCoinHandler
from ..network.request import RequestDescriptor
from ..shared.errors import AppError
from .filters import CoinFilter
from .models import CoinSummary
from .requests import SortDirection, SortKey, TimePeriod, coin_list_request
from .services import CoinListService

PAGE_SIZE: Final[int] = 20
MAX_RECORDS: Final[int] = 100  # never page past 5 pages of 20

logger = logging.getLogger(__name__)


class CoinListController:
    """
    Loads the coin list page by page.

    ``fetch_coins`` is guarded by ``is_fetching``: a call made while a page is
    in flight returns immediately without queueing.
    """

    def __init__(
        self,
        service: CoinListService,
        favorites: FavoriteCoinHandler,
        time_period: TimePeriod = TimePeriod.TWENTY_FOUR_HOURS,
    ) -> None:
        self.service = service
        self.favorites = favorites
        self.time_period = time_period
        self.coin_filter = CoinFilter()
        self.last_error: AppError | None = None
        self._coins: list[CoinSummary] = []
        self._page_offset = 0
        self._is_fetching = False
        # bumped on every filter change; older responses are dropped
        self._generation = 0

    @property
    def coins(self) -> list[CoinSummary]:
        return list(self._coins)

    @property
    def page_offset(self) -> int:
        return self._page_offset

    @property
    def is_fetching(self) -> bool:
        return self._is_fetching

    @property
    def should_prefetch_more(self) -> bool:
        return len(self._coins) < MAX_RECORDS

    def build_request(self) -> RequestDescriptor:
        return coin_list_request(
            offset=self._page_offset * PAGE_SIZE,
            limit=PAGE_SIZE,
            time_period=self.time_period,
            order_by=self.coin_filter.sort_key,
            order_direction=self.coin_filter.sort_direction,
        )

    async def fetch_coins(self) -> None:
        """Fetch the next page and append it to the loaded coins.

        A page requested before a filter change is discarded when it lands,
        and the first page for the new filter is fetched in its place.
        """
        if self._is_fetching:
            return

        self._is_fetching = True
        generation = self._generation
        try:
            response = await self.service.fetch(self.build_request())
        except AppError as e:
            if generation == self._generation:
                logger.error(f"Error fetching coins: {e}")
                self.last_error = e
                if self._page_offset == 0:
                    self._coins = []
        else:
            if generation == self._generation:
                self._coins.extend(response.data.coins)
                self._page_offset += 1
                self.last_error = None
                logger.debug(
                    f"Loaded page {self._page_offset} ({len(self._coins)} coins total)"
                )
        finally:
            self._is_fetching = False

        if generation != self._generation:
            logger.debug("Discarded a page requested before the filter changed")
            await self.fetch_coins()

    async def fetch_more_coins(self) -> None:
        await self.fetch_coins()

    async def apply_filter(
        self,
        sort_key: SortKey | None = None,
        sort_direction: SortDirection | None = None,
    ) -> None:
        self.coin_filter.save(sort_key, sort_direction)
        await self._restart()

    async def reset_filter(self) -> None:
        self.coin_filter.reset()
        await self._restart()

    async def _restart(self) -> None:
        self._generation += 1
        self._page_offset = 0
        self._coins = []
        await self.fetch_coins()

    async def toggle_favorite(self, index: int) -> bool:
        return await self.favorites.toggle(self._coins[index])

    def is_favorite(self, index: int) -> bool:
        return self.favorites.is_favorite(self._coins[index].uuid)
