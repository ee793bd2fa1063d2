"""
Favorite coin handler and the favorites screen controller.
"""

import logging

from ..coins.models import CoinSummary
from .models import FavoriteCoin
from .storage import FavoriteCoinStorage

logger = logging.getLogger(__name__)


class FavoriteCoinHandler:
    """
    Read-through snapshot over the favorites storage.

    The storage owns the rows; ``favorite_coins`` is refreshed after every
    write and is never written to directly. StorageError propagates to callers.
    """

    def __init__(self, storage: FavoriteCoinStorage) -> None:
        self.storage = storage
        self._favorite_coins: frozenset[FavoriteCoin] = frozenset()

    @property
    def favorite_coins(self) -> frozenset[FavoriteCoin]:
        return self._favorite_coins

    async def refresh(self) -> None:
        self._favorite_coins = frozenset(await self.storage.fetch_all())

    def is_favorite(self, uuid: str) -> bool:
        return any(coin.uuid == uuid for coin in self._favorite_coins)

    async def toggle(self, coin: CoinSummary) -> bool:
        """Favorite or un-favorite a coin; returns the new favorite state."""
        if self.is_favorite(coin.uuid):
            await self.storage.remove(coin.uuid)
        else:
            await self.storage.save(FavoriteCoin.from_coin(coin))
        await self.refresh()
        return self.is_favorite(coin.uuid)

    async def remove(self, uuid: str) -> bool:
        removed = await self.storage.remove(uuid)
        await self.refresh()
        return removed


class FavoriteCoinsController:
    """State behind the favorites list: an ordered copy of the snapshot."""

    def __init__(self, handler: FavoriteCoinHandler) -> None:
        self.handler = handler
        self.favorite_coins: list[FavoriteCoin] = []

    async def load(self) -> None:
        await self.handler.refresh()
        self.favorite_coins = sorted(
            self.handler.favorite_coins, key=lambda coin: (coin.name.lower(), coin.uuid)
        )

    async def remove_at(self, index: int) -> None:
        if not 0 <= index < len(self.favorite_coins):
            logger.warning(f"Ignoring removal of favorite at index {index}")
            return
        coin = self.favorite_coins[index]
        await self.handler.remove(coin.uuid)
        del self.favorite_coins[index]
