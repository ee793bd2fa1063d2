"""
Storage for favorite coins using async SQLite.
"""

import logging

import aiosqlite

from ..shared.errors import StorageError
from .models import FavoriteCoin
from .settings import storage_settings

logger = logging.getLogger(__name__)


class FavoriteCoinStorage:
    """Async SQLite-based storage for favorite coins, keyed by uuid."""

    def __init__(self, database_path: str | None = None):
        """Initialize the favorites storage."""
        self.database_path = database_path or storage_settings.database_path
        self._connection: aiosqlite.Connection | None = None

    async def initialize(self) -> None:
        """Initialize the database connection and create tables."""
        await self._get_connection()
        await self._create_tables()

    async def _get_connection(self) -> aiosqlite.Connection:
        """Get or create async database connection."""
        if self._connection is None:
            try:
                self._connection = await aiosqlite.connect(self.database_path)
            except aiosqlite.Error as e:
                raise StorageError(
                    f"Cannot open favorites database at {self.database_path}",
                    detail=str(e),
                ) from e
            self._connection.row_factory = aiosqlite.Row
        return self._connection

    async def _create_tables(self) -> None:
        """Create the favorite_coins table if it doesn't exist."""
        connection = await self._get_connection()

        try:
            await connection.execute("""
                CREATE TABLE IF NOT EXISTS favorite_coins (
                    uuid TEXT PRIMARY KEY,
                    symbol TEXT NOT NULL,
                    name TEXT NOT NULL,
                    icon_url TEXT NOT NULL
                )
            """)
            await connection.commit()
        except aiosqlite.Error as e:
            raise StorageError("Failed to create favorites table", detail=str(e)) from e

    async def fetch_all(self) -> set[FavoriteCoin]:
        """Return every stored favorite."""
        connection = await self._get_connection()

        try:
            async with connection.execute(
                "SELECT uuid, symbol, name, icon_url FROM favorite_coins"
            ) as cursor:
                rows = await cursor.fetchall()
        except aiosqlite.Error as e:
            raise StorageError("Failed to read favorite coins", detail=str(e)) from e

        return {
            FavoriteCoin(
                uuid=row["uuid"],
                symbol=row["symbol"],
                name=row["name"],
                icon_url=row["icon_url"],
            )
            for row in rows
        }

    async def save(self, coin: FavoriteCoin) -> None:
        """Insert a favorite, or overwrite the row with the same uuid."""
        connection = await self._get_connection()

        try:
            await connection.execute(
                """
                INSERT INTO favorite_coins (uuid, symbol, name, icon_url)
                VALUES (?, ?, ?, ?)
                ON CONFLICT(uuid) DO UPDATE SET
                    symbol = excluded.symbol,
                    name = excluded.name,
                    icon_url = excluded.icon_url
            """,
                (coin.uuid, coin.symbol, coin.name, coin.icon_url),
            )
            await connection.commit()
        except aiosqlite.Error as e:
            raise StorageError(
                f"Failed to save favorite coin {coin.uuid}", detail=str(e)
            ) from e

        logger.info(f"Saved favorite coin {coin.symbol} ({coin.uuid})")

    async def remove(self, uuid: str) -> bool:
        """
        Delete the favorite with the given uuid.

        Returns:
            True if a row existed and was deleted
        """
        connection = await self._get_connection()

        try:
            async with connection.execute(
                "DELETE FROM favorite_coins WHERE uuid = ?", (uuid,)
            ) as cursor:
                deleted_count = cursor.rowcount
            await connection.commit()
        except aiosqlite.Error as e:
            raise StorageError(
                f"Failed to remove favorite coin {uuid}", detail=str(e)
            ) from e

        if deleted_count > 0:
            logger.info(f"Removed favorite coin {uuid}")
        return deleted_count > 0

    async def close(self) -> None:
        """Close the database connection."""
        if self._connection:
            await self._connection.close()
            self._connection = None
