"""
Test configuration for the coin ranking tests.
"""

import sys
from pathlib import Path

import pytest
import pytest_asyncio

# Add project root to path before importing our modules
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Import our modules after path setup
from coin_ranking.coins.models import CoinListResponse  # noqa: E402
from coin_ranking.favorites.handler import FavoriteCoinHandler  # noqa: E402
from coin_ranking.favorites.models import FavoriteCoin  # noqa: E402
from coin_ranking.favorites.storage import FavoriteCoinStorage  # noqa: E402
from helpers import load_fixture  # noqa: E402


@pytest_asyncio.fixture
async def temp_storage(tmp_path):
    """Create a temporary favorites storage for testing."""
    storage = FavoriteCoinStorage(str(tmp_path / "favorites.db"))
    await storage.initialize()
    try:
        yield storage
    finally:
        await storage.close()


@pytest_asyncio.fixture
async def favorite_handler(temp_storage):
    """Favorites handler over the temporary storage."""
    handler = FavoriteCoinHandler(temp_storage)
    await handler.refresh()
    return handler


@pytest.fixture
def coin_list_response() -> CoinListResponse:
    return CoinListResponse.model_validate_json(load_fixture("coins"))


@pytest.fixture
def sample_favorites():
    """Provide sample favorites for testing."""
    return [
        FavoriteCoin(
            uuid="Qwsogvtv82FCd",
            symbol="BTC",
            name="Bitcoin",
            icon_url="https://cdn.coinranking.com/Sy33Krudb/btc.svg",
        ),
        FavoriteCoin(
            uuid="razxDUgYGNAdQ",
            symbol="ETH",
            name="Ethereum",
            icon_url="https://cdn.coinranking.com/rk4RKHOuW/eth.svg",
        ),
        FavoriteCoin(
            uuid="HIVsRcGKkPFtW",
            symbol="USDT",
            name="Tether USD",
            icon_url="https://cdn.coinranking.com/mgHqwlCLj/usdt.svg",
        ),
    ]
