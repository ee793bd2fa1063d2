"""
Main entrypoint for the Coin Ranking application.
Usage: python run.py [api|list]
"""

import asyncio
import logging
import os
import sys
from pathlib import Path

project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

USAGE = """Usage: python run.py [api|list]
  api   - Start the Coin Ranking API
  list  - Print the top coins, marking favorites"""


def setup_logging() -> None:
    """
    Set up consistent logging configuration for the application.
    Uses environment variables for configuration.
    """
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    log_format = os.getenv(
        "LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    log_file = os.getenv("LOG_FILE", "coin_ranking.log")
    log_to_file = os.getenv("LOG_TO_FILE", "true").lower() == "true"

    numeric_level = getattr(logging, log_level, logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_to_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path))

    logging.basicConfig(
        level=numeric_level,
        format=log_format,
        handlers=handlers,
        force=True,  # Override any existing configuration
    )


logger = logging.getLogger(__name__)


async def print_top_coins() -> None:
    """Load the first page of the ranking and print it."""
    from coin_ranking.coins.listing import CoinListController
    from coin_ranking.coins.services import CoinListService
    from coin_ranking.favorites.handler import FavoriteCoinHandler
    from coin_ranking.favorites.storage import FavoriteCoinStorage
    from coin_ranking.shared.formatting import formatted_value

    storage = FavoriteCoinStorage()
    await storage.initialize()
    try:
        favorites = FavoriteCoinHandler(storage)
        await favorites.refresh()

        controller = CoinListController(CoinListService(), favorites)
        await controller.fetch_coins()
        if controller.last_error is not None:
            print(f"Could not load coins: {controller.last_error}")
            sys.exit(1)

        for index, coin in enumerate(controller.coins):
            marker = "*" if controller.is_favorite(index) else " "
            print(
                f"{marker} {coin.rank:>3}  {coin.symbol:<8} {coin.name:<24} "
                f"{formatted_value(coin.price):>16}  {coin.change or '--'} %"
            )
    finally:
        await storage.close()


async def main():
    if len(sys.argv) != 2:
        print(USAGE)
        sys.exit(1)

    command = sys.argv[1].lower()

    setup_logging()

    if command == "api":
        from coin_ranking.api.service import main as run_service

        logger.info("Starting API service...")
        await run_service()
    elif command == "list":
        await print_top_coins()
    else:
        print(f"Unknown command: {command}")
        print(USAGE)
        sys.exit(1)


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("\nShutdown requested by user")
        sys.exit(0)
    except Exception as e:
        print(f"Application failed: {e}")
        sys.exit(1)
