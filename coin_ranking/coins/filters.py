"""
Sort selection for the coin list.
"""

from .requests import SortDirection, SortKey


class CoinFilter:
    """Selected sort key and direction; both None means API default ordering."""

    def __init__(self) -> None:
        self.sort_key: SortKey | None = None
        self.sort_direction: SortDirection | None = None

    @property
    def is_active(self) -> bool:
        return self.sort_key is not None or self.sort_direction is not None

    def save(
        self, sort_key: SortKey | None, sort_direction: SortDirection | None
    ) -> None:
        self.sort_key = sort_key
        self.sort_direction = sort_direction

    def reset(self) -> None:
        self.sort_key = None
        self.sort_direction = None
