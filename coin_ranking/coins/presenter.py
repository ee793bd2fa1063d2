"""
Display values for a single coin.
"""

from ..shared.formatting import NOT_AVAILABLE, formatted_value
from .models import CoinDetail


class CoinPresenter:
    """Formats a CoinDetail for display. Missing values render as N/A."""

    def __init__(self, coin: CoinDetail) -> None:
        self.coin = coin

    @property
    def uuid(self) -> str:
        return self.coin.uuid

    @property
    def icon_url(self) -> str | None:
        return self.coin.icon_url

    @property
    def name(self) -> str:
        return self.coin.name or NOT_AVAILABLE

    @property
    def symbol(self) -> str:
        return self.coin.symbol or NOT_AVAILABLE

    @property
    def formatted_price(self) -> str:
        try:
            value = float(self.coin.price or "")
        except ValueError:
            return NOT_AVAILABLE
        return f"$ {value:.2f}"

    @property
    def is_negative_change(self) -> bool:
        return (self.coin.change or "").startswith("-")

    @property
    def change_text(self) -> str:
        if self.coin.change is None:
            return "--"
        arrow = "▼" if self.is_negative_change else "▲"
        return f"{arrow} {self.coin.change} %"

    @property
    def formatted_market_cap(self) -> str:
        return formatted_value(self.coin.market_cap)

    @property
    def formatted_24h_volume(self) -> str:
        return formatted_value(self.coin.volume_24h)

    @property
    def formatted_all_time_high(self) -> str:
        ath = self.coin.all_time_high
        return formatted_value(ath.price if ath else None)

    @property
    def rank(self) -> str:
        return NOT_AVAILABLE if self.coin.rank is None else str(self.coin.rank)

    @property
    def formatted_circulating_supply(self) -> str:
        supply = self.coin.supply
        return formatted_value(supply.circulating if supply else None)

    @property
    def formatted_total_supply(self) -> str:
        supply = self.coin.supply
        return formatted_value(supply.total if supply else None)

    @property
    def formatted_max_supply(self) -> str:
        supply = self.coin.supply
        return formatted_value(supply.max if supply else None)

    @property
    def number_of_exchanges(self) -> str:
        count = self.coin.number_of_exchanges
        return NOT_AVAILABLE if count is None else str(count)

    @property
    def description(self) -> str:
        if self.coin.description is None:
            return NOT_AVAILABLE
        return self.coin.description.strip()

    @property
    def web_url(self) -> str | None:
        return self.coin.website_url
