"""
Persisted favorite coin model.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from ..coins.models import CoinSummary


class FavoriteCoin(BaseModel):
    """Projection of a coin kept in the favorites table."""

    model_config = ConfigDict(
        str_strip_whitespace=True,
        frozen=True,
    )

    uuid: Annotated[str, Field(min_length=1, description="Coin identifier")]
    symbol: Annotated[str, Field(description="Ticker symbol")]
    name: Annotated[str, Field(description="Display name")]
    icon_url: Annotated[str, Field(description="Icon URL")]

    @classmethod
    def from_coin(cls, coin: CoinSummary) -> "FavoriteCoin":
        return cls(
            uuid=coin.uuid,
            symbol=coin.symbol,
            name=coin.name,
            icon_url=coin.icon_url,
        )
