"""
Response models for the Coinranking API.

Prices, market caps, volumes and supplies are kept as decimal strings: the
values exceed float precision and are only ever formatted, never computed.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field


class CoinrankingModel(BaseModel):
    """Base model accepting both API aliases and field names."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class CoinSummary(CoinrankingModel):
    """A coin as returned by the ranking list."""

    uuid: Annotated[str, Field(description="Stable coin identifier")]
    symbol: str
    name: str
    color: str | None = None
    icon_url: Annotated[str, Field(alias="iconUrl")]
    market_cap: Annotated[str, Field(alias="marketCap")]
    price: str
    listed_at: Annotated[int | None, Field(alias="listedAt")] = None
    tier: int | None = None
    change: str | None = None
    rank: int
    sparkline: list[str | None]
    low_volume: Annotated[bool | None, Field(alias="lowVolume")] = None
    coinranking_url: Annotated[str | None, Field(alias="coinrankingUrl")] = None
    volume_24h: Annotated[str, Field(alias="24hVolume")]
    btc_price: Annotated[str | None, Field(alias="btcPrice")] = None
    contract_addresses: Annotated[
        list[str], Field(alias="contractAddresses", default_factory=list)
    ]


class CoinStats(CoinrankingModel):
    total: int
    total_coins: Annotated[int, Field(alias="totalCoins")]
    total_markets: Annotated[int, Field(alias="totalMarkets")]
    total_exchanges: Annotated[int, Field(alias="totalExchanges")]
    total_market_cap: Annotated[str, Field(alias="totalMarketCap")]
    total_24h_volume: Annotated[str, Field(alias="total24hVolume")]


class CoinListData(CoinrankingModel):
    stats: CoinStats
    coins: list[CoinSummary]


class CoinListResponse(CoinrankingModel):
    status: str
    data: CoinListData


class AllTimeHigh(CoinrankingModel):
    price: str | None = None
    timestamp: int | None = None


class LinkDetail(CoinrankingModel):
    name: str | None = None
    url: str | None = None
    type: str | None = None


class Notice(CoinrankingModel):
    type: str | None = None
    value: str | None = None


class Supply(CoinrankingModel):
    supply_at: Annotated[int | None, Field(alias="supplyAt")] = None
    circulating: str | None = None
    total: str | None = None
    max: str | None = None


class CoinDetail(CoinrankingModel):
    """Full coin details; the API may omit anything but the uuid."""

    uuid: str
    symbol: str | None = None
    name: str | None = None
    description: str | None = None
    color: str | None = None
    icon_url: Annotated[str | None, Field(alias="iconUrl")] = None
    website_url: Annotated[str | None, Field(alias="websiteUrl")] = None
    links: list[LinkDetail] | None = None
    supply: Supply | None = None
    volume_24h: Annotated[str | None, Field(alias="24hVolume")] = None
    market_cap: Annotated[str | None, Field(alias="marketCap")] = None
    fully_diluted_market_cap: Annotated[
        str | None, Field(alias="fullyDilutedMarketCap")
    ] = None
    price: str | None = None
    btc_price: Annotated[str | None, Field(alias="btcPrice")] = None
    price_at: Annotated[int | None, Field(alias="priceAt")] = None
    change: str | None = None
    rank: int | None = None
    number_of_markets: Annotated[int | None, Field(alias="numberOfMarkets")] = None
    number_of_exchanges: Annotated[int | None, Field(alias="numberOfExchanges")] = (
        None
    )
    sparkline: list[str | None] | None = None
    all_time_high: Annotated[AllTimeHigh | None, Field(alias="allTimeHigh")] = None
    coinranking_url: Annotated[str | None, Field(alias="coinrankingUrl")] = None
    listed_at: Annotated[int | None, Field(alias="listedAt")] = None
    notices: list[Notice] | None = None
    contract_addresses: Annotated[
        list[str] | None, Field(alias="contractAddresses")
    ] = None
    tags: list[str] | None = None


class CoinDetailData(CoinrankingModel):
    coin: CoinDetail | None = None


class CoinDetailResponse(CoinrankingModel):
    status: str
    data: CoinDetailData


class PriceHistoryPoint(CoinrankingModel):
    price: str | None = None
    timestamp: Annotated[int, Field(description="Epoch seconds")]


class PriceHistoryData(CoinrankingModel):
    change: str | None = None
    history: list[PriceHistoryPoint]


class PriceHistoryResponse(CoinrankingModel):
    status: str
    data: PriceHistoryData
