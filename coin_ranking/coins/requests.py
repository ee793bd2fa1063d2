"""
Request descriptors for the three Coinranking endpoints.
"""

from enum import StrEnum

from ..network.request import HTTPMethod, RequestDescriptor
from ..network.settings import network_settings

ACCESS_TOKEN_HEADER = "x-access-token"


class TimePeriod(StrEnum):
    """Time window used for change percentages, sparklines and history."""

    ONE_HOUR = "1h"
    TWENTY_FOUR_HOURS = "24h"
    SEVEN_DAYS = "7d"
    THIRTY_DAYS = "30d"
    THREE_MONTHS = "3m"
    ONE_YEAR = "1y"


class SortKey(StrEnum):
    PRICE = "price"
    CHANGE = "change"

    @property
    def label(self) -> str:
        return {SortKey.PRICE: "Price", SortKey.CHANGE: "24-hour Performance"}[self]


class SortDirection(StrEnum):
    ASCENDING = "asc"
    DESCENDING = "desc"

    @property
    def label(self) -> str:
        return {
            SortDirection.ASCENDING: "Ascending",
            SortDirection.DESCENDING: "Descending",
        }[self]


def default_headers() -> dict[str, str]:
    """Headers sent with every Coinranking request."""
    if not network_settings.access_token:
        return {}
    return {ACCESS_TOKEN_HEADER: network_settings.access_token}


def coin_list_request(
    offset: int,
    limit: int,
    time_period: TimePeriod = TimePeriod.TWENTY_FOUR_HOURS,
    order_by: SortKey | None = None,
    order_direction: SortDirection | None = None,
) -> RequestDescriptor:
    params = {
        "offset": str(offset),
        "limit": str(limit),
        "timePeriod": time_period.value,
    }
    if order_by is not None:
        params["orderBy"] = order_by.value
    if order_direction is not None:
        params["orderDirection"] = order_direction.value

    return RequestDescriptor(
        path="/coins",
        method=HTTPMethod.GET,
        headers=default_headers(),
        query_params=params,
    )


def coin_details_request(
    uuid: str, time_period: TimePeriod = TimePeriod.TWENTY_FOUR_HOURS
) -> RequestDescriptor:
    return RequestDescriptor(
        path=f"/coin/{uuid}",
        method=HTTPMethod.GET,
        headers=default_headers(),
        query_params={"timePeriod": time_period.value},
    )


def coin_price_history_request(
    uuid: str, time_period: TimePeriod = TimePeriod.TWENTY_FOUR_HOURS
) -> RequestDescriptor:
    return RequestDescriptor(
        path=f"/coin/{uuid}/history",
        method=HTTPMethod.GET,
        headers=default_headers(),
        query_params={"timePeriod": time_period.value},
    )
