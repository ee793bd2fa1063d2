"""
Per-resource fetch services.
"""

from ..network.service import FetchService
from .models import CoinDetailResponse, CoinListResponse, PriceHistoryResponse


class CoinListService(FetchService[CoinListResponse]):
    response_model = CoinListResponse


class CoinDetailService(FetchService[CoinDetailResponse]):
    response_model = CoinDetailResponse


class CoinPriceHistoryService(FetchService[PriceHistoryResponse]):
    response_model = PriceHistoryResponse
