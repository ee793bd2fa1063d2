"""
Tests for coin details, price history and display formatting.
"""

import pytest

from coin_ranking.coins.detail import CoinDetailController, ViewState, chart_points
from coin_ranking.coins.models import CoinDetail, CoinDetailResponse, PriceHistoryPoint
from coin_ranking.coins.presenter import CoinPresenter
from coin_ranking.coins.requests import TimePeriod
from coin_ranking.coins.services import CoinDetailService, CoinPriceHistoryService
from coin_ranking.shared.errors import NetworkError
from coin_ranking.shared.formatting import format_large_number, formatted_value

from helpers import ScriptedTransport, load_fixture


@pytest.fixture
def bitcoin() -> CoinDetail:
    response = CoinDetailResponse.model_validate_json(load_fixture("coin_details"))
    return response.data.coin


def make_controller(detail_transport, history_transport) -> CoinDetailController:
    return CoinDetailController(
        "Qwsogvtv82FCd",
        CoinDetailService(detail_transport),
        CoinPriceHistoryService(history_transport),
    )


class TestCoinDetailController:
    """Test cases for CoinDetailController."""

    def test_initial_state(self):
        controller = make_controller(
            ScriptedTransport.ok("coin_details"), ScriptedTransport.ok("price_history")
        )
        assert controller.state == ViewState.LOADING
        assert controller.chart_data() == []

    @pytest.mark.asyncio
    async def test_fetch_coin_details_loaded(self):
        detail_transport = ScriptedTransport.ok("coin_details")
        controller = make_controller(
            detail_transport, ScriptedTransport.ok("price_history")
        )

        await controller.fetch_coin_details(TimePeriod.SEVEN_DAYS)

        assert controller.state == ViewState.LOADED
        assert controller.presenter.uuid == "Qwsogvtv82FCd"
        assert "timePeriod=7d" in detail_transport.requests[0].url

    @pytest.mark.asyncio
    async def test_fetch_coin_details_empty(self):
        controller = make_controller(
            ScriptedTransport.ok("coin_details_empty"),
            ScriptedTransport.ok("price_history"),
        )

        await controller.fetch_coin_details(TimePeriod.TWENTY_FOUR_HOURS)

        assert controller.state == ViewState.EMPTY
        assert controller.presenter is None

    @pytest.mark.asyncio
    async def test_fetch_coin_details_error(self):
        controller = make_controller(
            ScriptedTransport(NetworkError.server_error(500)),
            ScriptedTransport.ok("price_history"),
        )

        await controller.fetch_coin_details(TimePeriod.TWENTY_FOUR_HOURS)

        assert controller.state == ViewState.ERROR

    @pytest.mark.asyncio
    async def test_fetch_price_history_is_chronological(self):
        """Test that history comes back oldest first."""
        controller = make_controller(
            ScriptedTransport.ok("coin_details"), ScriptedTransport.ok("price_history")
        )

        await controller.fetch_price_history(TimePeriod.TWENTY_FOUR_HOURS)

        assert [p.timestamp for p in controller.history] == [1585954800, 1585958400]

    @pytest.mark.asyncio
    async def test_fetch_price_history_error(self):
        controller = make_controller(
            ScriptedTransport.ok("coin_details"),
            ScriptedTransport(NetworkError.timeout()),
        )

        await controller.fetch_price_history(TimePeriod.TWENTY_FOUR_HOURS)

        assert controller.history is None

    @pytest.mark.asyncio
    async def test_load_fetches_both(self):
        detail_transport = ScriptedTransport.ok("coin_details")
        history_transport = ScriptedTransport.ok("price_history")
        controller = make_controller(detail_transport, history_transport)

        await controller.load(TimePeriod.THIRTY_DAYS)

        assert controller.time_period == TimePeriod.THIRTY_DAYS
        assert controller.state == ViewState.LOADED
        assert len(controller.chart_data()) == 2
        assert "timePeriod=30d" in detail_transport.requests[0].url
        assert "timePeriod=30d" in history_transport.requests[0].url

    @pytest.mark.asyncio
    async def test_chart_data_empty_when_details_failed(self):
        controller = make_controller(
            ScriptedTransport(NetworkError.no_internet()),
            ScriptedTransport.ok("price_history"),
        )

        await controller.load()

        assert controller.state == ViewState.ERROR
        assert controller.history is not None
        assert controller.chart_data() == []


class TestChartPoints:
    def test_drops_missing_prices_and_sorts(self):
        history = [
            PriceHistoryPoint(price="3", timestamp=30),
            PriceHistoryPoint(price=None, timestamp=20),
            PriceHistoryPoint(price="1", timestamp=10),
        ]
        assert [p.timestamp for p in chart_points(history)] == [10, 30]

    def test_empty_history(self):
        assert chart_points([]) == []


class TestCoinPresenter:
    """Test cases for CoinPresenter."""

    def test_identity(self, bitcoin):
        presenter = CoinPresenter(bitcoin)
        assert presenter.uuid == "Qwsogvtv82FCd"
        assert presenter.icon_url == "https://cdn.coinranking.com/Sy33Krudb/btc.svg"
        assert presenter.name == "Bitcoin"
        assert presenter.symbol == "BTC"
        assert presenter.web_url == "https://bitcoin.org"

    def test_formatted_price(self, bitcoin):
        assert CoinPresenter(bitcoin).formatted_price == "$ 9371.00"

    def test_negative_change(self, bitcoin):
        presenter = CoinPresenter(bitcoin)
        assert presenter.is_negative_change is True
        assert presenter.change_text == "▼ -0.52 %"

    def test_positive_change(self):
        presenter = CoinPresenter(CoinDetail(uuid="x", change="1.25"))
        assert presenter.is_negative_change is False
        assert presenter.change_text == "▲ 1.25 %"

    def test_large_numbers(self, bitcoin):
        presenter = CoinPresenter(bitcoin)
        assert presenter.formatted_market_cap == "$ 172.29B"
        assert presenter.formatted_24h_volume == "$ 42.19B"
        assert presenter.formatted_all_time_high == "$ 19500.47"
        assert presenter.formatted_circulating_supply == "$ 18.38M"
        assert presenter.formatted_total_supply == "$ 18.38M"
        assert presenter.formatted_max_supply == "$ 21.00M"

    def test_counts_and_description(self, bitcoin):
        presenter = CoinPresenter(bitcoin)
        assert presenter.rank == "1"
        assert presenter.number_of_exchanges == "190"
        assert (
            presenter.description
            == "Bitcoin is the first decentralized digital currency."
        )

    def test_missing_values(self):
        presenter = CoinPresenter(CoinDetail(uuid="bare"))
        assert presenter.name == "N/A"
        assert presenter.symbol == "N/A"
        assert presenter.formatted_price == "N/A"
        assert presenter.change_text == "--"
        assert presenter.formatted_market_cap == "N/A"
        assert presenter.formatted_all_time_high == "N/A"
        assert presenter.formatted_max_supply == "N/A"
        assert presenter.rank == "N/A"
        assert presenter.number_of_exchanges == "N/A"
        assert presenter.description == "N/A"
        assert presenter.web_url is None


class TestFormatting:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (0.5, "$ 0.50000000"),
            (0.00001234, "$ 0.00001234"),
            (1, "$ 1.00"),
            (999_999.994, "$ 999999.99"),
            (1_000_000, "$ 1.00M"),
            (2_500_000_000, "$ 2.50B"),
            (3_312_345_678_901, "$ 3.31T"),
        ],
    )
    def test_format_large_number(self, value, expected):
        assert format_large_number(value) == expected

    @pytest.mark.parametrize("text", [None, "", "abc", "nan", "inf"])
    def test_formatted_value_not_available(self, text):
        assert formatted_value(text) == "N/A"

    def test_formatted_value_parses_decimal_strings(self):
        assert formatted_value("172289235634") == "$ 172.29B"
