import itertools
from unittest.mock import patch

import pytest
from brokerage_calculator.config import (
    ChargeRule,
    ChargeType,
    Exchange,
    RateTable,
    Segment,
    RATE_TABLE,
)
from brokerage_calculator.exceptions import (
    ExchangeNotSupported,
    UnknownExchange,
    UnknownSegment,
)
from brokerage_calculator.models import Trade
from brokerage_calculator.services import ChargesService
from brokerage_calculator.utils import evaluate_rule


def test_intraday_breakdown(service):
    # Buy 10 @ 100, sell @ 110 on NSE
    result = service.breakdown(Trade(100, 110, 10, "EQ_I", "NSE"))

    assert result.turnover == 2100
    assert result.brokerage == 0.63    # 0.30 + 0.33
    assert result.stt == 0.28          # 0.025% of 1100
    assert result.transaction == 0.07  # 0.00325% of 2100
    assert result.gst == 0.13          # 18% of 0.70
    assert result.sebi == 0.0
    assert result.stamp == 0.03        # 0.003% of 1000
    assert result.dp == 0.0
    assert result.total == 1.14
    assert result.gross_pnl == 100.0
    assert result.net_pnl == 98.86
    assert result.breakeven_points == 0.11


def test_total_charges_matches_breakdown(service):
    assert service.total_charges(100, 110, 10, Segment.EQUITY_INTRADAY, Exchange.NSE) == 1.14


def test_delivery_breakdown(service):
    result = service.breakdown(Trade(100, 100, 1, "EQ_D", "NSE"))

    assert result.brokerage == 0.0
    assert result.stt == 0.2           # 0.1% on both legs
    assert result.transaction == 0.01
    assert result.gst == 0.0
    assert result.stamp == 0.02        # 0.015% of 100
    assert result.dp == 15.93
    assert result.total == 16.16


def test_delivery_on_bse(service):
    assert service.transaction(200, "EQ_D", "BSE") == 0.01
    assert service.total_charges(100, 100, 1, "EQ_D", "BSE") == 16.16


def test_futures_breakdown(service):
    result = service.breakdown(Trade(20_000, 20_100, 50, "FUT", "NSE"))

    assert result.brokerage == 40.0    # both legs hit the 20 cap
    assert result.stt == 100.5         # 0.01% of sell leg
    assert result.transaction == 38.1
    assert result.gst == 14.06
    assert result.sebi == 1.0
    assert result.stamp == 20.0
    assert result.total == 213.66


def test_options_breakdown(service):
    result = service.breakdown(Trade(100, 150, 50, "OPT", "NSE"))

    assert result.brokerage == 40.0
    assert result.stt == 3.75
    assert result.transaction == 6.25
    assert result.gst == 8.33          # 18% of 46.25 = 8.325
    assert result.sebi == 0.01
    assert result.stamp == 0.15
    assert result.total == 58.49


@pytest.mark.parametrize("segment", ["FUT", "OPT"])
def test_fno_on_bse_is_not_supported(service, segment):
    with pytest.raises(ExchangeNotSupported):
        service.total_charges(100, 110, 10, segment, "BSE")


def test_unknown_segment_fails_before_any_charge(service):
    with patch.object(ChargesService, "brokerage") as brokerage, \
            patch.object(ChargesService, "turnover") as turnover:
        with pytest.raises(UnknownSegment):
            service.total_charges(100, 110, 10, "EQUITY", "NSE")

    brokerage.assert_not_called()
    turnover.assert_not_called()


def test_unknown_exchange_fails_before_any_charge(service):
    with patch.object(ChargesService, "brokerage") as brokerage:
        with pytest.raises(UnknownExchange):
            service.total_charges(100, 110, 10, "EQ_I", "MCX")

    brokerage.assert_not_called()


def test_brokerage_is_charged_per_leg(service):
    # buy leg 60000 -> 18.0, sell leg 70000 -> capped at 20
    assert service.brokerage(60_000, 70_000, 1, "EQ_I", "NSE") == 38.0
    assert service.brokerage(60_000, 70_000, 1, "FUT", "NSE") == 38.0


def test_options_brokerage_floor(service):
    assert service.brokerage(0, 0, 0, "OPT", "NSE") == 40.0
    assert service.brokerage(500, 600, 1000, "OPT", "NSE") == 40.0


def test_stt_legs(service):
    # sell leg only outside delivery
    assert service.stt(100, 110, 10, "EQ_I", "NSE") == 0.28
    assert service.stt(1000, 0, 10, "FUT", "NSE") == 0.0
    # both legs for delivery
    assert service.stt(1000, 0, 10, "EQ_D", "NSE") == 10.0


def test_gst_compounds_brokerage_and_transaction(service):
    rule = RATE_TABLE.lookup(Segment.FUTURES, ChargeType.GST)
    for brokerage, transaction in [(0.63, 0.07), (40, 38.1), (0, 0), (20, 0.01)]:
        assert service.gst(brokerage, transaction, "FUT", "NSE") == \
            evaluate_rule(rule, "NSE", brokerage + transaction)


def test_sebi(service):
    assert service.sebi(2100) == 0.0
    assert service.sebi(10_000_000) == 5.0
    assert service.sebi(12_500) == 0.01


def test_stamp_uses_buy_leg_only(service):
    assert service.stamp(100, 10, "EQ_I", "NSE") == 0.03
    assert service.stamp(0, 10, "EQ_I", "NSE") == 0.0


def test_dp(service):
    assert service.dp("EQ_D") == 15.93
    for segment in ["EQ_I", "FUT", "OPT"]:
        assert service.dp(segment) == 0


def test_turnover_is_symmetric(service):
    assert service.turnover(100, 110, 10) == service.turnover(110, 100, 10)


@pytest.mark.parametrize("segment,exchange", [
    (s, e) for s, e in itertools.product(Segment, Exchange)
    if e in RATE_TABLE.exchanges_for(s)
])
def test_total_is_non_negative(service, segment, exchange):
    for buy, sell, quantity in [(0, 0, 0), (100, 110, 10), (2500.5, 2300.25, 75), (1, 0, 1)]:
        total = service.total_charges(buy, sell, quantity, segment, exchange)
        assert total >= 0
        assert total == total  # not NaN


def test_custom_rate_table():
    rules = {segment: {c: RATE_TABLE.lookup(segment, c) for c in RateTable.REQUIRED}
             for segment in Segment}
    rules[Segment.EQUITY_DELIVERY][ChargeType.BROKERAGE] = ChargeRule.capped(0.1, 20)
    service = ChargesService(rate_table=RateTable(rules))

    assert service.brokerage(100, 100, 10, "EQ_D", "NSE") == 2.0
    assert service.total_charges(100, 100, 1, "EQ_D", "NSE") == pytest.approx(16.4, abs=0.01)
