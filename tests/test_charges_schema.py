import pytest
from marshmallow import ValidationError

from brokerage_calculator.schemas import (
    GSTQuerySchema,
    SegmentQuerySchema,
    TradeQuerySchema,
    TurnoverQuerySchema,
)


def test_trade_query_schema_loads_strings(intraday_trade):
    raw = {key: str(value) for key, value in intraday_trade.items()}
    data = TradeQuerySchema().load(raw)

    assert data == {
        "buy": 100.0,
        "sell": 110.0,
        "quantity": 10.0,
        "segment": "EQ_I",
        "exchange": "NSE",
    }


def test_trade_query_schema_requires_all_fields():
    with pytest.raises(ValidationError) as exc_info:
        TradeQuerySchema().load({"buy": "100"})

    assert set(exc_info.value.messages) == {"sell", "quantity", "segment", "exchange"}


@pytest.mark.parametrize("field,value", [
    ("segment", "eq_i"),
    ("segment", "EQUITY"),
    ("exchange", "nse"),
    ("exchange", "MCX"),
    ("buy", "-1"),
    ("quantity", "-10"),
    ("sell", "abc"),
])
def test_trade_query_schema_rejects_invalid(intraday_trade, field, value):
    raw = dict(intraday_trade, **{field: value})
    with pytest.raises(ValidationError) as exc_info:
        TradeQuerySchema().load(raw)

    assert field in exc_info.value.messages


def test_turnover_query_schema_rejects_unknown_fields():
    with pytest.raises(ValidationError):
        TurnoverQuerySchema().load({"buy": 1, "sell": 1, "quantity": 1, "segment": "EQ_I"})


def test_gst_query_schema():
    data = GSTQuerySchema().load({
        "brokerage": "0.63", "transaction": "0.07", "segment": "EQ_I", "exchange": "BSE"
    })
    assert data["brokerage"] == 0.63
    assert data["exchange"] == "BSE"


def test_segment_query_schema():
    assert SegmentQuerySchema().load({"segment": "EQ_D"}) == {"segment": "EQ_D"}
