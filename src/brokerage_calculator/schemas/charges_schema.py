from marshmallow import Schema, fields, validate

from brokerage_calculator.config.cost_config import Segment, Exchange


SEGMENT_TOKENS = [s.value for s in Segment]
EXCHANGE_TOKENS = [e.value for e in Exchange]


def _amount(description, example):
    return fields.Float(
        required=True,
        validate=validate.Range(min=0),
        metadata={"description": description, "example": example},
    )


def _segment():
    return fields.String(
        required=True,
        validate=validate.OneOf(SEGMENT_TOKENS),
        metadata={
            "description": "EQ_I (Equity Intraday), EQ_D (Equity Delivery), "
                           "FUT (F&O Futures), OPT (F&O Options)",
            "example": "EQ_I",
        }
    )


def _exchange():
    return fields.String(
        required=True,
        validate=validate.OneOf(EXCHANGE_TOKENS),
        metadata={"description": "Exchange the script was traded at", "example": "NSE"}
    )


class TurnoverQuerySchema(Schema):
    """Schema for buy/sell/quantity query parameters."""
    buy = _amount("Price the script was bought at", 100.0)
    sell = _amount("Price the script was sold at", 110.0)
    quantity = _amount("Quantity of the script", 10)


class TradeQuerySchema(TurnoverQuerySchema):
    """Schema for a full trade."""
    segment = _segment()
    exchange = _exchange()


class TransactionQuerySchema(Schema):
    turnover = _amount("Turnover of the trade", 2100.0)
    segment = _segment()
    exchange = _exchange()


class GSTQuerySchema(Schema):
    brokerage = _amount("Brokerage of the trade", 0.63)
    transaction = _amount("Transaction charges of the trade", 0.07)
    segment = _segment()
    exchange = _exchange()


class SEBIQuerySchema(Schema):
    turnover = _amount("Turnover of the trade", 2100.0)


class StampQuerySchema(Schema):
    buy = _amount("Price the script was bought at", 100.0)
    quantity = _amount("Quantity of the script", 10)
    segment = _segment()
    exchange = _exchange()


class SegmentQuerySchema(Schema):
    segment = _segment()


class ChargeBreakdownSchema(Schema):
    """Every charge of a trade in INR"""
    turnover = fields.Float()
    brokerage = fields.Float()
    stt = fields.Float()
    transaction = fields.Float()
    gst = fields.Float()
    sebi = fields.Float()
    stamp = fields.Float()
    dp = fields.Float()
    total = fields.Float()
    gross_pnl = fields.Float()
    net_pnl = fields.Float()
    breakeven_points = fields.Float()


class SegmentSchema(Schema):
    segment = fields.Str()
    exchanges = fields.List(fields.Str())
