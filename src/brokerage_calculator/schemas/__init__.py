from .charges_schema import (
    TurnoverQuerySchema, TradeQuerySchema, TransactionQuerySchema, GSTQuerySchema,
    SEBIQuerySchema, StampQuerySchema, SegmentQuerySchema, ChargeBreakdownSchema,
    SegmentSchema
)

__all__ = [
    "TurnoverQuerySchema",
    "TradeQuerySchema",
    "TransactionQuerySchema",
    "GSTQuerySchema",
    "SEBIQuerySchema",
    "StampQuerySchema",
    "SegmentQuerySchema",
    "ChargeBreakdownSchema",
    "SegmentSchema",
]
