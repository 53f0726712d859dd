"""Zerodha brokerage and statutory charges calculator."""
from brokerage_calculator.exceptions import (
    ChargesError,
    UnknownSegment,
    UnknownExchange,
    ExchangeNotSupported,
    ChargeNotTabulated,
)
from brokerage_calculator.config import Segment, Exchange, ChargeType, RATE_TABLE
from brokerage_calculator.models import Trade, ChargeBreakdown
from brokerage_calculator.services import ChargesService

__version__ = "1.0.0"

__all__ = [
    "ChargesError",
    "UnknownSegment",
    "UnknownExchange",
    "ExchangeNotSupported",
    "ChargeNotTabulated",
    "Segment",
    "Exchange",
    "ChargeType",
    "RATE_TABLE",
    "Trade",
    "ChargeBreakdown",
    "ChargesService",
]
