"""
Charge Models

Dataclasses for a trade and its computed charges.
"""
from dataclasses import dataclass, asdict


@dataclass(frozen=True)
class Trade:
    """
    A single buy/sell round trip.

    Attributes:
        buy: Price the script was bought at
        sell: Price the script was sold at
        quantity: Quantity of the script
        segment: Segment token (EQ_I, EQ_D, FUT, OPT)
        exchange: Exchange token (NSE, BSE)
    """
    buy: float
    sell: float
    quantity: float
    segment: str
    exchange: str


@dataclass
class ChargeBreakdown:
    """Every charge of a trade in INR, plus the resulting P&L."""
    turnover: float
    brokerage: float
    stt: float
    transaction: float
    gst: float
    sebi: float
    stamp: float
    dp: float
    total: float
    gross_pnl: float = 0.0
    net_pnl: float = 0.0
    breakeven_points: float = 0.0

    def to_dict(self) -> dict:
        return asdict(self)
