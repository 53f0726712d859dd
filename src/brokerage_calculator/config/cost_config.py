"""
Zerodha charge schedule.

Rates are percent-of-amount (0.03 means 0.03%) per segment and charge type.
Reference: https://zerodha.com/charges#tab-equities

    Segment | Brokerage          | STT   | Txn NSE / BSE   | GST | Stamp
    EQ_I    | 0.03% or ₹20 (min) | 0.025 | 0.00325 / 0.003 | 18  | 0.003
    EQ_D    | 0                  | 0.1   | 0.00325 / 0.003 | 18  | 0.015
    FUT     | 0.03% or ₹20 (min) | 0.01  | 0.0019  / -     | 18  | 0.002
    OPT     | ₹20 flat (max)     | 0.05  | 0.05    / -     | 18  | 0.003
"""
from enum import Enum
from types import MappingProxyType
from dataclasses import dataclass
from typing import Mapping, Optional

from brokerage_calculator.exceptions import (
    UnknownSegment,
    UnknownExchange,
    ExchangeNotSupported,
    ChargeNotTabulated,
)


class Segment(str, Enum):
    """Trading segments"""
    EQUITY_INTRADAY = "EQ_I"
    EQUITY_DELIVERY = "EQ_D"
    FUTURES = "FUT"
    OPTIONS = "OPT"


class Exchange(str, Enum):
    NSE = "NSE"
    BSE = "BSE"


class ChargeType(str, Enum):
    """Charges levied on a round-trip trade"""
    BROKERAGE = "Brokerage"
    STT = "STT"
    TRANSACTION = "Transaction"
    GST = "GST"
    SEBI = "SEBI"
    STAMP = "Stamp"
    DP = "DP"


class Combinator(str, Enum):
    """How a percentage fee is combined with a rule's flat cap"""
    NONE = "none"
    MINIMUM = "minimum"  # lesser of fee and cap (brokerage ceiling)
    MAXIMUM = "maximum"  # greater of fee and cap (flat floor)


# SEBI turnover fee: ₹5 per crore
CRORE = 10_000_000
SEBI_PER_CRORE = 5
DP_CHARGE = 15.93


def to_segment(value) -> Segment:
    """Coerce a segment token to Segment, raising UnknownSegment."""
    try:
        return Segment(value)
    except ValueError:
        raise UnknownSegment(value) from None


def to_exchange(value) -> Exchange:
    """Coerce an exchange token to Exchange, raising UnknownExchange."""
    try:
        return Exchange(value)
    except ValueError:
        raise UnknownExchange(value) from None


@dataclass(frozen=True)
class ChargeRule:
    """
    Rate definition for a (segment, charge type) pair.

    Attributes:
        percentage: Rate as percent of amount
        cap: Flat bound applied through combinator
        combinator: MINIMUM caps the fee, MAXIMUM floors it
        exchange_rates: Per-exchange percentage-only rules; when set the
            rule itself carries no rate and must be resolved per exchange
    """
    percentage: float = 0.0
    cap: Optional[float] = None
    combinator: Combinator = Combinator.NONE
    exchange_rates: Optional[Mapping[Exchange, "ChargeRule"]] = None

    def __post_init__(self):
        object.__setattr__(self, "combinator", Combinator(self.combinator))
        if (self.cap is None) != (self.combinator is Combinator.NONE):
            raise ValueError("cap and combinator must be set together")
        if self.exchange_rates is not None:
            if self.cap is not None:
                raise ValueError("exchange based rule cannot carry a cap")
            if self.percentage:
                raise ValueError("exchange based rule cannot carry a percentage")
            if Exchange.NSE not in self.exchange_rates:
                raise ValueError("exchange based rule must cover NSE")
            for rule in self.exchange_rates.values():
                if rule.cap is not None or rule.exchange_rates is not None:
                    raise ValueError("exchange rates must be percentage only")
            object.__setattr__(self, "exchange_rates",
                               MappingProxyType(dict(self.exchange_rates)))

    @property
    def exchange_based(self) -> bool:
        return self.exchange_rates is not None

    @classmethod
    def flat(cls, percentage: float) -> "ChargeRule":
        return cls(percentage=percentage)

    @classmethod
    def capped(cls, percentage: float, cap: float) -> "ChargeRule":
        return cls(percentage=percentage, cap=cap, combinator=Combinator.MINIMUM)

    @classmethod
    def floored(cls, percentage: float, floor: float) -> "ChargeRule":
        return cls(percentage=percentage, cap=floor, combinator=Combinator.MAXIMUM)

    @classmethod
    def per_exchange(cls, **rates: float) -> "ChargeRule":
        return cls(exchange_rates={
            Exchange(name): cls.flat(pct) for name, pct in rates.items()
        })


class RateTable:
    """
    Read-only mapping of segment -> charge type -> ChargeRule.

    Built once; lookups accept Segment/Exchange members or their raw tokens.
    """

    REQUIRED = (
        ChargeType.BROKERAGE,
        ChargeType.STT,
        ChargeType.TRANSACTION,
        ChargeType.GST,
        ChargeType.STAMP,
    )

    def __init__(self, rules: Mapping[Segment, Mapping[ChargeType, ChargeRule]]):
        for segment in Segment:
            missing = [c.value for c in self.REQUIRED if c not in rules.get(segment, {})]
            if missing:
                raise ValueError(f"Segment {segment.value} missing rules: {missing}")
        self._rules = MappingProxyType({
            segment: MappingProxyType(dict(charges))
            for segment, charges in rules.items()
        })

    def lookup(self, segment, charge_type) -> ChargeRule:
        """Rule for a segment and charge type."""
        segment = to_segment(segment)
        try:
            return self._rules[segment][ChargeType(charge_type)]
        except (KeyError, ValueError):
            raise ChargeNotTabulated(charge_type, segment) from None

    def resolve(self, rule: ChargeRule, exchange, segment=None) -> ChargeRule:
        """
        Reduce an exchange based rule to the rule for one exchange.

        Rules that are not exchange based are returned unchanged.
        """
        exchange = to_exchange(exchange)
        if not rule.exchange_based:
            return rule
        resolved = rule.exchange_rates.get(exchange)
        if resolved is None:
            raise ExchangeNotSupported(exchange, segment)
        return resolved

    def rule_for(self, segment, charge_type, exchange) -> ChargeRule:
        segment = to_segment(segment)
        return self.resolve(self.lookup(segment, charge_type), exchange, segment)

    def segments(self):
        return list(self._rules)

    def exchanges_for(self, segment, charge_type=ChargeType.TRANSACTION):
        """Exchanges that can be resolved for a charge type in a segment."""
        rule = self.lookup(segment, charge_type)
        if not rule.exchange_based:
            return list(Exchange)
        return [e for e in Exchange if e in rule.exchange_rates]


RATE_TABLE = RateTable({
    Segment.EQUITY_INTRADAY: {
        ChargeType.BROKERAGE: ChargeRule.capped(0.03, 20),
        ChargeType.STT: ChargeRule.flat(0.025),
        ChargeType.TRANSACTION: ChargeRule.per_exchange(NSE=0.00325, BSE=0.003),
        ChargeType.GST: ChargeRule.flat(18),
        ChargeType.STAMP: ChargeRule.flat(0.003),
    },
    Segment.EQUITY_DELIVERY: {
        ChargeType.BROKERAGE: ChargeRule.capped(0, 0),
        ChargeType.STT: ChargeRule.flat(0.1),
        ChargeType.TRANSACTION: ChargeRule.per_exchange(NSE=0.00325, BSE=0.003),
        ChargeType.GST: ChargeRule.flat(18),
        ChargeType.STAMP: ChargeRule.flat(0.015),
    },
    Segment.FUTURES: {
        ChargeType.BROKERAGE: ChargeRule.capped(0.03, 20),
        ChargeType.STT: ChargeRule.flat(0.01),
        ChargeType.TRANSACTION: ChargeRule.per_exchange(NSE=0.0019),
        ChargeType.GST: ChargeRule.flat(18),
        ChargeType.STAMP: ChargeRule.flat(0.002),
    },
    Segment.OPTIONS: {
        ChargeType.BROKERAGE: ChargeRule.floored(0, 20),
        ChargeType.STT: ChargeRule.flat(0.05),
        ChargeType.TRANSACTION: ChargeRule.per_exchange(NSE=0.05),
        ChargeType.GST: ChargeRule.flat(18),
        ChargeType.STAMP: ChargeRule.flat(0.003),
    },
})
