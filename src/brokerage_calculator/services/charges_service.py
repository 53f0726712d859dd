"""
Charges Service

Computes Zerodha brokerage and statutory charges for a round-trip trade.
Every charge is exposed on its own so callers can show a breakdown without
recomputing the rest; some take already computed values (turnover,
brokerage, transaction) instead of raw trade legs.
"""
from brokerage_calculator.config import setup_logger
from brokerage_calculator.config.cost_config import (
    ChargeType,
    Segment,
    RATE_TABLE,
    RateTable,
    SEBI_PER_CRORE,
    CRORE,
    DP_CHARGE,
    to_segment,
    to_exchange,
)
from brokerage_calculator.exceptions import ChargesError
from brokerage_calculator.models import Trade, ChargeBreakdown
from brokerage_calculator.utils.transaction_costs_utils import (
    evaluate_rule,
    calculate_turnover,
    ratio_fee,
    round_charge,
)

logger = setup_logger(name="ChargesService")


class ChargesService:
    """Charge engine over a rate table"""

    def __init__(self, rate_table: RateTable = None):
        self.rate_table = rate_table or RATE_TABLE

    def _charge(self, segment, charge_type: ChargeType, exchange, amount: float) -> float:
        segment = to_segment(segment)
        rule = self.rate_table.lookup(segment, charge_type)
        return evaluate_rule(rule, exchange, amount, self.rate_table, segment)

    @staticmethod
    def turnover(buy: float, sell: float, quantity: float) -> float:
        """Get turnover of a trade."""
        return calculate_turnover(buy, sell, quantity)

    def brokerage(self, buy: float, sell: float, quantity: float,
                  segment, exchange) -> float:
        """
        Brokerage charged on both legs.

        Caps apply per order, so the buy and sell legs are evaluated separately.
        """
        buy_brokerage = self._charge(segment, ChargeType.BROKERAGE, exchange, buy * quantity)
        sell_brokerage = self._charge(segment, ChargeType.BROKERAGE, exchange, sell * quantity)
        return round_charge(buy_brokerage + sell_brokerage)

    def stt(self, buy: float, sell: float, quantity: float, segment, exchange) -> float:
        """
        Securities Transaction Tax.

        Delivery trades pay STT on both legs, everything else on the sell leg only.
        """
        amount = sell * quantity
        if to_segment(segment) is Segment.EQUITY_DELIVERY:
            amount += buy * quantity
        return self._charge(segment, ChargeType.STT, exchange, amount)

    def transaction(self, turnover: float, segment, exchange) -> float:
        """Exchange transaction charges on turnover."""
        return self._charge(segment, ChargeType.TRANSACTION, exchange, turnover)

    def gst(self, brokerage: float, transaction: float, segment, exchange) -> float:
        """GST on brokerage plus transaction charges."""
        return self._charge(segment, ChargeType.GST, exchange, brokerage + transaction)

    @staticmethod
    def sebi(turnover: float) -> float:
        """SEBI turnover fee."""
        return ratio_fee(turnover, SEBI_PER_CRORE, CRORE)

    def stamp(self, buy: float, quantity: float, segment, exchange) -> float:
        """Stamp duty, levied on the buy leg only."""
        return self._charge(segment, ChargeType.STAMP, exchange, buy * quantity)

    @staticmethod
    def dp(segment) -> float:
        """Depository participant charge, only for delivery trades."""
        return DP_CHARGE if to_segment(segment) is Segment.EQUITY_DELIVERY else 0.0

    def breakdown(self, trade: Trade) -> ChargeBreakdown:
        """
        Compute every charge for a trade.

        Segment and exchange are validated before any charge is computed.
        Transaction charges need turnover and GST needs brokerage and
        transaction charges, which fixes the evaluation order.

        Raises:
            UnknownSegment, UnknownExchange: invalid trade tokens
            ExchangeNotSupported: exchange has no rate for a charge in the segment
        """
        try:
            segment = to_segment(trade.segment)
            exchange = to_exchange(trade.exchange)
        except ChargesError as e:
            logger.warning(f"Rejected trade: {e}")
            raise

        buy, sell, quantity = trade.buy, trade.sell, trade.quantity

        turnover = self.turnover(buy, sell, quantity)
        brokerage = self.brokerage(buy, sell, quantity, segment, exchange)
        stt = self.stt(buy, sell, quantity, segment, exchange)
        transaction = self.transaction(turnover, segment, exchange)
        gst = self.gst(brokerage, transaction, segment, exchange)
        sebi = self.sebi(turnover)
        stamp = self.stamp(buy, quantity, segment, exchange)
        dp = self.dp(segment)

        total = round_charge(brokerage + stt + transaction + gst + sebi + stamp + dp)
        gross_pnl = round_charge((sell - buy) * quantity)

        logger.debug(f"{segment.value}/{exchange.value} turnover={turnover} total={total}")

        return ChargeBreakdown(
            turnover=turnover,
            brokerage=brokerage,
            stt=stt,
            transaction=transaction,
            gst=gst,
            sebi=sebi,
            stamp=stamp,
            dp=dp,
            total=total,
            gross_pnl=gross_pnl,
            net_pnl=round_charge(gross_pnl - total),
            breakeven_points=round_charge(total / quantity) if quantity else 0.0,
        )

    def total_charges(self, buy: float, sell: float, quantity: float,
                      segment, exchange) -> float:
        """Total charges for a trade in INR."""
        return self.breakdown(Trade(buy, sell, quantity, segment, exchange)).total
