from decimal import Decimal, ROUND_HALF_UP

from brokerage_calculator.config.cost_config import ChargeRule, Combinator, RATE_TABLE, RateTable


PAISE = Decimal("0.01")


def _to_decimal(value) -> Decimal:
    # str() gives the shortest repr, so 1.005 stays 1.005 rather than 1.00499...
    return value if isinstance(value, Decimal) else Decimal(str(value))


def round_charge(value) -> float:
    """
    Round a rupee amount to 2 decimal places, halves away from zero.

    Example:
        >>> round_charge(2.675)
        2.68
        >>> round_charge(1.005)
        1.01
    """
    return float(_to_decimal(value).quantize(PAISE, rounding=ROUND_HALF_UP))


def percentage_fee(percentage: float, amount: float) -> float:
    """
    Calculate percent of an amount, rounded to paise.

    Parameters:
        percentage (float): Rate in percent (0.03 means 0.03%)
        amount (float): Amount in INR

    Returns:
        float: Fee in INR

    Example:
        >>> percentage_fee(0.025, 1100)
        0.28
    """
    return round_charge(_to_decimal(amount) * _to_decimal(percentage) / 100)


def ratio_fee(amount: float, numerator: float, denominator: float) -> float:
    """Charge expressed as a ratio of the amount (e.g. ₹5 per crore), rounded to paise."""
    return round_charge(_to_decimal(amount) * _to_decimal(numerator) / _to_decimal(denominator))


def evaluate_rule(rule: ChargeRule, exchange, amount: float,
                  rate_table: RateTable = None, segment=None) -> float:
    """
    Apply a charge rule to an amount.

    Exchange based rules are resolved for the exchange first. The percentage
    fee is then bounded by the rule's cap according to its combinator.

    Parameters:
        rule (ChargeRule): Rule from the rate table
        exchange: Exchange the trade executed on
        amount (float): Amount the rule applies to, in INR
        rate_table (RateTable): Table used to resolve exchange based rules
        segment: Segment the rule belongs to, used in error messages

    Returns:
        float: Charge in INR
    """
    if rate_table is None:
        rate_table = RATE_TABLE

    rule = rate_table.resolve(rule, exchange, segment)
    fee = percentage_fee(rule.percentage, amount)

    if rule.combinator is Combinator.MINIMUM:
        return float(min(fee, rule.cap))
    if rule.combinator is Combinator.MAXIMUM:
        return float(max(fee, rule.cap))
    return fee


def calculate_turnover(buy: float, sell: float, quantity: float) -> float:
    """Buy-side plus sell-side notional value, unrounded."""
    return (buy + sell) * quantity
