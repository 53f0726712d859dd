from .transaction_costs_utils import (
    round_charge,
    percentage_fee,
    ratio_fee,
    evaluate_rule,
    calculate_turnover,
)


__all__ = [
    "round_charge",
    "percentage_fee",
    "ratio_fee",
    "evaluate_rule",
    "calculate_turnover",
]
