import sys
import math
import argparse

from brokerage_calculator.config import setup_logger, Segment, Exchange
from brokerage_calculator.exceptions import ChargesError
from brokerage_calculator.models import Trade
from brokerage_calculator.services import ChargesService


BREAKDOWN_ROWS = [
    ("turnover", "Turnover"),
    ("brokerage", "Brokerage"),
    ("stt", "STT"),
    ("transaction", "Transaction charges"),
    ("gst", "GST"),
    ("sebi", "SEBI charges"),
    ("stamp", "Stamp duty"),
    ("dp", "DP charges"),
    ("total", "Total charges"),
    ("net_pnl", "Net P&L"),
    ("breakeven_points", "Points to breakeven"),
]


def build_parser():
    parser = argparse.ArgumentParser(description="Zerodha Brokerage Calculator")
    parser.add_argument("buy", nargs="?", type=float, help="Price the script was bought at")
    parser.add_argument("sell", nargs="?", type=float, help="Price the script was sold at")
    parser.add_argument("quantity", nargs="?", type=float, help="Quantity of the script")
    parser.add_argument("segment", nargs="?",
                        help="One of " + ", ".join(s.value for s in Segment))
    parser.add_argument("exchange", nargs="?",
                        help="One of " + ", ".join(e.value for e in Exchange))
    parser.add_argument("--breakdown", action="store_true", help="Print every charge instead of the total")
    parser.add_argument("--serve", action="store_true", help="Run the HTTP API instead")
    parser.add_argument("--port", type=int, default=5000, help="Port for --serve")
    return parser


def format_breakdown(breakdown) -> str:
    values = breakdown.to_dict()
    width = max(len(label) for _, label in BREAKDOWN_ROWS)
    return "\n".join(f"{label:<{width}}  ₹{values[key]:,.2f}" for key, label in BREAKDOWN_ROWS)


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    logger = setup_logger(name="BrokerageCalculator")

    if args.serve:
        from brokerage_calculator.app import create_app
        logger.info(f"Starting API on port {args.port}")
        create_app().run(port=args.port)
        return 0

    trade_args = [args.buy, args.sell, args.quantity, args.segment, args.exchange]
    if any(value is None for value in trade_args):
        parser.error("buy, sell, quantity, segment and exchange are required")
    if not all(math.isfinite(value) for value in trade_args[:3]):
        parser.error("buy, sell and quantity must be finite numbers")
    if min(args.buy, args.sell, args.quantity) < 0:
        parser.error("buy, sell and quantity must be non-negative")

    try:
        breakdown = ChargesService().breakdown(Trade(*trade_args))
    except ChargesError as e:
        logger.error(str(e))
        return 2

    if args.breakdown:
        print(format_breakdown(breakdown))
    else:
        print(f"{breakdown.total:.2f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
