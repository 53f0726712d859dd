"""
Charges Routes

API endpoints for brokerage and statutory charges of a round-trip trade.
Each charge has its own endpoint so a client can build a breakdown piece by
piece; /total and /breakdown compute everything in one call.
"""
from flask.views import MethodView
from flask_smorest import Blueprint, abort

from brokerage_calculator.config import setup_logger, ChargeType
from brokerage_calculator.exceptions import ChargesError
from brokerage_calculator.models import Trade
from brokerage_calculator.schemas import (
    TurnoverQuerySchema,
    TradeQuerySchema,
    TransactionQuerySchema,
    GSTQuerySchema,
    SEBIQuerySchema,
    StampQuerySchema,
    SegmentQuerySchema,
    ChargeBreakdownSchema,
    SegmentSchema,
)
from brokerage_calculator.services import ChargesService


logger = setup_logger(name="ChargesRoutes")

blp = Blueprint(
    "charges",
    __name__,
    url_prefix="/api/v1/charges",
    description="Brokerage and statutory charge calculations"
)
charges_service = ChargesService()


def _compute(func, *args):
    try:
        return func(*args)
    except ChargesError as e:
        logger.warning(f"Charge calculation failed: {e}")
        abort(400, message=str(e))


@blp.route("/total")
class TotalCharges(MethodView):
    @blp.doc(tags=["Brokerage Charges"])
    @blp.arguments(TradeQuerySchema, location="query")
    def get(self, args):
        """
        Calculate total charges of a trade.

        Returns:
            Dict with total (brokerage + STT + transaction + GST + SEBI + stamp + DP)
        """
        logger.info(f"Total charges requested for {args}")
        total = _compute(charges_service.total_charges, args["buy"], args["sell"],
                         args["quantity"], args["segment"], args["exchange"])
        return {"total": total}


@blp.route("/breakdown")
class ChargesBreakdown(MethodView):
    @blp.doc(tags=["Brokerage Charges"])
    @blp.arguments(TradeQuerySchema, location="query")
    @blp.response(200, ChargeBreakdownSchema)
    def get(self, args):
        """Calculate every charge of a trade along with net P&L"""
        logger.info(f"Charge breakdown requested for {args}")
        return _compute(charges_service.breakdown, Trade(**args))


@blp.route("/turnover")
class Turnover(MethodView):
    @blp.doc(tags=["Brokerage Charges"])
    @blp.arguments(TurnoverQuerySchema, location="query")
    def get(self, args):
        """Turnover of a trade"""
        return {"turnover": charges_service.turnover(args["buy"], args["sell"], args["quantity"])}


@blp.route("/brokerage")
class Brokerage(MethodView):
    @blp.doc(tags=["Brokerage Charges"])
    @blp.arguments(TradeQuerySchema, location="query")
    def get(self, args):
        """Brokerage charged on the buy and sell legs"""
        brokerage = _compute(charges_service.brokerage, args["buy"], args["sell"],
                             args["quantity"], args["segment"], args["exchange"])
        return {"brokerage": brokerage}


@blp.route("/stt")
class STT(MethodView):
    @blp.doc(tags=["Brokerage Charges"])
    @blp.arguments(TradeQuerySchema, location="query")
    def get(self, args):
        """Securities Transaction Tax of a trade"""
        stt = _compute(charges_service.stt, args["buy"], args["sell"],
                       args["quantity"], args["segment"], args["exchange"])
        return {"stt": stt}


@blp.route("/transaction")
class Transaction(MethodView):
    @blp.doc(tags=["Brokerage Charges"])
    @blp.arguments(TransactionQuerySchema, location="query")
    def get(self, args):
        """
        Exchange transaction charges.

        Parameters:
            turnover: Query param - response of /turnover
        """
        transaction = _compute(charges_service.transaction, args["turnover"],
                               args["segment"], args["exchange"])
        return {"transaction": transaction}


@blp.route("/gst")
class GST(MethodView):
    @blp.doc(tags=["Brokerage Charges"])
    @blp.arguments(GSTQuerySchema, location="query")
    def get(self, args):
        """
        GST on brokerage and transaction charges.

        Parameters:
            brokerage: Query param - response of /brokerage
            transaction: Query param - response of /transaction
        """
        gst = _compute(charges_service.gst, args["brokerage"], args["transaction"],
                       args["segment"], args["exchange"])
        return {"gst": gst}


@blp.route("/sebi")
class SEBI(MethodView):
    @blp.doc(tags=["Brokerage Charges"])
    @blp.arguments(SEBIQuerySchema, location="query")
    def get(self, args):
        """SEBI turnover fee"""
        return {"sebi": charges_service.sebi(args["turnover"])}


@blp.route("/stamp")
class Stamp(MethodView):
    @blp.doc(tags=["Brokerage Charges"])
    @blp.arguments(StampQuerySchema, location="query")
    def get(self, args):
        """Stamp duty on the buy leg"""
        stamp = _compute(charges_service.stamp, args["buy"], args["quantity"],
                         args["segment"], args["exchange"])
        return {"stamp": stamp}


@blp.route("/dp")
class DP(MethodView):
    @blp.doc(tags=["Brokerage Charges"])
    @blp.arguments(SegmentQuerySchema, location="query")
    def get(self, args):
        """Depository participant charge"""
        return {"dp": charges_service.dp(args["segment"])}


@blp.route("/segments")
class Segments(MethodView):
    @blp.doc(tags=["Rate Table"])
    @blp.response(200, SegmentSchema(many=True))
    def get(self):
        """Segments and the exchanges their transaction charges are available on"""
        rate_table = charges_service.rate_table
        return [
            {
                "segment": segment.value,
                "exchanges": [e.value for e in rate_table.exchanges_for(segment, ChargeType.TRANSACTION)],
            }
            for segment in rate_table.segments()
        ]
