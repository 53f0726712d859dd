from .logger_config import setup_logger
from .flask_config import Config, TestConfig
from .cost_config import (
    Segment,
    Exchange,
    ChargeType,
    Combinator,
    ChargeRule,
    RateTable,
    RATE_TABLE,
    SEBI_PER_CRORE,
    CRORE,
    DP_CHARGE,
    to_segment,
    to_exchange,
)


__all__ = [
    #Logger Config
    "setup_logger",

    #FlaskConfig
    "Config",
    "TestConfig",

    #Cost Config
    "Segment",
    "Exchange",
    "ChargeType",
    "Combinator",
    "ChargeRule",
    "RateTable",
    "RATE_TABLE",
    "SEBI_PER_CRORE",
    "CRORE",
    "DP_CHARGE",
    "to_segment",
    "to_exchange",
]
