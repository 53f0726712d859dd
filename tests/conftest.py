import os
import tempfile

import pytest

os.environ.setdefault("BROKERAGE_LOG_DIR", os.path.join(tempfile.gettempdir(), "brokerage_calculator_logs"))

from brokerage_calculator.app import create_app
from brokerage_calculator.config import TestConfig
from brokerage_calculator.services import ChargesService


@pytest.fixture
def service():
    """Charges service over the default Zerodha rate table"""
    return ChargesService()


@pytest.fixture(scope="session")
def app():
    return create_app(TestConfig)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def intraday_trade():
    """Buy 10 @ 100, sell @ 110, NSE intraday"""
    return {
        "buy": 100.0,
        "sell": 110.0,
        "quantity": 10,
        "segment": "EQ_I",
        "exchange": "NSE",
    }
