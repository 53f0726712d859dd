from flask import Flask
from flask_smorest import Api

from brokerage_calculator.config import Config
from brokerage_calculator.api.v1.routes import charges_bp


def create_app(config_class=Config):
    """Application factory"""
    app = Flask(__name__)
    app.config.from_object(config_class)

    api = Api(app)
    api.register_blueprint(charges_bp)

    return app
