class Config:
    API_TITLE = "Zerodha Brokerage Calculator"
    API_VERSION = "v1"
    OPENAPI_VERSION = "3.0.3"
    OPENAPI_URL_PREFIX = "/"
    OPENAPI_SWAGGER_UI_PATH = "/swagger-ui"
    OPENAPI_SWAGGER_UI_URL = "https://cdn.jsdelivr.net/npm/swagger-ui-dist/"
    OPENAPI_REDOC_PATH = "/redoc"
    OPENAPI_REDOC_URL = "https://cdn.jsdelivr.net/npm/redoc@latest/bundles/redoc.standalone.js"
    API_SPEC_OPTIONS = {
        "tags": [
            {"name": "Brokerage Charges", "description": "Total and per-charge trade cost calculations"},
            {"name": "Rate Table", "description": "Supported segments and exchanges"},
        ],
    }


class TestConfig(Config):
    TESTING = True
