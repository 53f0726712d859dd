"""
API v1 Routes

Blueprints organized by category for Swagger UI navigation.
"""

from .charges_routes import blp as charges_bp

__all__ = [
    "charges_bp",
]
