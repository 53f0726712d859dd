from .charges_service import ChargesService


__all__ = [
    "ChargesService",
]
