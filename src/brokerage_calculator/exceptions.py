"""Charge calculation exception hierarchy."""


def _token(value):
    return getattr(value, "value", value)


class ChargesError(ValueError):
    """Base charge calculation error."""


class UnknownSegment(ChargesError):
    """Segment is not one of the supported trading segments."""

    def __init__(self, segment):
        self.segment = segment
        super().__init__(f"Unknown segment {_token(segment)}.")


class UnknownExchange(ChargesError):
    """Exchange is not one of the supported exchanges."""

    def __init__(self, exchange):
        self.exchange = exchange
        super().__init__(f"Unknown exchange {_token(exchange)}.")


class ExchangeNotSupported(ChargesError):
    """Exchange has no rate for an exchange-specific charge in this segment."""

    def __init__(self, exchange, segment=None):
        self.exchange = exchange
        self.segment = segment
        super().__init__(
            f"Exchange {_token(exchange)} not available in segment {_token(segment)}."
        )


class ChargeNotTabulated(ChargesError):
    """Charge type has no rule in the rate table for this segment."""

    def __init__(self, charge_type, segment=None):
        self.charge_type = charge_type
        self.segment = segment
        super().__init__(
            f"Charge {_token(charge_type)} not tabulated for segment {_token(segment)}."
        )
