# oanda_trading/core/tick.py
from dataclasses import dataclass
from decimal import Decimal

from .utils import parse_decimal, parse_rfc3339, to_epoch_millis


class TickError(ValueError):
    """A price snapshot cannot be turned into a Tick."""


@dataclass(frozen=True)
class Tick:
    time_ms: int
    bid: Decimal
    ask: Decimal

    @classmethod
    def from_pricing(cls, pricing):
        """Builds a Tick from the first price in a pricing response."""
        if not pricing.prices:
            raise TickError("pricing response has no prices")
        return cls.from_price(pricing.prices[0])

    @classmethod
    def from_price(cls, price):
        if not price.bids:
            raise TickError(f"{price.instrument}: no bid levels")
        if not price.asks:
            raise TickError(f"{price.instrument}: no ask levels")
        try:
            time_ms = to_epoch_millis(parse_rfc3339(price.time))
            bid = parse_decimal(price.bids[0].price)
            ask = parse_decimal(price.asks[0].price)
        except ValueError as e:
            raise TickError(f"{price.instrument}: {e}") from e
        return cls(time_ms=time_ms, bid=bid, ask=ask)

    @property
    def time(self):
        """Seconds since the epoch."""
        return self.time_ms // 1000

    @property
    def price(self):
        return (self.bid + self.ask) / 2

    mid = price

    @property
    def spread(self):
        # Bid minus ask, so negative for a normal market.
        return self.bid - self.ask

    @property
    def buy_price(self):
        return self.ask

    @property
    def sell_price(self):
        return self.bid
