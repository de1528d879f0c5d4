# oanda_trading/core/models.py
"""
Wire records for the v3 REST API.

Monetary and quantity fields stay decimal text exactly as the server sent
them; numeric interpretation happens where a value is consumed (see
``tick.py``). Unknown keys are ignored and optional keys may be absent.
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .utils import format_decimal, parse_decimal, to_wire_name


class WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_wire_name, populate_by_name=True, extra="ignore")

    def to_wire(self):
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class OrderType(str, Enum):
    MARKET = "MARKET"
    LIMIT = "LIMIT"
    STOP = "STOP"
    MARKET_IF_TOUCHED = "MARKET_IF_TOUCHED"


class TimeInForce(str, Enum):
    FOK = "FOK"
    IOC = "IOC"
    GTC = "GTC"
    GFD = "GFD"
    GTD = "GTD"


class OrderPositionFill(str, Enum):
    DEFAULT = "DEFAULT"
    OPEN_ONLY = "OPEN_ONLY"
    REDUCE_FIRST = "REDUCE_FIRST"
    REDUCE_ONLY = "REDUCE_ONLY"


class PriceStatus(str, Enum):
    TRADEABLE = "tradeable"
    NON_TRADEABLE = "non-tradeable"
    INVALID = "invalid"


class InstrumentType(str, Enum):
    CURRENCY = "CURRENCY"
    CFD = "CFD"
    METAL = "METAL"


# Pricing

class PriceBucket(WireModel):
    liquidity: int
    price: str


class Ask(PriceBucket):
    pass


class Bid(PriceBucket):
    pass


class QuoteHomeConversionFactors(WireModel):
    positive_units: str
    negative_units: str


class UnitsAvailableDetails(WireModel):
    long: str
    short: str


class UnitsAvailable(WireModel):
    default: Optional[UnitsAvailableDetails] = None
    open_only: Optional[UnitsAvailableDetails] = None
    reduce_first: Optional[UnitsAvailableDetails] = None
    reduce_only: Optional[UnitsAvailableDetails] = None


class Price(WireModel):
    """One instrument's price snapshot; index 0 of each side is the best price."""

    model_config = ConfigDict(frozen=True)

    instrument: str
    time: str
    status: Optional[PriceStatus] = None
    tradeable: Optional[bool] = None
    asks: List[Ask] = Field(default_factory=list)
    bids: List[Bid] = Field(default_factory=list)
    closeout_ask: Optional[str] = None
    closeout_bid: Optional[str] = None
    quote_home_conversion_factors: Optional[QuoteHomeConversionFactors] = None
    units_available: Optional[UnitsAvailable] = None

    @property
    def is_tradeable(self):
        if self.tradeable is not None:
            return self.tradeable
        return self.status == PriceStatus.TRADEABLE


class Pricing(WireModel):
    prices: List[Price] = Field(default_factory=list)
    time: Optional[str] = None


# Instruments

class Instrument(WireModel):
    model_config = ConfigDict(frozen=True)

    name: str
    type: InstrumentType
    display_name: str
    pip_location: int
    display_precision: int
    trade_units_precision: int
    minimum_trade_size: str
    maximum_trailing_stop_distance: str
    minimum_trailing_stop_distance: str
    maximum_position_size: str
    maximum_order_units: str
    margin_rate: str


class InstrumentsResponse(WireModel):
    instruments: List[Instrument] = Field(default_factory=list)
    last_transaction_id: str


# Positions

class PositionSide(WireModel):
    units: str = "0"
    pl: str = "0"
    unrealized_pl: str = "0"
    resettable_pl: str = "0"
    financing: Optional[str] = None
    average_price: Optional[str] = None
    trade_ids: Optional[List[str]] = None

    @classmethod
    def empty(cls):
        return cls()

    @property
    def is_open(self):
        return parse_decimal(self.units) != 0


class Position(WireModel):
    instrument: str
    pl: str = "0"
    unrealized_pl: str = "0"
    resettable_pl: str = "0"
    margin_used: Optional[str] = None
    commission: Optional[str] = None
    long: PositionSide = Field(default_factory=PositionSide.empty)
    short: PositionSide = Field(default_factory=PositionSide.empty)

    @property
    def net_units(self) -> Decimal:
        # short units arrive already negative
        return parse_decimal(self.long.units) + parse_decimal(self.short.units)


class PositionResponse(WireModel):
    position: Position
    last_transaction_id: str


class PositionsResponse(WireModel):
    positions: List[Position] = Field(default_factory=list)
    last_transaction_id: str


# Orders

_MARKET_ORDER_POLICY = {
    "time_in_force": TimeInForce.FOK,
    "type": OrderType.MARKET,
    "position_fill": OrderPositionFill.DEFAULT,
}


class OrderRequest(WireModel):
    """A fill-or-kill market order. Build it with ``OrderRequest.market``."""

    model_config = ConfigDict(frozen=True)

    units: str
    instrument: str
    time_in_force: TimeInForce = TimeInForce.FOK
    type: OrderType = OrderType.MARKET
    position_fill: OrderPositionFill = OrderPositionFill.DEFAULT

    @field_validator("units")
    @classmethod
    def units_are_decimal(cls, value):
        parse_decimal(value)
        return value

    @field_validator("time_in_force", "type", "position_fill")
    @classmethod
    def policy_is_fixed(cls, value, info):
        expected = _MARKET_ORDER_POLICY[info.field_name]
        if value != expected:
            raise ValueError(f"market orders always use {expected.value}")
        return value

    @classmethod
    def market(cls, instrument, units):
        """Positive units buy, negative units sell."""
        return cls(units=format_decimal(units), instrument=instrument)

    def to_body(self):
        return {"order": self.to_wire()}


class Transaction(WireModel):
    id: str
    time: str
    type: str
    user_id: Optional[int] = None
    account_id: Optional[str] = None
    batch_id: Optional[str] = None
    request_id: Optional[str] = None


class OrderCreateTransaction(Transaction):
    instrument: Optional[str] = None
    units: Optional[str] = None
    time_in_force: Optional[TimeInForce] = None
    position_fill: Optional[OrderPositionFill] = None
    reason: Optional[str] = None


class TradeOpen(WireModel):
    trade_id: str
    units: str
    price: Optional[str] = None


class OrderFillTransaction(Transaction):
    order_id: str
    instrument: str
    units: str
    price: Optional[str] = None
    pl: Optional[str] = None
    financing: Optional[str] = None
    commission: Optional[str] = None
    account_balance: Optional[str] = None
    reason: Optional[str] = None
    trade_opened: Optional[TradeOpen] = None


class OrderCancelTransaction(Transaction):
    order_id: str
    reason: Optional[str] = None


class PostOrderResponse(WireModel):
    last_transaction_id: str
    order_create_transaction: Optional[OrderCreateTransaction] = None
    order_fill_transaction: Optional[OrderFillTransaction] = None
    order_cancel_transaction: Optional[OrderCancelTransaction] = None
    related_transaction_ids: Optional[List[str]] = None

    @property
    def filled(self):
        """False unless the server reported a fill, whatever the HTTP status was."""
        return self.order_fill_transaction is not None
