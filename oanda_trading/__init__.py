from .core.client import TradingClient
from .core.models import (
    Instrument,
    InstrumentsResponse,
    InstrumentType,
    OrderPositionFill,
    OrderRequest,
    OrderType,
    Position,
    PositionResponse,
    PositionSide,
    PositionsResponse,
    PostOrderResponse,
    Price,
    PriceStatus,
    Pricing,
    TimeInForce,
)
from .core.result import Err, FailureKind, Ok, RequestError, RequestFailed, Result
from .core.tick import Tick, TickError

__all__ = [
    "TradingClient",
    "Instrument",
    "InstrumentsResponse",
    "InstrumentType",
    "OrderPositionFill",
    "OrderRequest",
    "OrderType",
    "Position",
    "PositionResponse",
    "PositionSide",
    "PositionsResponse",
    "PostOrderResponse",
    "Price",
    "PriceStatus",
    "Pricing",
    "TimeInForce",
    "Err",
    "FailureKind",
    "Ok",
    "RequestError",
    "RequestFailed",
    "Result",
    "Tick",
    "TickError",
]
