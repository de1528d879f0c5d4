# oanda_trading/core/client.py
from urllib.parse import quote

from .. import config  # Import config from the same package
from .cache import InstrumentCache
from .models import (
    InstrumentsResponse,
    OrderRequest,
    PositionResponse,
    PositionsResponse,
    PostOrderResponse,
    Pricing,
)
from .tick import Tick
from .transport import RestTransport


class TradingClient:
    """Account-bound facade over the v3 REST endpoints.

    Each call issues one request and returns an ``Ok``/``Err`` result. The
    only state kept between calls is the instrument cache, which every
    successful ``fetch_instruments`` merges into.
    """

    def __init__(self, url=None, account=None, token=None, *, session=None, timeout=None):
        self.url = url if url is not None else config.API_URL
        self.account = account if account is not None else config.ACCOUNT_ID
        self.transport = RestTransport(
            self.url,
            token if token is not None else config.API_TOKEN,
            session=session,
            timeout=timeout if timeout is not None else config.REQUEST_TIMEOUT,
        )
        self._instruments = InstrumentCache()

    def _path(self, endpoint):
        return f"/v3/accounts/{self.account}/{endpoint}"

    @property
    def instruments(self):
        return self._instruments.snapshot()

    def instrument(self, name):
        return self._instruments.get(name)

    def fetch_instruments(self, instruments=None):
        if isinstance(instruments, str):
            instruments = [instruments]
        params = {"instruments": ",".join(instruments)} if instruments else None
        result = self.transport.get(self._path("instruments"), InstrumentsResponse, params=params)
        if result.ok:
            self._instruments.merge(result.value.instruments)
        return result

    def fetch_pricing(self, instrument):
        return self.transport.get(self._path("pricing"), Pricing, params={"instruments": instrument})

    def fetch_tick(self, instrument):
        """Pricing reduced to a Tick; raises TickError if the snapshot has no usable price."""
        return self.fetch_pricing(instrument).map(Tick.from_pricing)

    def fetch_position(self, instrument):
        result = self.transport.get(self._path(f"positions/{quote(instrument, safe='')}"), PositionResponse)
        return result.map(lambda response: response.position)

    def fetch_open_positions(self):
        return self.transport.get(self._path("openPositions"), PositionsResponse)

    def place_order(self, order):
        # A 2xx response can still carry no fill; check PostOrderResponse.filled.
        return self.transport.post(self._path("orders"), PostOrderResponse, order.to_body())

    def market_order(self, instrument, units):
        return self.place_order(OrderRequest.market(instrument, units))
