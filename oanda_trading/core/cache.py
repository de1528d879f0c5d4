# oanda_trading/core/cache.py
import logging
import threading

logger = logging.getLogger(__name__)


class InstrumentCache:
    """Instruments by name. Merges only add or overwrite; nothing is evicted."""

    def __init__(self):
        self._instruments = {}
        self._lock = threading.Lock()

    def merge(self, instruments):
        with self._lock:
            for instrument in instruments:
                self._instruments[instrument.name] = instrument
            size = len(self._instruments)
        logger.debug("Instrument cache now holds %d entries", size)

    def get(self, name):
        return self._instruments.get(name)

    def snapshot(self):
        with self._lock:
            return dict(self._instruments)

    def __contains__(self, name):
        return name in self._instruments

    def __len__(self):
        return len(self._instruments)
