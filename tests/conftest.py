"""Pytest configuration for path setup and the shared HTTP fixtures."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]

root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)

from oanda_trading import TradingClient  # noqa: E402
from tests.helpers.fake_http import ACCOUNT, BASE_URL, FakeSession  # noqa: E402


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def client(session) -> TradingClient:
    return TradingClient(BASE_URL, ACCOUNT, "secret-token", session=session, timeout=5)
