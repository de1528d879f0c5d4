from datetime import datetime, timezone
from decimal import Decimal

import pytest

from oanda_trading.core.utils import format_decimal, parse_decimal, parse_rfc3339, to_epoch_millis, to_wire_name


@pytest.mark.parametrize(
    "field, key",
    [
        ("display_name", "displayName"),
        ("quote_home_conversion_factors", "quoteHomeConversionFactors"),
        ("last_transaction_id", "lastTransactionID"),
        ("related_transaction_ids", "relatedTransactionIDs"),
        ("trade_ids", "tradeIDs"),
        ("unrealized_pl", "unrealizedPL"),
        ("resettable_pl", "resettablePL"),
        ("user_id", "userID"),
        ("type", "type"),
        ("pl", "pl"),
    ],
)
def test_to_wire_name(field, key):
    assert to_wire_name(field) == key


def test_parse_rfc3339_truncates_nanoseconds():
    stamp = parse_rfc3339("2024-01-01T00:00:00.123456789Z")
    assert stamp == datetime(2024, 1, 1, 0, 0, 0, 123456, tzinfo=timezone.utc)
    assert to_epoch_millis(stamp) == 1704067200123


def test_parse_rfc3339_with_offset():
    stamp = parse_rfc3339("2024-01-01T02:00:00+02:00")
    assert to_epoch_millis(stamp) == 1704067200000


@pytest.mark.parametrize("text", ["", "2024-01-01", "1704067200.000000000", "2024-13-01T00:00:00Z", None])
def test_parse_rfc3339_rejects(text):
    with pytest.raises(ValueError):
        parse_rfc3339(text)


def test_format_decimal():
    assert format_decimal(100) == "100"
    assert format_decimal("-250") == "-250"
    assert format_decimal(Decimal("1.50")) == "1.50"
    with pytest.raises(TypeError):
        format_decimal(1.5)
    with pytest.raises(ValueError):
        format_decimal("ten")


def test_parse_decimal_rejects_non_numbers():
    assert parse_decimal("1.1002") == Decimal("1.1002")
    for bad in ("abc", "NaN", "", None):
        with pytest.raises(ValueError):
            parse_decimal(bad)


@pytest.mark.parametrize("text", ["2024-01-01T00:00:00Z\n", "2024-01-01T00:00:00+00:99", "2024-01-01T00:00:00+00:60"])
def test_parse_rfc3339_rejects_bad_suffix(text):
    with pytest.raises(ValueError):
        parse_rfc3339(text)
