# oanda_trading/core/utils.py
import re
from datetime import datetime, timedelta, timezone
from decimal import Decimal, InvalidOperation

from pydantic.alias_generators import to_camel

# Wire keys that keep upper-case acronyms instead of plain camelCase.
WIRE_NAME_OVERRIDES = {
    "last_transaction_id": "lastTransactionID",
    "account_id": "accountID",
    "batch_id": "batchID",
    "order_id": "orderID",
    "user_id": "userID",
    "request_id": "requestID",
    "related_transaction_ids": "relatedTransactionIDs",
    "trade_id": "tradeID",
    "trade_ids": "tradeIDs",
    "resettable_pl": "resettablePL",
    "unrealized_pl": "unrealizedPL",
}

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_RFC3339 = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2})[Tt](\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?"
    r"(?:([Zz])|([+-])(\d{2}):([0-5]\d))\Z"
)


def to_wire_name(field_name):
    """Maps a snake_case field name to its JSON key."""
    if field_name in WIRE_NAME_OVERRIDES:
        return WIRE_NAME_OVERRIDES[field_name]
    return to_camel(field_name)


def format_decimal(value):
    """Formats a number as decimal text without going through float."""
    if isinstance(value, float):
        raise TypeError("pass units as str, int or Decimal, not float")
    try:
        number = Decimal(str(value))
    except InvalidOperation as e:
        raise ValueError(f"not a decimal value: {value!r}") from e
    if not number.is_finite():
        raise ValueError(f"not a finite decimal value: {value!r}")
    return format(number, "f")


def parse_decimal(text):
    """Parses decimal text, raising ValueError on anything else."""
    try:
        number = Decimal(text)
    except (InvalidOperation, TypeError) as e:
        raise ValueError(f"not a decimal value: {text!r}") from e
    if not number.is_finite():
        raise ValueError(f"not a finite decimal value: {text!r}")
    return number


def parse_rfc3339(text):
    """Parses an RFC3339 timestamp into an aware UTC datetime.

    Fractional seconds may carry up to nanosecond precision; anything past
    microseconds is truncated.
    """
    match = _RFC3339.match(text or "")
    if match is None:
        raise ValueError(f"not an RFC3339 timestamp: {text!r}")
    year, month, day, hour, minute, second, fraction, zulu, sign, off_h, off_m = match.groups()
    micros = int((fraction or "0")[:6].ljust(6, "0"))
    if zulu:
        tz = timezone.utc
    else:
        offset = timedelta(hours=int(off_h), minutes=int(off_m))
        tz = timezone(-offset if sign == "-" else offset)
    stamp = datetime(int(year), int(month), int(day), int(hour), int(minute), int(second), micros, tzinfo=tz)
    return stamp.astimezone(timezone.utc)


def to_epoch_millis(stamp):
    return (stamp - EPOCH) // timedelta(milliseconds=1)
