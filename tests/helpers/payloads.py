"""Sample v3 API payloads."""


def instrument_payload(name, margin_rate="0.0333"):
    return {
        "name": name,
        "type": "CURRENCY",
        "displayName": name.replace("_", "/"),
        "pipLocation": -4,
        "displayPrecision": 5,
        "tradeUnitsPrecision": 0,
        "minimumTradeSize": "1",
        "maximumTrailingStopDistance": "1.00000",
        "minimumTrailingStopDistance": "0.00050",
        "maximumPositionSize": "0",
        "maximumOrderUnits": "100000000",
        "marginRate": margin_rate,
        "guaranteedStopLossOrderMode": "DISABLED",
    }


def price_payload(bid="1.1000", ask="1.1002", time="2024-01-01T00:00:00.000000000Z"):
    return {
        "type": "PRICE",
        "instrument": "EUR_USD",
        "time": time,
        "status": "tradeable",
        "tradeable": True,
        "bids": [{"price": bid, "liquidity": 1000000}] if bid is not None else [],
        "asks": [{"price": ask, "liquidity": 1000000}] if ask is not None else [],
        "closeoutBid": "1.0998",
        "closeoutAsk": "1.1004",
        "quoteHomeConversionFactors": {"positiveUnits": "1.00000000", "negativeUnits": "1.00000000"},
        "unitsAvailable": {
            "default": {"long": "2534", "short": "2534"},
            "openOnly": {"long": "2534", "short": "2534"},
            "reduceFirst": {"long": "2534", "short": "2534"},
            "reduceOnly": {"long": "0", "short": "0"},
        },
    }


def position_payload(instrument="EUR_USD", long_units="100", short_units=None):
    payload = {
        "instrument": instrument,
        "pl": "-12.5",
        "unrealizedPL": "3.2",
        "resettablePL": "-12.5",
        "marginUsed": "3.3",
        "commission": "0",
        "long": {
            "units": long_units,
            "averagePrice": "1.1002",
            "pl": "-12.5",
            "unrealizedPL": "3.2",
            "resettablePL": "-12.5",
            "financing": "-0.01",
            "tradeIDs": ["6397"],
        },
    }
    if short_units is not None:
        payload["short"] = {"units": short_units, "pl": "0", "unrealizedPL": "0", "resettablePL": "0"}
    return payload


def filled_order_payload(units="100"):
    return {
        "lastTransactionID": "6399",
        "relatedTransactionIDs": ["6398", "6399"],
        "orderCreateTransaction": {
            "id": "6398",
            "time": "2024-01-01T00:00:01.000000000Z",
            "type": "MARKET_ORDER",
            "userID": 1,
            "accountID": "101-001-1-001",
            "batchID": "6398",
            "requestID": "42",
            "instrument": "EUR_USD",
            "units": units,
            "timeInForce": "FOK",
            "positionFill": "DEFAULT",
            "reason": "CLIENT_ORDER",
        },
        "orderFillTransaction": {
            "id": "6399",
            "time": "2024-01-01T00:00:01.000000000Z",
            "type": "ORDER_FILL",
            "userID": 1,
            "accountID": "101-001-1-001",
            "batchID": "6398",
            "orderID": "6398",
            "instrument": "EUR_USD",
            "units": units,
            "price": "1.1002",
            "pl": "0.0000",
            "financing": "0.0000",
            "commission": "0.0000",
            "accountBalance": "100000.0000",
            "reason": "MARKET_ORDER",
            "tradeOpened": {"tradeID": "6399", "units": units, "price": "1.1002"},
        },
    }


def cancelled_order_payload(units="100"):
    payload = filled_order_payload(units)
    del payload["orderFillTransaction"]
    payload["orderCancelTransaction"] = {
        "id": "6399",
        "time": "2024-01-01T00:00:01.000000000Z",
        "type": "ORDER_CANCEL",
        "orderID": "6398",
        "reason": "MARKET_HALTED",
    }
    return payload
