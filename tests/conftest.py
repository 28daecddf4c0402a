"""Pytest configuration and fixtures for ShapeShift client tests."""

import json
from collections.abc import Callable
from typing import Any

import pytest

from shapeshift_client.core.config import ClientConfig
from shapeshift_client.core.models import Coin
from shapeshift_client.core.types import CoinStatus

BASE_URL = "https://shapeshift.io"


class FakeTransport:
    """Transport double that serves canned bodies by URL and records every call."""

    def __init__(self, responses: dict[str, Any] | None = None):
        self.responses: dict[str, Any] = responses or {}
        self.calls: list[tuple[str, str, dict | None]] = []

    def get(self, url: str, cancel_token=None) -> str:
        self.calls.append(("GET", url, None))
        return self._respond(url)

    def post_json(self, url: str, body: dict, cancel_token=None) -> str:
        self.calls.append(("POST", url, body))
        return self._respond(url)

    def _respond(self, url: str) -> str:
        response = self.responses[url]
        if isinstance(response, Exception):
            raise response
        if callable(response):
            return response(url)
        return response

    @property
    def urls(self) -> list[str]:
        return [url for _, url, _ in self.calls]


@pytest.fixture
def config() -> ClientConfig:
    """Config with defaults and no affiliate keys."""
    return ClientConfig(base_url=BASE_URL)


@pytest.fixture
def fake_transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def coins_response() -> str:
    """getcoins body: three available coins and one unavailable."""
    return json.dumps(
        {
            "BTC": {
                "name": "Bitcoin",
                "symbol": "BTC",
                "image": "https://shapeshift.io/images/coins/bitcoin.png",
                "status": "available",
            },
            "LTC": {
                "name": "Litecoin",
                "symbol": "LTC",
                "image": "https://shapeshift.io/images/coins/litecoin.png",
                "status": "available",
            },
            "NMC": {
                "name": "Namecoin",
                "symbol": "NMC",
                "image": "https://shapeshift.io/images/coins/namecoin.png",
                "status": "unavailable",
            },
            "ETH": {
                "name": "Ether",
                "symbol": "ETH",
                "image": "https://shapeshift.io/images/coins/ether.png",
                "status": "available",
            },
        }
    )


@pytest.fixture
def make_coins() -> Callable[..., list[Coin]]:
    """Build a catalog from (symbol, available) tuples."""

    def _make(*entries: tuple[str, bool]) -> list[Coin]:
        return [
            Coin(
                name=symbol.title(),
                symbol=symbol,
                status=CoinStatus.AVAILABLE if available else CoinStatus.UNAVAILABLE,
            )
            for symbol, available in entries
        ]

    return _make


@pytest.fixture
def tx_list_response() -> str:
    """txbyapikey body with two shifts."""
    return json.dumps(
        [
            {
                "inputTXID": "in-1",
                "inputAddress": "1BTCaddr",
                "inputCurrency": "BTC",
                "inputAmount": 0.5,
                "outputTXID": "out-1",
                "outputAddress": "LTCaddr",
                "outputCurrency": "LTC",
                "outputAmount": "35.06",
                "shiftRate": "70.12",
                "status": "complete",
            },
            {
                "inputTXID": "in-2",
                "inputAddress": "1BTCaddr2",
                "inputCurrency": "BTC",
                "inputAmount": "1",
                "outputTXID": "",
                "outputAddress": "LTCaddr2",
                "outputCurrency": "LTC",
                "outputAmount": "0",
                "shiftRate": "70.1",
                "status": "received",
            },
        ]
    )
