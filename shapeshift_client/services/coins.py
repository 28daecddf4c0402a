"""Coin catalog - every currency the exchange lists.

The getcoins endpoint returns an object keyed by symbol, one nested object
per coin, in a single unpaginated response:

    {"BTC": {"name": "Bitcoin", "symbol": "BTC", "image": "...", "status": "available"}, ...}

The catalog is fetched fresh on every call; nothing is cached.
"""

import logging

from ..core.exceptions import CoinNotFoundError
from ..core.models import Coin
from ..mapping import schemas
from ..transport.base import CancellationToken
from .base import BaseService

logger = logging.getLogger(__name__)


class CoinCatalog(BaseService):
    """Fetches the list of supported coins."""

    def fetch_all(self, cancel_token: CancellationToken | None = None) -> list[Coin]:
        """
        Get every coin the exchange lists, in response order.

        Returns:
            List of Coin records (available and unavailable)
        """
        coins = self._get_list(self._url("getcoins"), schemas.COIN, cancel_token)
        available = sum(1 for c in coins if c.is_available)
        logger.debug(f"Coin catalog: {len(coins)} coins, {available} available")
        return coins

    def get_coin(self, symbol: str, cancel_token: CancellationToken | None = None) -> Coin:
        """
        Get a single coin by ticker symbol.

        There is no dedicated endpoint; this filters the full catalog.
        The match is exact and case-sensitive.

        Args:
            symbol: Ticker symbol, e.g. "BTC"

        Returns:
            The first catalog entry with that symbol

        Raises:
            CoinNotFoundError: If no entry has that symbol
        """
        for coin in self.fetch_all(cancel_token):
            if coin.symbol == symbol:
                return coin
        raise CoinNotFoundError(symbol)
