"""Per-pair market data: limits, rates and market info.

None of these endpoints has a "get all" form. The get_all_* methods derive
every pair from a fresh catalog fetch and then issue one request per pair,
sequentially, which is O(n^2) requests for n available coins.
"""

import logging

from ..core.models import TradingLimit, TradingMarketInfo, TradingRate
from ..mapping import schemas
from ..transport.base import CancellationToken
from .base import BaseService
from .fanout import aggregate
from .pairs import PairService, pair_token

logger = logging.getLogger(__name__)


class MarketService(BaseService):
    """Limit, rate and market-info lookups."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.pairs = PairService(self.transport, self.config)

    def get_limit(
        self,
        pair: str,
        ticker2: str | None = None,
        cancel_token: CancellationToken | None = None,
    ) -> TradingLimit:
        """
        Get the deposit limit for a pair.

        Args:
            pair: Pair token ("btc_ltc"), or the first ticker if ticker2 is given
            ticker2: Optional second ticker

        Returns:
            TradingLimit record
        """
        if ticker2 is not None:
            pair = pair_token(pair, ticker2)
        return self._get_record(self._url("limit", pair), schemas.TRADING_LIMIT, cancel_token)

    def get_rate(
        self,
        pair: str,
        ticker2: str | None = None,
        cancel_token: CancellationToken | None = None,
    ) -> TradingRate:
        """Get the current exchange rate for a pair."""
        if ticker2 is not None:
            pair = pair_token(pair, ticker2)
        return self._get_record(self._url("rate", pair), schemas.TRADING_RATE, cancel_token)

    def get_market_info(
        self,
        pair: str,
        ticker2: str | None = None,
        cancel_token: CancellationToken | None = None,
    ) -> TradingMarketInfo:
        """Get rate, limit, minimum and miner fee for a pair."""
        if ticker2 is not None:
            pair = pair_token(pair, ticker2)
        return self._get_record(
            self._url("marketinfo", pair), schemas.TRADING_MARKET_INFO, cancel_token
        )

    def get_all_limits(self, cancel_token: CancellationToken | None = None) -> list[TradingLimit]:
        """Get limits for every derived pair."""
        pairs = self.pairs.all_pairs(cancel_token)
        return aggregate(
            pairs, lambda p: self.get_limit(p, cancel_token=cancel_token), cancel_token
        )

    def get_all_rates(self, cancel_token: CancellationToken | None = None) -> list[TradingRate]:
        """Get rates for every derived pair."""
        pairs = self.pairs.all_pairs(cancel_token)
        return aggregate(
            pairs, lambda p: self.get_rate(p, cancel_token=cancel_token), cancel_token
        )

    def get_all_market_info(
        self, cancel_token: CancellationToken | None = None
    ) -> list[TradingMarketInfo]:
        """Get market info for every derived pair."""
        pairs = self.pairs.all_pairs(cancel_token)
        return aggregate(
            pairs, lambda p: self.get_market_info(p, cancel_token=cancel_token), cancel_token
        )
