"""Trading pair derivation from the coin catalog."""

import logging
from collections.abc import Sequence

from ..core.models import Coin, TradingPair
from ..transport.base import CancellationToken
from .base import BaseService
from .coins import CoinCatalog

logger = logging.getLogger(__name__)


def pair_token(ticker1: str, ticker2: str) -> str:
    """Canonical "{from}_{to}" pair string."""
    return f"{ticker1}_{ticker2}"


def derive_pairs(coins: Sequence[Coin]) -> list[TradingPair]:
    """
    Build every directed pair between distinct available coins.

    For n available coins this yields n * (n - 1) pairs. A_B and B_A are
    both emitted. A pair never joins a symbol with itself, even when the
    catalog lists the same symbol twice.

    Args:
        coins: Coin catalog, in the order the exchange returned it

    Returns:
        Pairs ordered by first coin, then second coin, in catalog order
    """
    available = [coin for coin in coins if coin.is_available]
    pairs = []
    for i, first in enumerate(available):
        for j, second in enumerate(available):
            if i == j or first.symbol == second.symbol:
                continue
            pairs.append(
                TradingPair(
                    pair=pair_token(first.symbol, second.symbol),
                    ticker1=first.symbol,
                    ticker2=second.symbol,
                )
            )
    return pairs


class PairService(BaseService):
    """Derives the pair set from a freshly fetched catalog."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.catalog = CoinCatalog(self.transport, self.config)

    def all_pairs(self, cancel_token: CancellationToken | None = None) -> list[TradingPair]:
        """Fetch the catalog and derive all pairs (one catalog request per call)."""
        pairs = derive_pairs(self.catalog.fetch_all(cancel_token))
        logger.info(f"Derived {len(pairs)} trading pairs")
        return pairs
