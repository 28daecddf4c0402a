"""Endpoint services for the ShapeShift client.

This module contains services for:
- Coin catalog and pair derivation
- Market data (limits, rates, market info) with per-pair fan-out
- Transactions and deposit status
- Shifting and quotes
"""

from .base import BaseService
from .coins import CoinCatalog
from .fanout import aggregate
from .market import MarketService
from .pairs import PairService, derive_pairs, pair_token
from .shifting import ShiftService
from .transactions import TransactionService

__all__ = [
    "BaseService",
    "CoinCatalog",
    "aggregate",
    "MarketService",
    "PairService",
    "derive_pairs",
    "pair_token",
    "ShiftService",
    "TransactionService",
]
