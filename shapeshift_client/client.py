"""Public facade over the ShapeShift services.

One method per exchange operation; each delegates to a service. The client
builds one HttpTransport (unless one is injected) and shares it between
all services.
"""

import logging
from typing import Any

from .core.config import ClientConfig, get_config
from .core.models import (
    CancelResult,
    Coin,
    EmailReceipt,
    QuoteRequest,
    RecentTx,
    SendAmountRequest,
    ShiftResult,
    TimeRemaining,
    TradingLimit,
    TradingMarketInfo,
    TradingPair,
    TradingRate,
    Tx,
    TxStatus,
    ValidateAddress,
)
from .services.coins import CoinCatalog
from .services.market import MarketService
from .services.pairs import PairService
from .services.shifting import ShiftService
from .services.transactions import RECENT_TX_DEFAULT, TransactionService
from .transport.base import CancellationToken, Transport
from .transport.http import HttpTransport

logger = logging.getLogger(__name__)


class ShapeShiftClient:
    """Typed client for the ShapeShift REST API."""

    def __init__(
        self,
        config: ClientConfig | None = None,
        transport: Transport | None = None,
    ):
        """
        Initialize the client with all services.

        Args:
            config: Client configuration (loaded from environment if not provided)
            transport: Transport to use; an HttpTransport is created if omitted
        """
        self.config = config or get_config()
        self._owns_transport = transport is None
        self.transport = transport or HttpTransport(self.config)

        self.coins = CoinCatalog(self.transport, self.config)
        self.pairs = PairService(self.transport, self.config)
        self.market = MarketService(self.transport, self.config)
        self.transactions = TransactionService(self.transport, self.config)
        self.shifting = ShiftService(self.transport, self.config)

    def __enter__(self) -> "ShapeShiftClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport and isinstance(self.transport, HttpTransport):
            self.transport.close()

    # Coins and pairs

    def get_all_coins(self, cancel_token: CancellationToken | None = None) -> list[Coin]:
        return self.coins.fetch_all(cancel_token)

    def get_coin(self, symbol: str, cancel_token: CancellationToken | None = None) -> Coin:
        return self.coins.get_coin(symbol, cancel_token)

    def get_all_pairs(self, cancel_token: CancellationToken | None = None) -> list[TradingPair]:
        return self.pairs.all_pairs(cancel_token)

    # Market data

    def get_trade_limit(
        self,
        pair: str,
        ticker2: str | None = None,
        cancel_token: CancellationToken | None = None,
    ) -> TradingLimit:
        return self.market.get_limit(pair, ticker2, cancel_token)

    def get_all_trade_limits(
        self, cancel_token: CancellationToken | None = None
    ) -> list[TradingLimit]:
        return self.market.get_all_limits(cancel_token)

    def get_exchange_rate(
        self,
        pair: str,
        ticker2: str | None = None,
        cancel_token: CancellationToken | None = None,
    ) -> TradingRate:
        return self.market.get_rate(pair, ticker2, cancel_token)

    def get_all_exchange_rates(
        self, cancel_token: CancellationToken | None = None
    ) -> list[TradingRate]:
        return self.market.get_all_rates(cancel_token)

    def get_market_info(
        self,
        pair: str,
        ticker2: str | None = None,
        cancel_token: CancellationToken | None = None,
    ) -> TradingMarketInfo:
        return self.market.get_market_info(pair, ticker2, cancel_token)

    def get_all_market_info(
        self, cancel_token: CancellationToken | None = None
    ) -> list[TradingMarketInfo]:
        return self.market.get_all_market_info(cancel_token)

    # Transactions

    def get_recent_transactions(
        self,
        max_transactions: int = RECENT_TX_DEFAULT,
        cancel_token: CancellationToken | None = None,
    ) -> list[RecentTx]:
        return self.transactions.recent_transactions(max_transactions, cancel_token)

    def get_transactions_by_api_key(
        self,
        api_key: str | None = None,
        cancel_token: CancellationToken | None = None,
    ) -> list[Tx]:
        return self.transactions.by_api_key(api_key, cancel_token)

    def get_transactions_by_address(
        self,
        address: str,
        api_key: str | None = None,
        cancel_token: CancellationToken | None = None,
    ) -> list[Tx]:
        return self.transactions.by_address(address, api_key, cancel_token)

    def get_transaction_status(
        self, address: str, cancel_token: CancellationToken | None = None
    ) -> TxStatus:
        return self.transactions.status(address, cancel_token)

    def check_time_remaining(
        self, address: str, cancel_token: CancellationToken | None = None
    ) -> TimeRemaining:
        return self.transactions.time_remaining(address, cancel_token)

    def validate_address(
        self,
        address: str,
        symbol: str,
        cancel_token: CancellationToken | None = None,
    ) -> ValidateAddress:
        return self.transactions.validate_address(address, symbol, cancel_token)

    def cancel_exchange(
        self, address: str, cancel_token: CancellationToken | None = None
    ) -> CancelResult:
        return self.transactions.cancel_pending(address, cancel_token)

    def request_email_receipt(
        self,
        email: str,
        txid: str,
        cancel_token: CancellationToken | None = None,
    ) -> EmailReceipt:
        return self.transactions.email_receipt(email, txid, cancel_token)

    # Shifting

    def shift(
        self,
        withdrawal: str,
        pair: str,
        return_address: str = "",
        dest_tag: str = "",
        rs_address: str = "",
        api_key: str = "",
        cancel_token: CancellationToken | None = None,
    ) -> ShiftResult:
        return self.shifting.shift(
            withdrawal, pair, return_address, dest_tag, rs_address, api_key, cancel_token
        )

    def get_send_amount(
        self,
        amount: float,
        withdrawal: str,
        pair: str,
        return_address: str = "",
        dest_tag: str = "",
        rs_address: str = "",
        api_key: str = "",
        cancel_token: CancellationToken | None = None,
    ) -> SendAmountRequest:
        return self.shifting.send_amount(
            amount, withdrawal, pair, return_address, dest_tag, rs_address, api_key, cancel_token
        )

    def request_quote(
        self,
        pair: str,
        amount: float,
        cancel_token: CancellationToken | None = None,
    ) -> QuoteRequest:
        return self.shifting.quote(pair, amount, cancel_token)
