"""Core module - data models, types, config and exceptions."""

from .models import (
    ExchangeRecord,
    Coin,
    TradingPair,
    TradingLimit,
    TradingRate,
    TradingMarketInfo,
    RecentTx,
    Tx,
    TxStatus,
    TimeRemaining,
    CancelResult,
    EmailReceipt,
    ValidateAddress,
    ShiftResult,
    SendAmountRequest,
    QuoteRequest,
    RequestAudit,
)
from .types import (
    CoinStatus,
    TxState,
    TimeStatus,
    EmailStatus,
)
from .exceptions import (
    ShapeShiftError,
    TransportError,
    RateLimitError,
    MalformedDocumentError,
    NumericDecodeError,
    ValidationError,
    OperationCancelledError,
    CoinNotFoundError,
    ConfigurationError,
)
from .config import ClientConfig, get_config, reload_config

__all__ = [
    # Models
    "ExchangeRecord",
    "Coin",
    "TradingPair",
    "TradingLimit",
    "TradingRate",
    "TradingMarketInfo",
    "RecentTx",
    "Tx",
    "TxStatus",
    "TimeRemaining",
    "CancelResult",
    "EmailReceipt",
    "ValidateAddress",
    "ShiftResult",
    "SendAmountRequest",
    "QuoteRequest",
    "RequestAudit",
    # Types
    "CoinStatus",
    "TxState",
    "TimeStatus",
    "EmailStatus",
    # Exceptions
    "ShapeShiftError",
    "TransportError",
    "RateLimitError",
    "MalformedDocumentError",
    "NumericDecodeError",
    "ValidationError",
    "OperationCancelledError",
    "CoinNotFoundError",
    "ConfigurationError",
    # Config
    "ClientConfig",
    "get_config",
    "reload_config",
]
