"""Field tables for every record the exchange returns."""

from functools import partial
from typing import Any

from ..core.models import (
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
    TradingRate,
    Tx,
    TxStatus,
    ValidateAddress,
)
from ..core.types import (
    TX_HISTORY_VOCABULARY,
    TX_STATUS_VOCABULARY,
    CoinStatus,
    EmailStatus,
    TimeStatus,
    TxState,
)
from .fields import FieldSpec, RecordSchema, as_bool, as_float, field


def _cancel_success(values: dict[str, Any], raw: str) -> None:
    values["success"] = True
    values["message"] = raw


def _cancel_error(values: dict[str, Any], raw: str) -> None:
    values["success"] = False
    values["error"] = raw


COIN = RecordSchema(
    Coin,
    [
        field("name", "name"),
        field("symbol", "symbol"),
        field("image", "image_link"),
        field("status", "status", CoinStatus.decode),
    ],
    presence_marker="name",
)

TRADING_LIMIT = RecordSchema(
    TradingLimit,
    [
        field("pair", "pair"),
        field("limit", "limit", as_float),
    ],
)

TRADING_RATE = RecordSchema(
    TradingRate,
    [
        field("pair", "pair"),
        field("rate", "rate", as_float),
    ],
)

TRADING_MARKET_INFO = RecordSchema(
    TradingMarketInfo,
    [
        field("pair", "pair"),
        field("rate", "rate", as_float),
        field("limit", "limit", as_float),
        field("min", "minimum", as_float),
        field("minerFee", "miner_fee", as_float),
    ],
)

RECENT_TX = RecordSchema(
    RecentTx,
    [
        field("curIn", "currency_input"),
        field("curOut", "currency_output"),
        field("amount", "amount", as_float),
        field("timestamp", "timestamp", as_float),
    ],
    presence_marker="currency_input",
)

TX = RecordSchema(
    Tx,
    [
        field("inputTXID", "input_txid"),
        field("inputAddress", "input_address"),
        field("inputCurrency", "input_coin"),
        field("inputAmount", "input_amount", as_float),
        field("outputTXID", "output_txid"),
        field("outputAddress", "output_address"),
        field("outputCurrency", "output_coin"),
        field("outputAmount", "output_amount", as_float),
        field("shiftRate", "shift_rate", as_float),
        field(
            "status",
            "status",
            partial(TxState.decode, vocabulary=TX_HISTORY_VOCABULARY, default=TxState.NO_DEPOSITS),
        ),
    ],
    presence_marker="input_txid",
)

TX_STATUS = RecordSchema(
    TxStatus,
    [
        field(
            "status",
            "status",
            partial(TxState.decode, vocabulary=TX_STATUS_VOCABULARY, default=TxState.RETURNED),
        ),
        field("address", "address"),
        field("withdraw", "withdrawal_address"),
        field("incomingCoin", "incoming_amount", as_float),
        field("incomingType", "incoming_coin"),
        field("outgoingCoin", "outgoing_amount", as_float),
        field("outgoingType", "outgoing_coin"),
        field("transaction", "txid"),
        field("error", "error"),
    ],
)

TIME_REMAINING = RecordSchema(
    TimeRemaining,
    [
        field("status", "status", TimeStatus.decode),
        field("seconds_remaining", "seconds_remaining", as_float),
    ],
)

CANCEL_RESULT = RecordSchema(
    CancelResult,
    [
        FieldSpec("success", _cancel_success),
        FieldSpec("error", _cancel_error),
    ],
)

EMAIL_RECEIPT = RecordSchema(
    EmailReceipt,
    [
        field("status", "status", EmailStatus.decode),
        field("message", "message"),
    ],
)

VALIDATE_ADDRESS = RecordSchema(
    ValidateAddress,
    [
        field("isValid", "is_valid", as_bool),
    ],
)

SHIFT_RESULT = RecordSchema(
    ShiftResult,
    [
        field("deposit", "deposit_address"),
        field("depositType", "deposit_coin"),
        field("withdrawal", "withdrawal_address"),
        field("withdrawalType", "withdrawal_coin"),
        field("public", "nxt_rs_address"),
        field("xrpDestTag", "ripple_tag"),
        field("apiPubKey", "api_key"),
    ],
)

SEND_AMOUNT = RecordSchema(
    SendAmountRequest,
    [
        field("pair", "pair"),
        field("withdrawal", "withdrawal_address"),
        field("withdrawalAmount", "withdrawal_amount", as_float),
        field("deposit", "deposit_address"),
        field("depositAmount", "deposit_amount", as_float),
        field("expiration", "expiration", as_float),
        field("quotedRate", "quoted_rate", as_float),
        field("apiPubKey", "api_key"),
    ],
)

QUOTE = RecordSchema(
    QuoteRequest,
    [
        field("pair", "pair"),
        field("withdrawalAmount", "withdrawal_amount", as_float),
        field("depositAmount", "deposit_amount", as_float),
        field("expiration", "expiration", as_float),
        field("quotedRate", "quoted_rate", as_float),
        field("minerFee", "miner_fee", as_float),
    ],
)
