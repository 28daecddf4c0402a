"""Pydantic data models for the ShapeShift client.

All records are immutable (frozen) once the mapper has built them. Every
field defaults to its zero value so that a record can be built from
whatever subset of fields a response actually carried.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from .types import CoinStatus, EmailStatus, HttpMethod, TimeStatus, TxState


class ExchangeRecord(BaseModel):
    """Base for every record mapped from an exchange response."""

    error: str | None = None  # Service-reported failure, carried as data

    model_config = {"frozen": True}

    @property
    def has_error(self) -> bool:
        """Check if the exchange reported a problem for this record."""
        return self.error is not None


class Coin(ExchangeRecord):
    """A currency listed by the exchange."""

    name: str = ""
    symbol: str = ""
    image_link: str = ""
    status: CoinStatus = CoinStatus.AVAILABLE

    @property
    def is_available(self) -> bool:
        return self.status == CoinStatus.AVAILABLE


class TradingPair(BaseModel):
    """A directed exchange pair derived from the coin catalog."""

    pair: str
    ticker1: str
    ticker2: str

    model_config = {"frozen": True}


class TradingLimit(ExchangeRecord):
    """Maximum deposit accepted for a pair."""

    pair: str = ""
    limit: float = 0.0


class TradingRate(ExchangeRecord):
    """Current exchange rate for a pair."""

    pair: str = ""
    rate: float = 0.0


class TradingMarketInfo(ExchangeRecord):
    """Rate, limits and miner fee for a pair."""

    pair: str = ""
    rate: float = 0.0
    limit: float = 0.0
    minimum: float = 0.0
    miner_fee: float = 0.0


class RecentTx(ExchangeRecord):
    """A recently completed exchange on the public feed."""

    currency_input: str = ""
    currency_output: str = ""
    amount: float = 0.0
    timestamp: float = 0.0  # Seconds since epoch


class Tx(ExchangeRecord):
    """A shift looked up by affiliate key or output address."""

    input_txid: str = ""
    input_address: str = ""
    input_coin: str = ""
    input_amount: float = 0.0
    output_txid: str = ""
    output_address: str = ""
    output_coin: str = ""
    output_amount: float = 0.0
    shift_rate: float = 0.0
    status: TxState = TxState.NO_DEPOSITS


class TxStatus(ExchangeRecord):
    """Status of a deposit to a given address."""

    status: TxState = TxState.NO_DEPOSITS
    address: str = ""
    withdrawal_address: str = ""
    incoming_amount: float = 0.0
    incoming_coin: str = ""
    outgoing_amount: float = 0.0
    outgoing_coin: str = ""
    txid: str = ""


class TimeRemaining(ExchangeRecord):
    """Time left before a pending deposit address expires."""

    status: TimeStatus = TimeStatus.PENDING
    seconds_remaining: float = 0.0


class CancelResult(ExchangeRecord):
    """Outcome of cancelling a pending shift."""

    success: bool = False
    message: str = ""


class EmailReceipt(ExchangeRecord):
    """Outcome of requesting an emailed receipt."""

    status: EmailStatus = EmailStatus.SUCCESS
    message: str = ""


class ValidateAddress(ExchangeRecord):
    """Whether an address is valid for a coin."""

    is_valid: bool = False


class ShiftResult(ExchangeRecord):
    """Deposit instructions returned for a new shift."""

    deposit_address: str = ""
    deposit_coin: str = ""
    withdrawal_address: str = ""
    withdrawal_coin: str = ""
    ripple_tag: str = ""
    nxt_rs_address: str = ""
    api_key: str = ""


class SendAmountRequest(ExchangeRecord):
    """Fixed-amount shift: exact deposit needed for a withdrawal amount."""

    pair: str = ""
    withdrawal_address: str = ""
    withdrawal_amount: float = 0.0
    deposit_address: str = ""
    deposit_amount: float = 0.0
    expiration: float = 0.0
    quoted_rate: float = 0.0
    api_key: str = ""


class QuoteRequest(ExchangeRecord):
    """Price quote for a fixed-amount shift, without a withdrawal address."""

    pair: str = ""
    withdrawal_amount: float = 0.0
    deposit_amount: float = 0.0
    expiration: float = 0.0
    quoted_rate: float = 0.0
    miner_fee: float = 0.0


class RequestAudit(BaseModel):
    """Audit trail entry for a single transport request."""

    timestamp: datetime = Field(default_factory=datetime.utcnow)
    method: HttpMethod
    url: str
    success: bool = True
    status_code: int | None = None
    duration_ms: int | None = None
    error_message: str | None = None

    model_config = {"frozen": True}
