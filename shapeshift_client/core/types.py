"""Type definitions and enums for the ShapeShift client.

Each enum decodes the exchange's raw status text against a fixed,
case-sensitive vocabulary. Text outside the vocabulary falls back to a
per-field default variant instead of failing.
"""

from enum import Enum
from typing import Literal


class CoinStatus(str, Enum):
    """Exchange availability of a coin."""

    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"

    @classmethod
    def decode(cls, raw: str) -> "CoinStatus":
        """Only the literal "available" is available."""
        return cls.AVAILABLE if raw == "available" else cls.UNAVAILABLE


class TxState(str, Enum):
    """Lifecycle state of a shift transaction."""

    NO_DEPOSITS = "no_deposits"
    RECEIVED = "received"
    RETURNED = "returned"
    COMPLETE = "complete"
    FAILED = "failed"

    @classmethod
    def decode(
        cls,
        raw: str,
        vocabulary: frozenset[str] | None = None,
        default: "TxState | None" = None,
    ) -> "TxState":
        """
        Decode a status string.

        Args:
            raw: Raw status text from the response
            vocabulary: Values recognised for this field (all variants if omitted)
            default: Variant used for anything outside the vocabulary

        Returns:
            Matching variant, or the default
        """
        fallback = default if default is not None else cls.RETURNED
        if vocabulary is not None and raw not in vocabulary:
            return fallback
        try:
            return cls(raw)
        except ValueError:
            return fallback


class TimeStatus(str, Enum):
    """Deposit window state for a pending shift."""

    PENDING = "pending"
    EXPIRED = "expired"

    @classmethod
    def decode(cls, raw: str) -> "TimeStatus":
        return cls.PENDING if raw == "pending" else cls.EXPIRED


class EmailStatus(str, Enum):
    """Outcome of an email receipt request."""

    SUCCESS = "success"
    FAILURE = "failure"

    @classmethod
    def decode(cls, raw: str) -> "EmailStatus":
        return cls.SUCCESS if raw == "success" else cls.FAILURE


# txStat reports no_deposits; anything unrecognised is treated as returned
TX_STATUS_VOCABULARY = frozenset({"no_deposits", "received", "complete", "failed"})
# txbyapikey / txbyaddress report returned; anything unrecognised is no_deposits
TX_HISTORY_VOCABULARY = frozenset({"received", "complete", "returned", "failed"})

HttpMethod = Literal["GET", "POST"]
