"""Transaction lookups, deposit status and account-style requests."""

import logging

from ..core.exceptions import ConfigurationError, ValidationError
from ..core.models import (
    CancelResult,
    EmailReceipt,
    RecentTx,
    TimeRemaining,
    Tx,
    TxStatus,
    ValidateAddress,
)
from ..mapping import schemas
from ..transport.base import CancellationToken
from .base import BaseService

logger = logging.getLogger(__name__)

RECENT_TX_MIN = 1
RECENT_TX_MAX = 50
RECENT_TX_DEFAULT = 5


class TransactionService(BaseService):
    """Endpoints that deal with individual shifts and deposit addresses."""

    def recent_transactions(
        self,
        max_transactions: int = RECENT_TX_DEFAULT,
        cancel_token: CancellationToken | None = None,
    ) -> list[RecentTx]:
        """
        Get the most recent exchanges on the public feed.

        Args:
            max_transactions: How many to return, 1 to 50 inclusive

        Returns:
            List of RecentTx, newest first as returned by the exchange

        Raises:
            ValidationError: If max_transactions is out of range (no request is sent)
        """
        if not RECENT_TX_MIN <= max_transactions <= RECENT_TX_MAX:
            raise ValidationError(
                "max",
                str(max_transactions),
                f"must be between {RECENT_TX_MIN} and {RECENT_TX_MAX}",
            )
        return self._get_list(
            self._url("recenttx", max_transactions), schemas.RECENT_TX, cancel_token
        )

    def _private_key(self, api_key: str | None) -> str:
        key = api_key or self.config.private_api_key
        if not key:
            raise ConfigurationError(
                "SHAPESHIFT_PRIVATE_KEY", "a private affiliate key is required"
            )
        return key

    def by_api_key(
        self,
        api_key: str | None = None,
        cancel_token: CancellationToken | None = None,
    ) -> list[Tx]:
        """
        Get all shifts made with an affiliate key.

        An error-only response (e.g. an unknown key) also yields an empty
        list; the exchange's error text is only logged at WARNING, so an
        empty result does not prove the key has no shifts.

        Args:
            api_key: Affiliate PRIVATE key; falls back to configuration
        """
        key = self._private_key(api_key)
        return self._get_list(self._url("txbyapikey", key), schemas.TX, cancel_token)

    def by_address(
        self,
        address: str,
        api_key: str | None = None,
        cancel_token: CancellationToken | None = None,
    ) -> list[Tx]:
        """
        Get all shifts whose output went to an address.

        As with by_api_key, an error-only response yields an empty list
        and the error is only logged.

        Args:
            address: Output address of the shift
            api_key: Affiliate PRIVATE key; falls back to configuration
        """
        key = self._private_key(api_key)
        return self._get_list(
            self._url("txbyaddress", address, key), schemas.TX, cancel_token
        )

    def status(self, address: str, cancel_token: CancellationToken | None = None) -> TxStatus:
        """Get the status of the deposit (to be) made to an address."""
        return self._get_record(self._url("txStat", address), schemas.TX_STATUS, cancel_token)

    def time_remaining(
        self, address: str, cancel_token: CancellationToken | None = None
    ) -> TimeRemaining:
        """Get seconds left before a pending deposit address expires."""
        return self._get_record(
            self._url("timeremaining", address), schemas.TIME_REMAINING, cancel_token
        )

    def validate_address(
        self,
        address: str,
        symbol: str,
        cancel_token: CancellationToken | None = None,
    ) -> ValidateAddress:
        """Check that an address is valid for a coin."""
        return self._get_record(
            self._url("validateaddress", address, symbol),
            schemas.VALIDATE_ADDRESS,
            cancel_token,
        )

    def cancel_pending(
        self, address: str, cancel_token: CancellationToken | None = None
    ) -> CancelResult:
        """Cancel a pending shift by its deposit address."""
        return self._post_record(
            self._url("cancelpending"),
            {"address": address},
            schemas.CANCEL_RESULT,
            cancel_token,
        )

    def email_receipt(
        self,
        email: str,
        txid: str,
        cancel_token: CancellationToken | None = None,
    ) -> EmailReceipt:
        """
        Request an emailed receipt.

        Args:
            email: Address to send the receipt to
            txid: Transaction id of the withdrawal TO the user (not the deposit)
        """
        return self._post_record(
            self._url("mail"),
            {"email": email, "txid": txid},
            schemas.EMAIL_RECEIPT,
            cancel_token,
        )
