"""Shift creation, fixed-amount shifts and quotes.

The sendamount endpoint serves both the fixed-amount shift and the quote;
a quote simply omits the withdrawal address. Optional body fields are left
out entirely when empty, and amounts are sent as text.
"""

import logging
from typing import Any

from ..core.models import QuoteRequest, SendAmountRequest, ShiftResult
from ..mapping import schemas
from ..transport.base import CancellationToken
from .base import BaseService

logger = logging.getLogger(__name__)


def format_amount(amount: float) -> str:
    """Amount as request text: "123" for whole numbers, else the shortest float repr."""
    value = float(amount)
    if value.is_integer():
        return str(int(value))
    return repr(value)


class ShiftService(BaseService):
    """Endpoints that start or price an exchange."""

    def _optional_fields(
        self,
        body: dict[str, Any],
        return_address: str,
        dest_tag: str,
        rs_address: str,
        api_key: str,
    ) -> dict[str, Any]:
        api_key = api_key or self.config.api_key or ""
        optional = {
            "returnAddress": return_address,
            "destTag": dest_tag,
            "rsAddress": rs_address,
            "apiKey": api_key,
        }
        body.update({key: value for key, value in optional.items() if value})
        return body

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
        """
        Start a shift and get its deposit address.

        Args:
            withdrawal: Address the output coin is sent to
            pair: Pair token, e.g. "btc_ltc"
            return_address: Refund address if the exchange fails
            dest_tag: Ripple destination tag for the payout
            rs_address: NXT RS-address, for funding new NXT accounts
            api_key: Affiliate PUBLIC key; falls back to configuration

        Returns:
            ShiftResult with deposit instructions (or error)
        """
        body = self._optional_fields(
            {"withdrawal": withdrawal, "pair": pair},
            return_address,
            dest_tag,
            rs_address,
            api_key,
        )
        logger.info(f"Requesting shift {pair}")
        return self._post_record(self._url("shift"), body, schemas.SHIFT_RESULT, cancel_token)

    def send_amount(
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
        """
        Start a fixed-amount shift.

        Args:
            amount: Amount to be received at the withdrawal address
            withdrawal: Address the output coin is sent to
            pair: Pair token, e.g. "ltc_btc"

        Returns:
            SendAmountRequest with the exact deposit amount and quoted rate
        """
        body = self._optional_fields(
            {"amount": format_amount(amount), "withdrawal": withdrawal, "pair": pair},
            return_address,
            dest_tag,
            rs_address,
            api_key,
        )
        logger.info(f"Requesting fixed-amount shift {pair} for {body['amount']}")
        return self._post_record(
            self._url("sendamount"), body, schemas.SEND_AMOUNT, cancel_token
        )

    def quote(
        self,
        pair: str,
        amount: float,
        cancel_token: CancellationToken | None = None,
    ) -> QuoteRequest:
        """Price a fixed-amount shift without committing to it."""
        body = {"amount": format_amount(amount), "pair": pair}
        return self._post_record(self._url("sendamount"), body, schemas.QUOTE, cancel_token)
