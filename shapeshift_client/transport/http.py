"""httpx-backed transport for the ShapeShift REST API.

One HttpTransport owns one httpx.Client for its whole lifetime. Callers
construct it once, share it between services and close it when done.
"""

import logging
import time
from collections import deque
from datetime import datetime
from typing import Any

import httpx

from ..core.config import ClientConfig
from ..core.exceptions import OperationCancelledError, RateLimitError, TransportError
from ..core.models import RequestAudit
from ..core.types import HttpMethod
from .base import CancellationToken

logger = logging.getLogger(__name__)

DEFAULT_AUDIT_LIMIT = 1000


class HttpTransport:
    """Sends GET / JSON POST requests and returns the raw response text."""

    def __init__(
        self,
        config: ClientConfig | None = None,
        client: httpx.Client | None = None,
        audit_limit: int = DEFAULT_AUDIT_LIMIT,
    ):
        """
        Initialize the transport.

        Args:
            config: Client configuration (defaults are used if omitted)
            client: Pre-built httpx client, e.g. one with a mock transport
            audit_limit: Most recent requests kept in the audit trail
        """
        self.config = config or ClientConfig()
        self.rate_limit_calls = self.config.rate_limit_calls
        self.rate_limit_period = self.config.rate_limit_period
        self._call_timestamps: list[float] = []
        self._audit_entries: deque[RequestAudit] = deque(maxlen=audit_limit)
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=self.config.timeout_seconds)

    def __enter__(self) -> "HttpTransport":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client:
            self._client.close()

    def _wait_for_rate_limit(self, cancel_token: CancellationToken | None = None) -> None:
        """Enforce rate limiting by sleeping if necessary; cancellation cuts the wait short."""
        now = time.time()
        # Clean old timestamps
        self._call_timestamps = [
            ts for ts in self._call_timestamps if now - ts < self.rate_limit_period
        ]

        if len(self._call_timestamps) >= self.rate_limit_calls:
            sleep_time = self._call_timestamps[0] + self.rate_limit_period - now
            if sleep_time > 0:
                logger.debug(f"Rate limit: sleeping {sleep_time:.1f}s")
                if cancel_token is None:
                    time.sleep(sleep_time)
                elif cancel_token.wait(sleep_time):
                    raise OperationCancelledError("rate limit wait")

        self._call_timestamps.append(time.time())

    def _record_audit(
        self,
        method: HttpMethod,
        url: str,
        success: bool = True,
        status_code: int | None = None,
        duration_ms: int | None = None,
        error_message: str | None = None,
    ) -> RequestAudit:
        """Record an audit entry for one request."""
        entry = RequestAudit(
            timestamp=datetime.utcnow(),
            method=method,
            url=url,
            success=success,
            status_code=status_code,
            duration_ms=duration_ms,
            error_message=error_message,
        )
        self._audit_entries.append(entry)
        return entry

    def get_audit_trail(self) -> list[RequestAudit]:
        """Return the most recent audit entries, oldest first."""
        return list(self._audit_entries)

    def clear_audit_trail(self) -> None:
        """Clear the audit trail."""
        self._audit_entries.clear()

    def get(self, url: str, cancel_token: CancellationToken | None = None) -> str:
        """Send a GET request and return the response body."""
        return self._send("GET", url, None, cancel_token)

    def post_json(
        self,
        url: str,
        body: dict[str, Any],
        cancel_token: CancellationToken | None = None,
    ) -> str:
        """Send a JSON POST request and return the response body."""
        return self._send("POST", url, body, cancel_token)

    def _send(
        self,
        method: HttpMethod,
        url: str,
        body: dict[str, Any] | None,
        cancel_token: CancellationToken | None,
    ) -> str:
        if cancel_token is not None:
            cancel_token.raise_if_cancelled(f"{method} {url}")

        self._wait_for_rate_limit(cancel_token)
        start_time = time.time()

        headers = {"user-agent": self.config.user_agent}
        if method == "POST":
            headers["accept"] = "application/json"

        logger.debug(f"{method} {url}")

        try:
            if method == "POST":
                response = self._client.post(url, json=body, headers=headers)
            else:
                response = self._client.get(url, headers=headers)

            duration_ms = int((time.time() - start_time) * 1000)

            if response.status_code == 429:
                self._record_audit(
                    method,
                    url,
                    success=False,
                    status_code=429,
                    duration_ms=duration_ms,
                    error_message="Rate limit exceeded",
                )
                retry_after = response.headers.get("retry-after")
                raise RateLimitError(
                    url=url,
                    retry_after_seconds=int(retry_after) if retry_after and retry_after.isdigit() else None,
                )

            response.raise_for_status()

            self._record_audit(
                method,
                url,
                success=True,
                status_code=response.status_code,
                duration_ms=duration_ms,
            )

            return response.text

        except httpx.HTTPStatusError as e:
            self._record_audit(
                method,
                url,
                success=False,
                status_code=e.response.status_code,
                error_message=f"HTTP {e.response.status_code}",
            )
            raise TransportError(
                message=f"HTTP {e.response.status_code}",
                url=url,
                status_code=e.response.status_code,
            )
        except httpx.RequestError as e:
            self._record_audit(method, url, success=False, error_message=str(e))
            raise TransportError(message=str(e), url=url)
