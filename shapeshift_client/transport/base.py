"""Transport interface and cancellation support."""

import threading
from typing import Any, Protocol, runtime_checkable

from ..core.exceptions import OperationCancelledError


class CancellationToken:
    """Cooperative cancellation flag shared between a caller and a request flow."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        """Request cancellation; takes effect at the next check."""
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def wait(self, timeout: float) -> bool:
        """Block up to timeout seconds; return True early if cancelled."""
        return self._event.wait(timeout)

    def raise_if_cancelled(self, operation: str = "request") -> None:
        """Raise OperationCancelledError if cancellation was requested."""
        if self._event.is_set():
            raise OperationCancelledError(operation)


@runtime_checkable
class Transport(Protocol):
    """Raw HTTP capability used by every service.

    Implementations return the response body as text and raise
    TransportError on network faults or non-2xx statuses.
    """

    def get(self, url: str, cancel_token: CancellationToken | None = None) -> str:
        ...

    def post_json(
        self,
        url: str,
        body: dict[str, Any],
        cancel_token: CancellationToken | None = None,
    ) -> str:
        ...
