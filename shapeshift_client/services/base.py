"""Base class for endpoint services."""

import logging
from typing import Any
from urllib.parse import quote

from ..core.config import ClientConfig
from ..mapping.fields import RecordSchema
from ..mapping.mapper import map_list_response, map_response
from ..transport.base import CancellationToken, Transport

logger = logging.getLogger(__name__)


class BaseService:
    """Shared request → mapping plumbing for every endpoint group."""

    def __init__(self, transport: Transport, config: ClientConfig | None = None):
        """
        Initialize service.

        Args:
            transport: Shared HTTP transport (owned by the caller)
            config: Client configuration; defaults if omitted
        """
        self.transport = transport
        self.config = config or ClientConfig()
        self.base_url = self.config.base_url.rstrip("/")

    def _url(self, endpoint: str, *segments: Any) -> str:
        """Build an endpoint URL with percent-encoded path segments."""
        path = "/".join(quote(str(segment), safe="") for segment in segments)
        url = f"{self.base_url}/{endpoint}"
        return f"{url}/{path}" if path else url

    def _get_record(
        self,
        url: str,
        schema: RecordSchema,
        cancel_token: CancellationToken | None = None,
    ) -> Any:
        response = self.transport.get(url, cancel_token=cancel_token)
        return map_response(response, schema)

    def _get_list(
        self,
        url: str,
        schema: RecordSchema,
        cancel_token: CancellationToken | None = None,
    ) -> list[Any]:
        response = self.transport.get(url, cancel_token=cancel_token)
        return map_list_response(response, schema)

    def _post_record(
        self,
        url: str,
        body: dict[str, Any],
        schema: RecordSchema,
        cancel_token: CancellationToken | None = None,
    ) -> Any:
        response = self.transport.post_json(url, body, cancel_token=cancel_token)
        return map_response(response, schema)
