"""Custom exceptions for the ShapeShift client."""


class ShapeShiftError(Exception):
    """Base exception for all ShapeShift client errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class TransportError(ShapeShiftError):
    """Raised when an HTTP request fails or returns a non-2xx status."""

    def __init__(
        self,
        message: str,
        url: str | None = None,
        status_code: int | None = None,
    ):
        full_message = f"[transport] {message}"
        if url:
            full_message += f" ({url})"
        super().__init__(full_message, {"url": url, "status_code": status_code})
        self.url = url
        self.status_code = status_code


class RateLimitError(TransportError):
    """Raised when the exchange answers with HTTP 429."""

    def __init__(self, url: str | None = None, retry_after_seconds: int | None = None):
        message = "Rate limit exceeded"
        if retry_after_seconds:
            message += f", retry after {retry_after_seconds}s"
        super().__init__(message, url=url, status_code=429)
        self.retry_after_seconds = retry_after_seconds


class MalformedDocumentError(ShapeShiftError):
    """Raised when a response body is not well-formed JSON."""

    def __init__(self, reason: str, snippet: str = ""):
        message = f"Malformed JSON document: {reason}"
        super().__init__(message, {"reason": reason, "snippet": snippet})
        self.reason = reason
        self.snippet = snippet


class NumericDecodeError(ShapeShiftError):
    """Raised when a numeric field holds text that is not a number."""

    def __init__(self, field: str, raw: str):
        message = f"Cannot decode numeric field {field}={raw!r}"
        super().__init__(message, {"field": field, "raw": raw})
        self.field = field
        self.raw = raw


class ValidationError(ShapeShiftError):
    """Raised when caller input is rejected before any request is sent."""

    def __init__(self, field: str, value: str, reason: str):
        message = f"Validation failed for {field}={value}: {reason}"
        super().__init__(message, {"field": field, "value": value, "reason": reason})
        self.field = field
        self.value = value
        self.reason = reason


class OperationCancelledError(ShapeShiftError):
    """Raised when a cancellation token fires before or between requests."""

    def __init__(self, operation: str = "request"):
        super().__init__(f"Operation cancelled: {operation}", {"operation": operation})
        self.operation = operation


class CoinNotFoundError(ShapeShiftError):
    """Raised when a symbol is not present in the coin catalog."""

    def __init__(self, symbol: str):
        super().__init__(f"Coin not found: {symbol}", {"symbol": symbol})
        self.symbol = symbol


class ConfigurationError(ShapeShiftError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, config_key: str, message: str):
        full_message = f"Configuration error [{config_key}]: {message}"
        super().__init__(full_message, {"config_key": config_key})
        self.config_key = config_key
