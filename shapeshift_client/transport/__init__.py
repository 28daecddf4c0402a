"""HTTP transport for the ShapeShift client."""

from .base import CancellationToken, Transport
from .http import HttpTransport

__all__ = ["CancellationToken", "Transport", "HttpTransport"]
