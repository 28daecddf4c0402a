"""ShapeShift exchange client.

A typed client for the ShapeShift REST API: streams each JSON response
through a field-driven mapper into immutable records, and builds
per-pair aggregates (limits, rates, market info) from the coin catalog.
"""

__version__ = "0.1.0"

from .client import ShapeShiftClient  # noqa: E402

__all__ = ["ShapeShiftClient", "__version__"]
