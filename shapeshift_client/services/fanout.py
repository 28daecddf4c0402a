"""Sequential per-pair fan-out for endpoints with no "get all" form.

Requests are issued one at a time, each awaited before the next, so the
result order is exactly the pair order. The first failure aborts the whole
aggregate; partial results are never returned.
"""

import logging
from collections.abc import Callable, Sequence
from typing import TypeVar

from ..core.models import TradingPair
from ..transport.base import CancellationToken

logger = logging.getLogger(__name__)

R = TypeVar("R")


def aggregate(
    pairs: Sequence[TradingPair],
    fetch: Callable[[str], R],
    cancel_token: CancellationToken | None = None,
) -> list[R]:
    """
    Call fetch once per pair, in order, and collect the results.

    Args:
        pairs: Pairs to query, usually from derive_pairs
        fetch: Per-pair request taking a pair token
        cancel_token: Checked before every request

    Returns:
        One result per pair, in pair order

    Raises:
        OperationCancelledError: If cancellation is requested mid-way
        Any error raised by fetch, unchanged
    """
    results: list[R] = []
    total = len(pairs)
    logger.info(f"Fan-out: {total} sequential requests")

    for index, pair in enumerate(pairs, 1):
        if cancel_token is not None:
            cancel_token.raise_if_cancelled(f"fan-out at {index}/{total}")
        try:
            results.append(fetch(pair.pair))
        except Exception as e:
            logger.warning(f"Fan-out aborted at {index}/{total} ({pair.pair}): {e}")
            raise
        logger.debug(f"Fan-out {index}/{total}: {pair.pair}")

    return results
