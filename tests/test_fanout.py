"""Tests for sequential per-pair fan-out."""

import pytest

from shapeshift_client.core.exceptions import OperationCancelledError, TransportError
from shapeshift_client.services.fanout import aggregate
from shapeshift_client.services.pairs import derive_pairs
from shapeshift_client.transport.base import CancellationToken


@pytest.fixture
def six_pairs(make_coins):
    """A, B, C available: six directed pairs."""
    return derive_pairs(make_coins(("A", True), ("B", True), ("C", True)))


class TestAggregate:
    """Tests for ordering and failure semantics."""

    def test_results_in_pair_order(self, six_pairs):
        """One call per pair, results in pair order."""
        calls = []

        def fetch(pair):
            calls.append(pair)
            return pair.lower()

        results = aggregate(six_pairs, fetch)

        assert calls == ["A_B", "A_C", "B_A", "B_C", "C_A", "C_B"]
        assert results == ["a_b", "a_c", "b_a", "b_c", "c_a", "c_b"]

    def test_failure_aborts_without_partial_results(self, six_pairs):
        """A failing 4th request propagates and the first 3 results are discarded."""
        calls = []
        results = None

        def fetch(pair):
            calls.append(pair)
            if len(calls) == 4:
                raise TransportError("HTTP 500", url=f"https://shapeshift.io/rate/{pair}", status_code=500)
            return pair

        with pytest.raises(TransportError) as exc_info:
            results = aggregate(six_pairs, fetch)

        assert results is None
        assert len(calls) == 4
        assert exc_info.value.status_code == 500

    def test_cancellation_between_iterations(self, six_pairs):
        """Cancelling stops before the next request is issued."""
        token = CancellationToken()
        calls = []

        def fetch(pair):
            calls.append(pair)
            if len(calls) == 2:
                token.cancel()
            return pair

        with pytest.raises(OperationCancelledError):
            aggregate(six_pairs, fetch, cancel_token=token)

        assert len(calls) == 2

    def test_no_pairs(self):
        """Nothing to fetch yields an empty list."""
        assert aggregate([], lambda pair: pytest.fail("should not be called")) == []
