"""Tests for trading pair derivation."""

import pytest

from shapeshift_client.services.pairs import PairService, derive_pairs, pair_token

BASE_URL = "https://shapeshift.io"


class TestDerivePairs:
    """Tests for the pure derivation function."""

    @pytest.mark.parametrize("available, unavailable", [(0, 0), (1, 2), (2, 0), (3, 2), (5, 1)])
    def test_pair_count(self, make_coins, available, unavailable):
        """n available coins give n * (n - 1) pairs regardless of unavailable ones."""
        entries = [(f"A{i}", True) for i in range(available)]
        entries += [(f"U{i}", False) for i in range(unavailable)]
        pairs = derive_pairs(make_coins(*entries))

        assert len(pairs) == available * (available - 1)
        assert all(p.ticker1 != p.ticker2 for p in pairs)
        assert not any(p.ticker1.startswith("U") or p.ticker2.startswith("U") for p in pairs)

    def test_order_and_direction(self, make_coins):
        """Pairs follow catalog order and include both directions."""
        pairs = derive_pairs(make_coins(("BTC", True), ("NMC", False), ("LTC", True), ("ETH", True)))

        assert [p.pair for p in pairs] == [
            "BTC_LTC",
            "BTC_ETH",
            "LTC_BTC",
            "LTC_ETH",
            "ETH_BTC",
            "ETH_LTC",
        ]
        assert pairs[0].ticker1 == "BTC"
        assert pairs[0].ticker2 == "LTC"

    def test_duplicate_symbol_never_pairs_with_itself(self, make_coins):
        """A symbol listed twice does not produce X_X."""
        pairs = derive_pairs(make_coins(("BTC", True), ("BTC", True), ("LTC", True)))
        assert all(p.ticker1 != p.ticker2 for p in pairs)

    def test_pair_token(self):
        assert pair_token("btc", "ltc") == "btc_ltc"


class TestPairService:
    """Tests for catalog-backed derivation."""

    def test_catalog_fetched_every_call(self, fake_transport, config, coins_response):
        """There is no memoization; each call refetches the catalog."""
        fake_transport.responses[f"{BASE_URL}/getcoins"] = coins_response
        service = PairService(fake_transport, config)

        first = service.all_pairs()
        second = service.all_pairs()

        assert len(first) == 6
        assert first == second
        assert fake_transport.urls == [f"{BASE_URL}/getcoins", f"{BASE_URL}/getcoins"]
        assert "NMC" not in {p.ticker1 for p in first} | {p.ticker2 for p in first}
