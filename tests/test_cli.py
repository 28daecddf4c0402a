"""Tests for the command line interface."""

import json

import pytest
from typer.testing import CliRunner

from shapeshift_client.cli import main as cli_main
from shapeshift_client.client import ShapeShiftClient

BASE_URL = "https://shapeshift.io"

runner = CliRunner()


@pytest.fixture
def cli_transport(monkeypatch, config, fake_transport):
    """Route every CLI command through the fake transport."""
    monkeypatch.setattr(
        cli_main, "make_client", lambda: ShapeShiftClient(config, transport=fake_transport)
    )
    return fake_transport


class TestCommands:
    """Tests for CLI commands."""

    def test_rate_json(self, cli_transport):
        cli_transport.responses[f"{BASE_URL}/rate/btc_ltc"] = '{"pair":"btc_ltc","rate":"70.5"}'

        result = runner.invoke(cli_main.app, ["rate", "btc", "ltc", "--output", "json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["pair"] == "btc_ltc"
        assert data["rate"] == 70.5
        assert data["error"] is None

    def test_pairs_table(self, cli_transport, coins_response):
        cli_transport.responses[f"{BASE_URL}/getcoins"] = coins_response

        result = runner.invoke(cli_main.app, ["pairs"])

        assert result.exit_code == 0
        assert "BTC_LTC" in result.stdout
        assert "NMC" not in result.stdout

    def test_coin_not_found(self, cli_transport, coins_response):
        cli_transport.responses[f"{BASE_URL}/getcoins"] = coins_response

        result = runner.invoke(cli_main.app, ["coin", "DOGE"])

        assert result.exit_code == 1
        assert "DOGE" in result.stdout

    def test_recent_out_of_range(self, cli_transport):
        """Invalid input exits non-zero without touching the network."""
        result = runner.invoke(cli_main.app, ["recent", "--max", "0"])

        assert result.exit_code == 1
        assert "Validation failed" in result.stdout
        assert cli_transport.calls == []

    def test_version(self):
        result = runner.invoke(cli_main.app, ["version"])
        assert result.exit_code == 0
        assert "shapeshift-client" in result.stdout
