"""Tests for output formatters."""

import json

from shapeshift_client.core.models import TradingRate, TxStatus
from shapeshift_client.core.types import TxState
from shapeshift_client.output.formatters import JSONFormatter, TableFormatter


class TestJSONFormatter:
    """Tests for JSONFormatter."""

    def test_single_record(self):
        data = json.loads(JSONFormatter().format(TradingRate(pair="btc_ltc", rate=70.5)))
        assert data == {"error": None, "pair": "btc_ltc", "rate": 70.5}

    def test_enum_values_serialized(self):
        data = json.loads(JSONFormatter().format([TxStatus(status=TxState.COMPLETE)]))
        assert data[0]["status"] == "complete"

    def test_format_to_file(self, tmp_path):
        path = tmp_path / "rates.json"
        JSONFormatter().format_to_file([TradingRate(pair="a_b", rate=1.0)], str(path))
        assert json.loads(path.read_text())[0]["pair"] == "a_b"


class TestTableFormatter:
    """Tests for TableFormatter."""

    def test_error_column_hidden_when_unused(self):
        output = TableFormatter(title="Rates").format([TradingRate(pair="btc_ltc", rate=70.5)])
        assert "btc_ltc" in output
        assert "error" not in output

    def test_error_column_shown(self):
        output = TableFormatter().format(
            [TradingRate(pair="btc_ltc", rate=1.0), TradingRate(error="Unknown pair")]
        )
        assert "Unknown pair" in output

    def test_empty(self):
        assert "No records" in TableFormatter().format([])
