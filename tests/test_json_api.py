"""Tests for JSON API responses built from indicator reports."""

import json

import pytest

from config import IndicatorConfig
from orchestration.pipeline import IndicatorPipeline
from presentation import IndicatorReportResponse, to_api_response, to_json


@pytest.fixture
def report(rising_candles):
    return IndicatorPipeline(IndicatorConfig()).run(rising_candles, symbol="BTCUSDT")


class TestApiResponse:
    """Tests for converting reports to response models."""

    def test_full_report(self, report):
        response = to_api_response(report)

        assert isinstance(response, IndicatorReportResponse)
        assert response.symbol == "BTCUSDT"
        assert response.candles == 60
        assert response.sma.name == "SMA 26"
        assert response.sma.offset == 25
        assert len(response.sma.points) == 35
        assert len(response.macd.histogram.points) == 27
        assert response.bollinger.upper.points[0].time == report.timestamps[19]
        assert [o.name for o in response.outcomes] == ["sma", "ema", "macd", "bollinger", "rsi"]
        assert response.warnings == []

    def test_points_carry_values(self, report):
        response = to_api_response(report)
        point = response.rsi.points[-1]
        assert point.time == report.timestamps[-1]
        assert point.value == report.rsi.values[-1]

    def test_skipped_indicators_are_null(self, make_candles):
        short = IndicatorPipeline(IndicatorConfig()).run(make_candles([100.0] * 20))
        response = to_api_response(short)

        assert response.sma is None
        assert response.macd is None
        assert response.bollinger is not None
        skipped = {o.name for o in response.outcomes if o.status.value == "skipped"}
        assert skipped == {"sma", "ema", "macd"}
        assert len(response.warnings) == 3


class TestJson:
    """Tests for JSON serialization."""

    def test_to_json(self, report):
        data = json.loads(to_json(report))

        assert data["symbol"] == "BTCUSDT"
        assert data["latest"]["rsi"] == 100.0
        assert data["outcomes"][0] == {"name": "sma", "status": "ok", "error": None}
        assert data["sma"]["points"][0]["time"].startswith("2024-01-26")

    def test_indent(self, report):
        assert "\n" in to_json(report, indent=2)
        assert "\n" not in to_json(report)
