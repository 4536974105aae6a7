"""Shared fixtures for pipeline, config and presentation tests."""

import os
from datetime import datetime, timedelta, timezone

import pytest

from domain import Candle

START = datetime(2024, 1, 1, tzinfo=timezone.utc)


def build_candles(closes, start=START, step=timedelta(days=1)):
    """Daily candles whose high/low sit one unit around the close."""
    return [
        Candle(
            open_time=start + i * step,
            open=close,
            high=close + 1.0,
            low=close - 1.0,
            close=close,
            volume=1000.0,
        )
        for i, close in enumerate(closes)
    ]


@pytest.fixture
def make_candles():
    """Factory fixture building oldest-first candles from closes."""
    return build_candles


@pytest.fixture
def rising_candles():
    """60 daily candles with closes 100, 101, ..., 159."""
    return build_candles([100.0 + i for i in range(60)])


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep KLINE_* variables from the outer environment out of tests."""
    for key in list(os.environ):
        if key.startswith("KLINE_"):
            monkeypatch.delenv(key)
