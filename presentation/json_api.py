"""
JSON API response types.

Structured responses for handing an indicator report to a chart or web
layer. Can be used with FastAPI, Flask, or any web framework.
"""

from datetime import datetime

from pydantic import BaseModel

from domain import IndicatorStatus
from orchestration.pipeline import (
    BollingerSeries,
    IndicatorOutcome,
    IndicatorReport,
    IndicatorSeries,
    MacdSeries,
)


# ============================================================================
# Response Models
# ============================================================================

class PointResponse(BaseModel):
    """One indicator value at one candle."""
    time: datetime
    value: float


class SeriesResponse(BaseModel):
    """API response for a single indicator line."""
    name: str
    offset: int
    points: list[PointResponse]


class MacdResponse(BaseModel):
    """API response for MACD."""
    macd: SeriesResponse
    signal: SeriesResponse
    histogram: SeriesResponse


class BollingerResponse(BaseModel):
    """API response for Bollinger Bands."""
    upper: SeriesResponse
    middle: SeriesResponse
    lower: SeriesResponse


class OutcomeResponse(BaseModel):
    """API response for one indicator's status."""
    name: str
    status: IndicatorStatus
    error: dict | None = None


class IndicatorReportResponse(BaseModel):
    """Full report API response."""
    generated_at: datetime
    symbol: str | None = None
    candles: int

    sma: SeriesResponse | None = None
    ema: SeriesResponse | None = None
    macd: MacdResponse | None = None
    bollinger: BollingerResponse | None = None
    rsi: SeriesResponse | None = None

    latest: dict[str, float | None]
    outcomes: list[OutcomeResponse]
    warnings: list[str]


# ============================================================================
# Conversion Functions
# ============================================================================

def _series_to_response(series: IndicatorSeries | None) -> SeriesResponse | None:
    """Convert IndicatorSeries to API response."""
    if series is None:
        return None
    return SeriesResponse(
        name=series.name,
        offset=series.offset,
        points=[PointResponse(time=t, value=v) for t, v in series.points()],
    )


def _macd_to_response(series: MacdSeries | None) -> MacdResponse | None:
    """Convert MacdSeries to API response."""
    if series is None:
        return None
    return MacdResponse(
        macd=_series_to_response(series.macd),
        signal=_series_to_response(series.signal),
        histogram=_series_to_response(series.histogram),
    )


def _bollinger_to_response(series: BollingerSeries | None) -> BollingerResponse | None:
    """Convert BollingerSeries to API response."""
    if series is None:
        return None
    return BollingerResponse(
        upper=_series_to_response(series.upper),
        middle=_series_to_response(series.middle),
        lower=_series_to_response(series.lower),
    )


def _outcome_to_response(outcome: IndicatorOutcome) -> OutcomeResponse:
    return OutcomeResponse(name=outcome.name, status=outcome.status, error=outcome.error)


def to_api_response(report: IndicatorReport) -> IndicatorReportResponse:
    """
    Convert IndicatorReport to API response.

    Args:
        report: Report from the indicator pipeline

    Returns:
        Structured API response
    """
    return IndicatorReportResponse(
        generated_at=report.generated_at,
        symbol=report.symbol,
        candles=len(report.closes),
        sma=_series_to_response(report.sma),
        ema=_series_to_response(report.ema),
        macd=_macd_to_response(report.macd),
        bollinger=_bollinger_to_response(report.bollinger),
        rsi=_series_to_response(report.rsi),
        latest=report.latest(),
        outcomes=[_outcome_to_response(o) for o in report.outcomes.values()],
        warnings=list(report.warnings),
    )


def to_json(report: IndicatorReport, indent: int | None = None) -> str:
    """Serialize report to a JSON string."""
    return to_api_response(report).model_dump_json(indent=indent)
