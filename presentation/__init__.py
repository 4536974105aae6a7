from .json_api import (
    IndicatorReportResponse,
    SeriesResponse,
    PointResponse,
    MacdResponse,
    BollingerResponse,
    OutcomeResponse,
    to_api_response,
    to_json,
)

__all__ = [
    # JSON API
    "IndicatorReportResponse",
    "SeriesResponse",
    "PointResponse",
    "MacdResponse",
    "BollingerResponse",
    "OutcomeResponse",
    "to_api_response",
    "to_json",
]
