from enum import Enum


class SeriesOrder(str, Enum):
    """Time ordering of a candle or price sequence."""
    OLDEST_FIRST = "oldest_first"
    NEWEST_FIRST = "newest_first"


class IndicatorStatus(str, Enum):
    """Outcome of computing one indicator in a pipeline run."""
    OK = "ok"
    SKIPPED = "skipped"  # not enough candles
