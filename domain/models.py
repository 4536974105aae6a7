"""
Domain models - pure data structures with validation.

These are immutable data carriers with no business logic.
All models are JSON-serializable and self-validating.
"""

from collections.abc import Sequence
from datetime import datetime, timezone
from typing import Any, TypeVar

from pydantic import BaseModel, Field, model_validator

from .enums import SeriesOrder

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


# ============================================================================
# Domain Models
# ============================================================================

class Candle(BaseModel):
    """
    One OHLCV period of a traded instrument.

    Prices are validated so that high and low bound open and close.
    """
    model_config = {"frozen": True, "extra": "forbid"}

    open_time: datetime = Field(description="Start of the period")
    open: float = Field(gt=0, description="Opening price")
    high: float = Field(gt=0, description="Highest traded price")
    low: float = Field(gt=0, description="Lowest traded price")
    close: float = Field(gt=0, description="Closing price")
    volume: float = Field(default=0.0, ge=0, description="Traded base volume")

    @model_validator(mode="after")
    def _validate_range(self) -> "Candle":
        """High must bound every price from above and low from below."""
        if self.low > min(self.open, self.close):
            raise ValueError("low must not exceed open or close")
        if self.high < max(self.open, self.close):
            raise ValueError("high must not be below open or close")
        return self

    @property
    def typical_price(self) -> float:
        """(high + low + close) / 3."""
        return (self.high + self.low + self.close) / 3.0

    @classmethod
    def from_kline(cls, row: Sequence[Any]) -> "Candle":
        """
        Build a candle from an exchange kline row.

        The row layout is ``[open_time_ms, open, high, low, close, volume, ...]``
        with prices usually sent as decimal strings. Extra trailing fields
        are ignored.

        Raises:
            ValueError: If the row is too short or a value does not validate
        """
        if len(row) < 6:
            raise ValueError(f"kline row needs at least 6 fields, got {len(row)}")

        open_time = datetime.fromtimestamp(int(row[0]) / 1000, tz=timezone.utc)
        return cls(
            open_time=open_time,
            open=row[1],
            high=row[2],
            low=row[3],
            close=row[4],
            volume=row[5],
        )


def to_oldest_first(items: Sequence[T], order: SeriesOrder) -> list[T]:
    """Return ``items`` as a new oldest-first list."""
    if order == SeriesOrder.NEWEST_FIRST:
        return list(reversed(items))
    return list(items)


def to_json_dict(model: BaseModel) -> dict:
    """Convert model to JSON-serializable dict."""
    return model.model_dump(mode="json")


def from_json_dict(model_class: type[M], data: dict) -> M:
    """Create model instance from JSON dict."""
    return model_class.model_validate(data)
