"""
Configuration schema with validation.

All configuration is validated at load time using Pydantic.
"""

from pydantic import BaseModel, Field, field_validator

from domain import SeriesOrder


class MovingAverageConfig(BaseModel):
    """SMA/EMA periods."""

    sma_period: int = Field(default=26, ge=1, le=500)
    ema_period: int = Field(default=26, ge=1, le=500)


class MacdConfig(BaseModel):
    """MACD periods."""

    fast_period: int = Field(default=12, ge=1, le=200)
    slow_period: int = Field(default=26, ge=2, le=500)
    signal_period: int = Field(default=9, ge=1, le=200)

    @field_validator("slow_period")
    @classmethod
    def slow_gt_fast(cls, v: int, info) -> int:
        fast = info.data.get("fast_period", 12)
        if v <= fast:
            raise ValueError("slow_period must be greater than fast_period")
        return v

    @property
    def min_length(self) -> int:
        """Fewest prices that produce one signal value."""
        return self.slow_period + self.signal_period - 1


class BollingerConfig(BaseModel):
    """Bollinger Bands settings."""

    period: int = Field(default=20, ge=1, le=500)
    num_std_dev: float = Field(default=2.0, ge=0.0, le=10.0, allow_inf_nan=False)


class RsiConfig(BaseModel):
    """RSI settings."""

    period: int = Field(default=14, ge=1, le=500)


class PipelineConfig(BaseModel):
    """Pipeline execution configuration."""

    # Candles kept from the end of the input
    lookback: int = Field(default=100, ge=2, le=10_000)
    series_order: SeriesOrder = Field(
        default=SeriesOrder.OLDEST_FIRST,
        description="Ordering of candles handed to the pipeline",
    )

    # Behavior
    fail_fast: bool = Field(default=False, description="Raise instead of skipping short indicators")


class IndicatorConfig(BaseModel):
    """
    Root configuration model.

    All settings are validated on load.
    """

    moving_averages: MovingAverageConfig = Field(default_factory=MovingAverageConfig)
    macd: MacdConfig = Field(default_factory=MacdConfig)
    bollinger: BollingerConfig = Field(default_factory=BollingerConfig)
    rsi: RsiConfig = Field(default_factory=RsiConfig)
    pipeline: PipelineConfig = Field(default_factory=PipelineConfig)
