"""Technical indicators library.

Pure Python implementations of common technical indicators over price
series. Every function takes its series oldest-first, returns only
fully-defined values aligned to the trailing end of the input, and raises
InsufficientDataError instead of padding or truncating.

Indicators:
    - SMA / EMA: Simple and exponential moving averages (EMA seeded by SMA)
    - MACD: Moving Average Convergence Divergence with signal line
    - Bollinger Bands: SMA ± k population standard deviations
    - RSI: Relative Strength Index using Wilder's smoothing
    - Utils: Rolling standard deviation and output alignment helpers

Example:
    >>> from domain.indicators import rsi, macd, bollinger_bands
    >>>
    >>> closes = [44, 44.34, 44.09, 43.61, 44.33, 44.83, 45.10, 45.42,
    ...           45.84, 46.08, 45.89, 46.03, 45.61, 46.28, 46.28, 46.00]
    >>>
    >>> rsi_values = rsi(closes, period=14)
    >>> result = macd(closes, fast=3, slow=6, signal=4)
    >>> bands = bollinger_bands(closes, period=10)
"""

from domain.indicators.base import BollingerResult, MacdResult, require_length
from domain.indicators.bollinger import bollinger_bands
from domain.indicators.errors import (
    ErrorCode,
    IndicatorError,
    InsufficientDataError,
    InvalidParameterError,
)
from domain.indicators.macd import macd
from domain.indicators.moving_averages import ema, sma
from domain.indicators.rsi import rsi
from domain.indicators.utils import (
    align_to_timestamps,
    indexed,
    rolling_std,
    trailing_offset,
)

__all__ = [
    # Result types
    "MacdResult",
    "BollingerResult",
    # Errors
    "ErrorCode",
    "IndicatorError",
    "InsufficientDataError",
    "InvalidParameterError",
    # Indicators
    "sma",
    "ema",
    "macd",
    "bollinger_bands",
    "rsi",
    # Utilities
    "rolling_std",
    "require_length",
    "indexed",
    "trailing_offset",
    "align_to_timestamps",
]
