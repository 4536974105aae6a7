"""Bollinger Bands indicator."""

import math
from collections.abc import Sequence

from domain.indicators.base import BollingerResult, require_length
from domain.indicators.errors import InvalidParameterError
from domain.indicators.moving_averages import sma
from domain.indicators.utils import rolling_std


def bollinger_bands(
    prices: Sequence[float],
    period: int = 20,
    num_std_dev: float = 2.0,
) -> BollingerResult:
    """Calculate Bollinger Bands.

    Upper Band = SMA + (num_std_dev * standard_deviation)
    Middle Band = SMA
    Lower Band = SMA - (num_std_dev * standard_deviation)

    Args:
        prices: Price series, oldest first. Usually closes or typical
            prices ((high + low + close) / 3)
        period: Period for SMA and standard deviation (default: 20)
        num_std_dev: Number of standard deviations for bands (default: 2.0)

    Returns:
        BollingerResult with three bands of length ``len(prices) - period + 1``

    Raises:
        InsufficientDataError: If period < 1 or len(prices) < period
        InvalidParameterError: If num_std_dev is negative or not finite

    Notes:
        - Standard deviation is the population one (divide by ``period``)
    """
    if not math.isfinite(num_std_dev) or num_std_dev < 0:
        raise InvalidParameterError(
            "bollinger_bands", "num_std_dev", num_std_dev, "must be finite and non-negative"
        )
    require_length("bollinger_bands", prices, period)

    middle = sma(prices, period)
    deviations = rolling_std(prices, period)

    upper = [m + num_std_dev * d for m, d in zip(middle, deviations)]
    lower = [m - num_std_dev * d for m, d in zip(middle, deviations)]

    return BollingerResult(middle=middle, upper=upper, lower=lower, offset=period - 1)
