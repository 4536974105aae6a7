"""Moving average indicators."""

from collections.abc import Sequence

from domain.indicators.base import require_length


def sma(values: Sequence[float], period: int) -> list[float]:
    """Calculate Simple Moving Average.

    Args:
        values: Series to average, oldest first
        period: Number of periods for the moving average

    Returns:
        List of SMA values, one per full window
        (length ``len(values) - period + 1``)

    Raises:
        InsufficientDataError: If period < 1 or len(values) < period

    Example:
        >>> sma([1, 2, 3, 4, 5], 3)
        [2.0, 3.0, 4.0]
    """
    require_length("sma", values, period)

    result = []
    for i in range(len(values) - period + 1):
        window = values[i:i + period]
        result.append(sum(window) / period)

    return result


def ema(values: Sequence[float], period: int) -> list[float]:
    """Calculate Exponential Moving Average.

    Uses standard exponential smoothing with alpha = 2/(period+1), seeded
    with the SMA of the first ``period`` values.

    Args:
        values: Series to average, oldest first
        period: Number of periods for the moving average

    Returns:
        List of EMA values aligned like ``sma``
        (length ``len(values) - period + 1``)

    Raises:
        InsufficientDataError: If period < 1 or len(values) < period

    Example:
        >>> ema([1, 2, 3, 4, 5], 3)
        [2.0, 3.0, 4.0]
    """
    require_length("ema", values, period)

    alpha = 2.0 / (period + 1)

    # WHY: First EMA value is SMA of first 'period' values
    result = [sum(values[:period]) / period]

    for i in range(period, len(values)):
        prev_ema = result[-1]
        result.append((values[i] - prev_ema) * alpha + prev_ema)

    return result
