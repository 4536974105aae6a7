"""Relative Strength Index (RSI) indicator."""

from collections.abc import Sequence

from domain.indicators.base import require_length


def _rsi_value(avg_gain: float, avg_loss: float) -> float:
    if avg_loss == 0:
        return 100.0
    rs = avg_gain / avg_loss
    return 100.0 - (100.0 / (1.0 + rs))


def rsi(closes: Sequence[float], period: int = 14) -> list[float]:
    """Calculate RSI using Wilder's smoothing method.

    Returns values on 0-100 scale. The first averages are simple means of
    the first ``period`` gains and losses, later ones use Wilder's
    smoothing.

    Args:
        closes: List of closing prices, oldest first
        period: RSI period (default: 14)

    Returns:
        List of RSI values (0-100) of length ``len(closes) - period``.
        Value ``i`` belongs to input index ``period + i``.

    Raises:
        InsufficientDataError: If period < 1 or len(closes) <= period

    Example:
        >>> values = rsi([44, 44.5, 44, 43.5, 44, 44.5, 45, 45.5], 3)
        >>> len(values)
        5

    Notes:
        - Wilder's smoothing: New avg = (prev_avg * (period-1) + current) / period
        - An average loss of zero yields 100.0, including for a flat series
    """
    require_length("rsi", closes, period, required=period + 1)

    gains = []
    losses = []
    for i in range(1, len(closes)):
        change = closes[i] - closes[i - 1]
        gains.append(max(change, 0))
        losses.append(max(-change, 0))

    # WHY: First average is simple average
    avg_gain = sum(gains[:period]) / period
    avg_loss = sum(losses[:period]) / period
    result = [_rsi_value(avg_gain, avg_loss)]

    for gain, loss in zip(gains[period:], losses[period:]):
        avg_gain = (avg_gain * (period - 1) + gain) / period
        avg_loss = (avg_loss * (period - 1) + loss) / period
        result.append(_rsi_value(avg_gain, avg_loss))

    return result
