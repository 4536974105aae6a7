"""MACD (Moving Average Convergence Divergence) indicator."""

import logging
from collections.abc import Sequence

from domain.indicators.base import MacdResult, require_length
from domain.indicators.errors import InsufficientDataError
from domain.indicators.moving_averages import ema

logger = logging.getLogger(__name__)


def macd(
    closes: Sequence[float],
    fast: int = 12,
    slow: int = 26,
    signal: int = 9,
) -> MacdResult:
    """Calculate MACD indicator.

    MACD Line = EMA(fast) - EMA(slow)
    Signal Line = EMA(MACD Line, signal periods)

    Args:
        closes: List of closing prices, oldest first
        fast: Fast EMA period (default: 12)
        slow: Slow EMA period (default: 26)
        signal: Signal line EMA period (default: 9)

    Returns:
        MacdResult with ``len(macd) == len(closes) - slow + 1`` and
        ``len(signal) == len(macd) - signal + 1``

    Raises:
        InsufficientDataError: If there are fewer than ``slow`` closes, or
            the MACD line is shorter than ``signal``

    Example:
        >>> result = macd(list(range(1, 41)))
        >>> len(result.macd), len(result.signal)
        (15, 7)

    Notes:
        - ``fast < slow`` is the caller's responsibility. Otherwise the line
          is sign-inverted, which is logged but not rejected.
        - The fast EMA is longer by ``slow - fast`` values. Its leading
          values are dropped so both EMAs start at the index where the
          slow EMA is first defined.
    """
    require_length("macd", closes, slow, required=max(fast, slow))
    if fast >= slow:
        logger.warning(f"MACD fast period {fast} is not shorter than slow period {slow}")

    fast_ema = ema(closes, fast)
    slow_ema = ema(closes, slow)

    span = min(len(fast_ema), len(slow_ema))
    fast_aligned = fast_ema[len(fast_ema) - span:]
    slow_aligned = slow_ema[len(slow_ema) - span:]

    macd_line = [f - s for f, s in zip(fast_aligned, slow_aligned)]

    # WHY: Report the shortfall against the price series, not the MACD line
    if signal < 1 or len(macd_line) < signal:
        raise InsufficientDataError(
            "macd",
            required=max(fast, slow) + max(signal, 1) - 1,
            actual=len(closes),
            period=signal,
        )

    signal_line = ema(macd_line, signal)
    macd_offset = len(closes) - len(macd_line)

    return MacdResult(
        macd=macd_line,
        signal=signal_line,
        macd_offset=macd_offset,
        signal_offset=macd_offset + signal - 1,
    )
