"""Base types and shared checks for technical indicators.

All indicators take their series oldest-first: index 0 is the oldest
observation. Outputs are aligned to the trailing end of the input, so the
first output value summarises the window ending at input index
``offset``.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from domain.indicators.errors import InsufficientDataError


def require_length(
    indicator: str,
    values: Sequence[float],
    period: int,
    required: int | None = None,
) -> None:
    """Raise InsufficientDataError unless ``values`` can fill one window.

    Args:
        indicator: Indicator name used in the error
        values: Input series
        period: Window length, must be >= 1
        required: Minimum length when it differs from ``period``

    Raises:
        InsufficientDataError: If period < 1 or the series is too short
    """
    if period < 1:
        raise InsufficientDataError(
            indicator,
            required=1,
            actual=len(values),
            period=period,
            detail=f"Period must be >= 1, got {period}",
        )

    minimum = period if required is None else required
    if len(values) < minimum:
        raise InsufficientDataError(indicator, required=minimum, actual=len(values), period=period)


@dataclass(frozen=True)
class MacdResult:
    """MACD line and signal line.

    Attributes:
        macd: Fast EMA minus slow EMA, one value per input index from
            ``macd_offset`` onwards
        signal: EMA of the MACD line, shorter by ``signal_period - 1``
        macd_offset: Input index of ``macd[0]``
        signal_offset: Input index of ``signal[0]``

    The MACD line is not truncated to the signal's span. Use
    ``aligned()`` or ``histogram()`` when both are needed side by side.
    """
    macd: list[float]
    signal: list[float]
    macd_offset: int
    signal_offset: int

    def aligned(self) -> tuple[list[float], list[float]]:
        """Return (macd, signal) trimmed to the same span."""
        lead = len(self.macd) - len(self.signal)
        return self.macd[lead:], list(self.signal)

    def histogram(self) -> list[float]:
        """MACD minus signal over the signal's span."""
        macd_line, signal_line = self.aligned()
        return [m - s for m, s in zip(macd_line, signal_line)]


@dataclass(frozen=True)
class BollingerResult:
    """Bollinger Bands.

    Attributes:
        middle: SMA of each window
        upper: middle + num_std_dev * population std of each window
        lower: middle - num_std_dev * population std of each window
        offset: Input index of the first value of every band

    Example:
        >>> bands = bollinger_bands([100.0] * 20, period=20)
        >>> bands.upper[0] == bands.middle[0] == bands.lower[0]
        True
    """
    middle: list[float]
    upper: list[float]
    lower: list[float]
    offset: int

    def __len__(self) -> int:
        return len(self.middle)

    def width(self) -> list[float]:
        """Distance between upper and lower band for each window."""
        return [u - l for u, l in zip(self.upper, self.lower)]
