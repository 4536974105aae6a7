"""Utility functions shared by the indicators."""

import math
from collections.abc import Sequence
from typing import TypeVar

from domain.indicators.base import require_length

T = TypeVar("T")


def rolling_std(values: Sequence[float], period: int) -> list[float]:
    """Calculate rolling population standard deviation.

    Args:
        values: Series, oldest first
        period: Window length

    Returns:
        One standard deviation per full window, aligned like ``sma``

    Raises:
        InsufficientDataError: If period < 1 or len(values) < period

    Example:
        >>> rolling_std([2, 4, 4, 4, 5, 5, 7, 9], 8)
        [2.0]

    Notes:
        - Divides by ``period`` (population), not ``period - 1``
    """
    require_length("rolling_std", values, period)

    result = []
    for i in range(len(values) - period + 1):
        window = values[i:i + period]
        mean = sum(window) / period
        variance = sum((x - mean) ** 2 for x in window) / period
        result.append(math.sqrt(variance))

    return result


def indexed(values: Sequence[T], offset: int) -> list[tuple[int, T]]:
    """Pair each output value with the input index it belongs to.

    Example:
        >>> indexed([2.0, 3.0, 4.0], offset=2)
        [(2, 2.0), (3, 3.0), (4, 4.0)]
    """
    return [(offset + i, v) for i, v in enumerate(values)]


def trailing_offset(input_length: int, output_length: int) -> int:
    """Input index of the first value of a trailing-aligned output."""
    if output_length > input_length:
        raise ValueError(
            f"output ({output_length}) cannot be longer than input ({input_length})"
        )
    return input_length - output_length


def align_to_timestamps(values: Sequence[float], timestamps: Sequence[T]) -> list[tuple[T, float]]:
    """Zip a trailing-aligned output onto the timestamps of its input.

    Args:
        values: Indicator output, shorter than or equal to the input
        timestamps: One timestamp per input value, oldest first

    Returns:
        List of (timestamp, value) pairs

    Example:
        >>> align_to_timestamps([2.0, 3.0, 4.0], ["d1", "d2", "d3", "d4", "d5"])
        [('d3', 2.0), ('d4', 3.0), ('d5', 4.0)]
    """
    offset = trailing_offset(len(timestamps), len(values))
    return list(zip(timestamps[offset:], values))
