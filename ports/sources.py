"""
Candle source port.

Data acquisition lives outside this project. This module defines the
protocol a candle source adapter implements and the error it raises, so
the pipeline can run against any exchange client or a test double.
"""

from typing import Any, Protocol, runtime_checkable

from domain import Candle, SeriesOrder


class SourceError(Exception):
    """
    Raised by a candle source when candles cannot be provided.

    Provides structured error information for logging.
    """

    def __init__(
        self,
        source: str,
        reason: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ):
        self.source = source
        self.reason = reason
        self.context = context or {}
        self.cause = cause
        super().__init__(f"[{source}] {reason}")

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging/serialization."""
        return {
            "source": self.source,
            "reason": self.reason,
            "context": self.context,
            "cause": str(self.cause) if self.cause else None,
        }


@runtime_checkable
class CandleSource(Protocol):
    """
    Protocol for candle source adapters.

    Implementations must:
    - Return typed Candles, not raw rows (see ``Candle.from_kline``)
    - Declare the ordering of what they return
    - Fail explicitly with SourceError, no silent fallbacks
    """

    @property
    def source_name(self) -> str:
        """Unique identifier for this source."""
        ...

    @property
    def order(self) -> SeriesOrder:
        """Ordering of the candles returned by ``fetch_candles``."""
        ...

    def fetch_candles(self, symbol: str, interval: str, limit: int) -> list[Candle]:
        """
        Fetch up to ``limit`` most recent candles.

        Raises:
            SourceError: If candles cannot be fetched
        """
        ...
