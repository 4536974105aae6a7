"""
Indicator pipeline.

Turns a run of candles into a report of every indicator:
1. Ordering (normalise to oldest-first, keep the lookback window)
2. Series extraction (closes, typical prices, timestamps)
3. Indicator computation (SMA, EMA, MACD, Bollinger Bands, RSI)
4. Alignment (every output value paired with its candle's open time)

Handles short input gracefully - an indicator without enough candles is
skipped and reported, unless fail_fast is set.
"""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from datetime import datetime
from typing import TypeVar

from config import IndicatorConfig, get_config
from domain import Candle, IndicatorStatus, SeriesOrder, to_oldest_first
from domain.indicators import (
    InsufficientDataError,
    bollinger_bands,
    ema,
    macd,
    rsi,
    sma,
    trailing_offset,
)
from ports import CandleSource, SourceError

logger = logging.getLogger(__name__)

T = TypeVar("T")


# ============================================================================
# Report Types
# ============================================================================

@dataclass(frozen=True)
class IndicatorSeries:
    """One indicator output paired with the timestamps it belongs to."""
    name: str
    values: list[float]
    timestamps: list[datetime]
    offset: int  # index into the report's candles of values[0]

    @classmethod
    def from_values(
        cls, name: str, values: list[float], timestamps: Sequence[datetime]
    ) -> "IndicatorSeries":
        """Attach the trailing timestamps of the input to ``values``."""
        offset = trailing_offset(len(timestamps), len(values))
        return cls(name=name, values=values, timestamps=list(timestamps[offset:]), offset=offset)

    def points(self) -> list[tuple[datetime, float]]:
        return list(zip(self.timestamps, self.values))

    @property
    def latest(self) -> float | None:
        return self.values[-1] if self.values else None

    def __len__(self) -> int:
        return len(self.values)


@dataclass(frozen=True)
class MacdSeries:
    """MACD line, signal line and histogram on their own time spans."""
    macd: IndicatorSeries
    signal: IndicatorSeries
    histogram: IndicatorSeries


@dataclass(frozen=True)
class BollingerSeries:
    """Bollinger Bands sharing one time span."""
    upper: IndicatorSeries
    middle: IndicatorSeries
    lower: IndicatorSeries


@dataclass
class IndicatorOutcome:
    """Result of computing a single indicator."""
    name: str
    status: IndicatorStatus
    error: dict | None = None


@dataclass
class IndicatorReport:
    """All indicators computed over one window of candles."""
    symbol: str | None
    timestamps: list[datetime]
    closes: list[float]
    typical_prices: list[float]
    generated_at: datetime = field(default_factory=datetime.now)

    sma: IndicatorSeries | None = None
    ema: IndicatorSeries | None = None
    macd: MacdSeries | None = None
    bollinger: BollingerSeries | None = None
    rsi: IndicatorSeries | None = None

    outcomes: dict[str, IndicatorOutcome] = field(default_factory=dict)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        """True when every indicator was computed."""
        return bool(self.outcomes) and all(
            o.status == IndicatorStatus.OK for o in self.outcomes.values()
        )

    @property
    def skipped(self) -> list[str]:
        return [name for name, o in self.outcomes.items() if o.status == IndicatorStatus.SKIPPED]

    def add_warning(self, msg: str) -> None:
        logger.warning(msg)
        self.warnings.append(msg)

    def latest(self) -> dict[str, float | None]:
        """Most recent value of every indicator, None where skipped."""
        def last(series: IndicatorSeries | None) -> float | None:
            return series.latest if series else None

        return {
            "close": self.closes[-1] if self.closes else None,
            "sma": last(self.sma),
            "ema": last(self.ema),
            "macd": last(self.macd.macd) if self.macd else None,
            "macd_signal": last(self.macd.signal) if self.macd else None,
            "macd_histogram": last(self.macd.histogram) if self.macd else None,
            "bollinger_upper": last(self.bollinger.upper) if self.bollinger else None,
            "bollinger_middle": last(self.bollinger.middle) if self.bollinger else None,
            "bollinger_lower": last(self.bollinger.lower) if self.bollinger else None,
            "rsi": last(self.rsi),
        }


# ============================================================================
# Pipeline
# ============================================================================

def _check_chronological(candles: Sequence[Candle]) -> None:
    """Raise ValueError unless open times never decrease."""
    for prev, curr in zip(candles, candles[1:]):
        if curr.open_time < prev.open_time:
            raise ValueError(
                f"Candles are not in the declared order: {curr.open_time.isoformat()} "
                f"follows {prev.open_time.isoformat()}"
            )


class IndicatorPipeline:
    """
    Main indicator pipeline.

    Coordinates ordering, series extraction, indicator computation and
    alignment. Holds only configuration, so one instance can serve many
    runs.
    """

    def __init__(
        self,
        config: IndicatorConfig | None = None,
        source: CandleSource | None = None,
    ):
        self.config = config or IndicatorConfig()
        self.source = source

    def _compute(
        self,
        report: IndicatorReport,
        name: str,
        compute: Callable[[], T],
    ) -> T | None:
        try:
            result = compute()
        except InsufficientDataError as e:
            if self.config.pipeline.fail_fast:
                raise
            report.outcomes[name] = IndicatorOutcome(name, IndicatorStatus.SKIPPED, e.to_dict())
            report.add_warning(f"Skipped {name}: {e.message} (have {len(report.closes)} candles)")
            return None

        report.outcomes[name] = IndicatorOutcome(name, IndicatorStatus.OK)
        return result

    def run(
        self,
        candles: Sequence[Candle],
        order: SeriesOrder | None = None,
        symbol: str | None = None,
    ) -> IndicatorReport:
        """
        Compute every indicator over the most recent ``lookback`` candles.

        Args:
            candles: Candles in ``order``
            order: Ordering of ``candles`` (default: from config)
            symbol: Instrument name carried into the report

        Returns:
            IndicatorReport with oldest-first series

        Raises:
            ValueError: If candles contradict the declared order
            InsufficientDataError: If fail_fast is set and an indicator
                lacks data
        """
        cfg = self.config
        order = order or cfg.pipeline.series_order

        window = to_oldest_first(candles, order)[-cfg.pipeline.lookback:]
        _check_chronological(window)

        timestamps = [c.open_time for c in window]
        closes = [c.close for c in window]
        typical = [c.typical_price for c in window]

        logger.debug(
            f"Computing indicators for {symbol or 'series'} over {len(window)} candles "
            f"(received {len(candles)}, {order.value})"
        )
        if len(window) < cfg.macd.min_length:
            logger.debug(f"Window shorter than MACD minimum of {cfg.macd.min_length}")

        report = IndicatorReport(
            symbol=symbol,
            timestamps=timestamps,
            closes=closes,
            typical_prices=typical,
        )

        ma = cfg.moving_averages
        sma_values = self._compute(report, "sma", lambda: sma(closes, ma.sma_period))
        if sma_values is not None:
            report.sma = IndicatorSeries.from_values(f"SMA {ma.sma_period}", sma_values, timestamps)

        ema_values = self._compute(report, "ema", lambda: ema(closes, ma.ema_period))
        if ema_values is not None:
            report.ema = IndicatorSeries.from_values(f"EMA {ma.ema_period}", ema_values, timestamps)

        m = cfg.macd
        macd_result = self._compute(
            report, "macd", lambda: macd(closes, m.fast_period, m.slow_period, m.signal_period)
        )
        if macd_result is not None:
            report.macd = MacdSeries(
                macd=IndicatorSeries.from_values("MACD", macd_result.macd, timestamps),
                signal=IndicatorSeries.from_values("Signal", macd_result.signal, timestamps),
                histogram=IndicatorSeries.from_values(
                    "Histogram", macd_result.histogram(), timestamps
                ),
            )

        b = cfg.bollinger
        bands = self._compute(
            report, "bollinger", lambda: bollinger_bands(typical, b.period, b.num_std_dev)
        )
        if bands is not None:
            report.bollinger = BollingerSeries(
                upper=IndicatorSeries.from_values("Upper", bands.upper, timestamps),
                middle=IndicatorSeries.from_values("Middle", bands.middle, timestamps),
                lower=IndicatorSeries.from_values("Lower", bands.lower, timestamps),
            )

        rsi_values = self._compute(report, "rsi", lambda: rsi(closes, cfg.rsi.period))
        if rsi_values is not None:
            report.rsi = IndicatorSeries.from_values(f"RSI {cfg.rsi.period}", rsi_values, timestamps)

        logger.info(
            f"Computed {len(report.outcomes) - len(report.skipped)}/{len(report.outcomes)} "
            f"indicators for {symbol or 'series'}"
        )
        return report

    def fetch_and_run(self, symbol: str, interval: str) -> IndicatorReport:
        """
        Fetch candles from the configured source and run the pipeline.

        Raises:
            ValueError: If no source is configured
            SourceError: If the source cannot provide candles
        """
        if self.source is None:
            raise ValueError("No candle source configured")

        limit = self.config.pipeline.lookback
        try:
            candles = self.source.fetch_candles(symbol, interval, limit)
        except SourceError as e:
            logger.error(f"Failed to fetch {symbol} {interval} candles: {e}")
            raise

        return self.run(candles, order=self.source.order, symbol=symbol)


def run_pipeline(
    candles: Sequence[Candle],
    order: SeriesOrder | None = None,
    symbol: str | None = None,
    config: IndicatorConfig | None = None,
) -> IndicatorReport:
    """
    Convenience function to run the pipeline once.

    Args:
        candles: Candles to analyze
        order: Ordering of ``candles`` (default: from config)
        symbol: Instrument name carried into the report
        config: Configuration (default: loaded via ``get_config``)

    Returns:
        IndicatorReport ready for presentation
    """
    pipeline = IndicatorPipeline(config or get_config())
    return pipeline.run(candles, order=order, symbol=symbol)
