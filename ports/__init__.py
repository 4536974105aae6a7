from .sources import CandleSource, SourceError

__all__ = [
    "CandleSource",
    "SourceError",
]
