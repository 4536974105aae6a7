from .enums import IndicatorStatus, SeriesOrder
from .models import (
    Candle,
    to_oldest_first,
    to_json_dict,
    from_json_dict,
)

__all__ = [
    # Enums
    "SeriesOrder",
    "IndicatorStatus",
    # Domain models
    "Candle",
    "to_oldest_first",
    # Serialization
    "to_json_dict",
    "from_json_dict",
]
