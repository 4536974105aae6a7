from .loader import ConfigError, load_config, get_config, reload_config
from .schema import (
    IndicatorConfig,
    MovingAverageConfig,
    MacdConfig,
    BollingerConfig,
    RsiConfig,
    PipelineConfig,
)

__all__ = [
    "ConfigError",
    "load_config",
    "get_config",
    "reload_config",
    "IndicatorConfig",
    "MovingAverageConfig",
    "MacdConfig",
    "BollingerConfig",
    "RsiConfig",
    "PipelineConfig",
]
