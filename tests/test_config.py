"""
Tests for configuration loading and validation.

Tests cover:
- Defaults
- TOML files (explicit and discovered)
- Environment and .env overrides
- Validation errors surfaced as ConfigError
"""

import pytest

from config import (
    ConfigError,
    IndicatorConfig,
    MacdConfig,
    get_config,
    load_config,
    reload_config,
)
from domain import SeriesOrder


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Run each test from an empty directory with a fresh config cache."""
    monkeypatch.chdir(tmp_path)
    get_config.cache_clear()
    yield
    get_config.cache_clear()


class TestDefaults:
    """Tests for built-in defaults."""

    def test_defaults(self):
        config = IndicatorConfig()
        assert config.moving_averages.sma_period == 26
        assert config.moving_averages.ema_period == 26
        assert (config.macd.fast_period, config.macd.slow_period, config.macd.signal_period) == (12, 26, 9)
        assert config.bollinger.period == 20
        assert config.bollinger.num_std_dev == 2.0
        assert config.rsi.period == 14
        assert config.pipeline.lookback == 100
        assert config.pipeline.series_order == SeriesOrder.OLDEST_FIRST
        assert config.pipeline.fail_fast is False

    def test_macd_min_length(self):
        assert MacdConfig().min_length == 34

    def test_load_without_file(self):
        assert load_config() == IndicatorConfig()


class TestTomlFiles:
    """Tests for TOML configuration files."""

    def test_explicit_path(self, tmp_path):
        path = tmp_path / "custom.toml"
        path.write_text(
            "[macd]\nfast_period = 5\nslow_period = 10\nsignal_period = 3\n"
            "[pipeline]\nlookback = 250\nseries_order = \"newest_first\"\n"
        )
        config = load_config(path)
        assert config.macd.fast_period == 5
        assert config.macd.slow_period == 10
        assert config.pipeline.lookback == 250
        assert config.pipeline.series_order == SeriesOrder.NEWEST_FIRST
        # untouched sections keep defaults
        assert config.rsi.period == 14

    def test_discovered_file(self, tmp_path):
        (tmp_path / "kline.toml").write_text("[rsi]\nperiod = 21\n")
        assert load_config().rsi.period == 21

    def test_missing_explicit_path(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "nope.toml")

    def test_malformed_toml(self, tmp_path):
        path = tmp_path / "bad.toml"
        path.write_text("[macd\nfast_period = ")
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert exc_info.value.source == str(path)


class TestValidation:
    """Tests for validation errors."""

    def test_slow_must_exceed_fast(self, tmp_path):
        path = tmp_path / "kline.toml"
        path.write_text("[macd]\nfast_period = 26\nslow_period = 12\n")
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert exc_info.value.field == "macd.slow_period"
        assert "Field: macd.slow_period" in str(exc_info.value)

    def test_negative_std_dev(self):
        with pytest.raises(ValueError):
            IndicatorConfig(bollinger={"num_std_dev": -1.0})

    def test_zero_period(self, tmp_path):
        path = tmp_path / "kline.toml"
        path.write_text("[moving_averages]\nsma_period = 0\n")
        with pytest.raises(ConfigError):
            load_config(path)


class TestEnvironment:
    """Tests for environment overrides."""

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("KLINE_RSI_PERIOD", "7")
        monkeypatch.setenv("KLINE_SERIES_ORDER", "newest_first")
        monkeypatch.setenv("KLINE_FAIL_FAST", "true")
        monkeypatch.setenv("KLINE_BOLLINGER_STD_DEV", "2.5")

        config = load_config()
        assert config.rsi.period == 7
        assert config.pipeline.series_order == SeriesOrder.NEWEST_FIRST
        assert config.pipeline.fail_fast is True
        assert config.bollinger.num_std_dev == 2.5

    def test_env_beats_file(self, tmp_path, monkeypatch):
        (tmp_path / "kline.toml").write_text("[macd]\nfast_period = 8\nslow_period = 21\n")
        monkeypatch.setenv("KLINE_MACD_SLOW", "30")

        config = load_config()
        assert config.macd.fast_period == 8
        assert config.macd.slow_period == 30

    def test_invalid_env_value(self, monkeypatch):
        monkeypatch.setenv("KLINE_LOOKBACK", "lots")
        with pytest.raises(ConfigError) as exc_info:
            load_config()
        assert exc_info.value.field == "pipeline.lookback"

    def test_dotenv_file(self, tmp_path, monkeypatch):
        # WHY: register the key so monkeypatch removes what load_dotenv sets
        monkeypatch.setenv("KLINE_LOOKBACK", "placeholder")
        monkeypatch.delenv("KLINE_LOOKBACK")

        env_file = tmp_path / ".env"
        env_file.write_text("KLINE_LOOKBACK=50\n")
        assert load_config(env_file=env_file).pipeline.lookback == 50

    def test_environment_beats_dotenv(self, tmp_path, monkeypatch):
        monkeypatch.setenv("KLINE_LOOKBACK", "75")
        env_file = tmp_path / ".env"
        env_file.write_text("KLINE_LOOKBACK=50\n")
        assert load_config(env_file=env_file).pipeline.lookback == 75


class TestCaching:
    """Tests for the cached singleton."""

    def test_get_config_cached(self):
        assert get_config() is get_config()

    def test_reload_picks_up_changes(self, monkeypatch):
        first = get_config()
        monkeypatch.setenv("KLINE_EMA_PERIOD", "50")
        assert get_config() is first

        reloaded = reload_config()
        assert reloaded.moving_averages.ema_period == 50
        assert get_config() is reloaded

    def test_reload_explicit_path(self, tmp_path):
        path = tmp_path / "other.toml"
        path.write_text("[bollinger]\nperiod = 10\n")
        assert reload_config(path).bollinger.period == 10
