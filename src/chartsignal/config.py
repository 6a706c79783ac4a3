"""Configuration system using pydantic-settings with environment variable loading."""

from decimal import Decimal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class IndicatorSettings(BaseSettings):
    """Indicator periods used by the aggregator.

    All fields configurable via INDICATOR_ environment variable prefix.
    """

    model_config = SettingsConfigDict(env_prefix="INDICATOR_")

    sma_period: int = 20
    ema_period: int = 20
    rsi_period: int = 14
    macd_fast: int = 12
    macd_slow: int = 26
    macd_signal: int = 9

    @model_validator(mode="after")
    def _check_periods(self) -> "IndicatorSettings":
        periods = {
            "sma_period": self.sma_period,
            "ema_period": self.ema_period,
            "rsi_period": self.rsi_period,
            "macd_fast": self.macd_fast,
            "macd_slow": self.macd_slow,
            "macd_signal": self.macd_signal,
        }
        for name, value in periods.items():
            if value < 1:
                raise ValueError(f"{name} must be >= 1, got {value}")
        if self.macd_fast >= self.macd_slow:
            raise ValueError("macd_fast must be smaller than macd_slow")
        return self


class SignalSettings(BaseSettings):
    """Rule thresholds and vote weights for the signal synthesizer.

    The crossover weight (2 votes vs 1 for every other rule) is carried over
    as-is. It has never been tuned or backtested.
    """

    model_config = SettingsConfigDict(env_prefix="SIGNAL_")

    rsi_oversold: Decimal = Decimal("30")
    rsi_overbought: Decimal = Decimal("70")
    crossover_weight: int = Field(default=2, ge=1)
    vote_weight: int = Field(default=1, ge=1)

    @model_validator(mode="after")
    def _check_thresholds(self) -> "SignalSettings":
        if self.rsi_oversold >= self.rsi_overbought:
            raise ValueError("rsi_oversold must be smaller than rsi_overbought")
        return self


class DashboardSettings(BaseSettings):
    """Dashboard server configuration."""

    model_config = SettingsConfigDict(env_prefix="DASHBOARD_")

    host: str = "127.0.0.1"
    port: int = 8080


class StorageSettings(BaseSettings):
    """Where the latest analyses are kept between sessions."""

    model_config = SettingsConfigDict(env_prefix="STORAGE_")

    enabled: bool = True
    db_path: str = "data/analyses.db"


class AppSettings(BaseSettings):
    """Root application settings, composing all sub-settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    log_level: str = "INFO"
    indicators: IndicatorSettings = IndicatorSettings()
    signal: SignalSettings = SignalSettings()
    dashboard: DashboardSettings = DashboardSettings()
    storage: StorageSettings = StorageSettings()
