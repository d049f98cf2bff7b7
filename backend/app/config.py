"""Application configuration."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.models import MAX_LEVERAGE, MIN_LEVERAGE, EngineConfig, FallbackDefaults, WindowSelector


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Indicator-count source (Coinalyze technical-analysis page)
    coinalyze_url: str = "https://coinalyze.net/bitcoin/technical-analysis/"

    # Spot-price source (CoinGecko)
    coingecko_url: str = "https://api.coingecko.com/api/v3"
    coin_id: str = "bitcoin"
    vs_currency: str = "usd"

    user_agent: str = "BraincastApp/1.0 (+https://example.com)"

    # Per-source timeout in seconds; sources are fetched concurrently
    source_timeout: float = 10.0

    # Windows for the default (scalp) variant
    direction_window: str = "leading:3"
    leverage_window: str = "trailing:3"

    # Fallback values
    fallback_entry_price: int = 119500
    fallback_target_price: int = 121500
    fallback_stop_price: int = 119200
    fallback_leverage: int = Field(default=30, ge=MIN_LEVERAGE, le=MAX_LEVERAGE)
    fallback_ticker_price: int = 113279
    fallback_ticker_change: float = -2.76

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False

    @field_validator("direction_window", "leverage_window")
    @classmethod
    def _check_window(cls, value: str) -> str:
        WindowSelector.parse(value)
        return value

    def engine_config(self) -> EngineConfig:
        """Windows for the default variant."""
        return EngineConfig(
            direction_window=WindowSelector.parse(self.direction_window),
            leverage_window=WindowSelector.parse(self.leverage_window),
        )

    def fallback_defaults(self) -> FallbackDefaults:
        return FallbackDefaults(
            entry_price=self.fallback_entry_price,
            target_price=self.fallback_target_price,
            stop_price=self.fallback_stop_price,
            leverage=self.fallback_leverage,
            ticker_price=self.fallback_ticker_price,
            ticker_change_24h=self.fallback_ticker_change,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
