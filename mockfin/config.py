from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from typing import List, Optional

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # empty key -> synthetic data only, no upstream calls
    fmp_api_key: str = Field("", alias="FMP_API_KEY")
    action_key: str = Field("", alias="ACTION_KEY")
    cors_origins: List[str] = Field(default_factory=lambda: ["*"], alias="CORS_ORIGINS")

    mock_seed: Optional[int] = Field(None, alias="MOCK_SEED")
    simulated_latency_ms: int = Field(0, alias="SIMULATED_LATENCY_MS")

    # refresh intervals (seconds) the dashboard polls at
    quote_refresh_seconds: int = Field(60, alias="QUOTE_REFRESH_SECONDS")
    crypto_refresh_seconds: int = Field(30, alias="CRYPTO_REFRESH_SECONDS")
    news_refresh_seconds: int = Field(300, alias="NEWS_REFRESH_SECONDS")

    upstream_timeout: float = Field(25.0, alias="UPSTREAM_TIMEOUT")
    subscription_tier: str = Field("pro", alias="SUBSCRIPTION_TIER")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    @property
    def live_upstream(self) -> bool:
        return bool(self.fmp_api_key)

settings = Settings()
