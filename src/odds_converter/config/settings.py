from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="ODDS_",
        extra="ignore",
    )

    log_level: str = "INFO"
    decimal_places: int = Field(default=3, ge=0, le=10)
    default_stake: float = Field(default=100.0, gt=0)
    min_arb_edge: float = Field(default=0.0, ge=0)


settings = Settings()
