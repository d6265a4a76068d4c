from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="KITCHEN_UNITS_", extra="ignore")

    # Unit system used when a request doesn't name one
    default_unit_system: Literal["us", "metric"] = "us"

    # Upper bound for serving multipliers accepted over HTTP
    max_multiplier: float = 50.0

    log_level: str = "INFO"

    # Per-client request limit (slowapi syntax)
    rate_limit: str = "120/minute"
    rate_limit_enabled: bool = True

    # CORS
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://0.0.0.0:3000",
        "http://localhost",
        "http://127.0.0.1",
    ]


settings = Settings()
