from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # -------------------------
    # App
    # -------------------------
    app_name: str = "First Aid Response Backend"
    api_prefix: str = "/api"
    cors_allow_origins: str = "*"
    host: str = "0.0.0.0"
    port: int = 8000

    # -------------------------
    # Logging
    # -------------------------
    log_level: str = "INFO"
    log_json: bool = True

    # -------------------------
    # Emergency cases
    # -------------------------
    # false: any non-empty status string is stored verbatim
    strict_status: bool = False
    seed_demo_cases: bool = False
    simulation_seed: Optional[int] = None

    # -------------------------
    # Pydantic v2 config
    # -------------------------
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
