"""Application configuration via pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict

VERSION = "0.1.0"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # App
    debug: bool = False
    log_level: str = "INFO"
    allowed_origins: list[str] = ["http://localhost:3000", "http://localhost:3001"]
    host: str = "0.0.0.0"
    port: int = 3000
    # API key (optional): if set, required on operational routes (not on webhooks)
    api_key: str = ""

    # Webhook verification
    token_window_ms: int = 600_000
    webhook_rate_limit: str = "120/minute"

    # Jenkins (credential check only)
    jenkins_url: str = ""
    jenkins_user: str = ""
    jenkins_api_token: str = ""
    jenkins_timeout: float = 10.0


settings = Settings()
