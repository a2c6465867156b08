from pydantic import field_validator
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Telegram
    telegram_bot_token: str
    telegram_webhook_url: str = ""  # Empty: long polling instead of webhook
    telegram_webhook_secret: str = ""  # Optional: for webhook verification

    # HTTP server (health checks, webhook)
    host: str = "0.0.0.0"
    port: int = 8080

    # Environment
    environment: str = "development"
    log_level: str = "INFO"

    # Conversion
    default_stack_size: int = 64
    failure_reaction: str = "👎"  # Telegram only accepts emoji from its reaction list

    @field_validator("default_stack_size")
    @classmethod
    def stack_size_positive(cls, value: int) -> int:
        if value < 1:
            raise ValueError("default_stack_size must be positive")
        return value

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
