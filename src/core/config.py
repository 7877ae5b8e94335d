from functools import lru_cache
from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import AppSettings, CompletionModels


class Settings(BaseSettings):
    """Application settings loaded from environment + defaults"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    ENVIRONMENT: str = "development"

    # Credentials have no default: startup fails when they are missing
    OPENAI_API_KEY: SecretStr
    CONVERTAPI_SECRET: SecretStr

    OPENAI_BASE_URL: str = AppSettings.OPENAI_BASE_URL
    CONVERTAPI_BASE_URL: str = AppSettings.CONVERTAPI_BASE_URL
    COMPLETION_MODEL: CompletionModels = AppSettings.COMPLETION_MODEL
    COMPLETION_MAX_TOKENS: int = AppSettings.COMPLETION_MAX_TOKENS
    UPSTREAM_TIMEOUT: float = AppSettings.UPSTREAM_TIMEOUT
    HOST: str = AppSettings.HOST
    PORT: int = AppSettings.PORT

    @property
    def completion_config(self) -> dict:
        return {
            "api_key": self.OPENAI_API_KEY.get_secret_value(),
            "base_url": self.OPENAI_BASE_URL,
            "model": self.COMPLETION_MODEL.value,
            "max_tokens": self.COMPLETION_MAX_TOKENS,
            "timeout": self.UPSTREAM_TIMEOUT,
        }

    @property
    def conversion_config(self) -> dict:
        return {
            "secret": self.CONVERTAPI_SECRET.get_secret_value(),
            "base_url": self.CONVERTAPI_BASE_URL,
            "timeout": self.UPSTREAM_TIMEOUT,
        }


@lru_cache()
def get_settings() -> Settings:
    return Settings()
