import re

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_BEARER_PREFIX = re.compile(r"^bearer(?:\s+|$)", re.IGNORECASE)


def clean_api_key(value: str | None) -> str | None:
    """Trim a pasted key and drop a leading 'Bearer ' prefix. Blank keys become None."""
    if value is None:
        return None
    key = _BEARER_PREFIX.sub("", str(value).strip()).strip()
    return key or None


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    groq_api_key: str | None = None
    gemini_api_key: str | None = None
    openai_api_key: str | None = None

    groq_model: str = "llama-3.1-8b-instant"
    gemini_model: str = "gemini-1.5-flash"
    openai_model: str = "gpt-4o-mini"

    temperature: float = 0.4
    max_tokens: int = 220
    provider_timeout: float = 30.0

    max_sentences: int = 4
    product_name_max_length: int = 80
    usage_limit: int = 0  # 0 = unlimited

    cors_origins: list[str] = ["*"]
    host: str = "0.0.0.0"
    port: int = 10000
    log_level: str = "INFO"

    @field_validator("groq_api_key", "gemini_api_key", "openai_api_key", mode="before")
    @classmethod
    def _clean_key(cls, value):
        return clean_api_key(value)


settings = Settings()
