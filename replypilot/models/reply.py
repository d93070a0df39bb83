from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from replypilot.config import settings

Platform = Literal["shopee", "lazada", "tiktok"]
Tone = Literal["friendly", "professional", "apology", "cheerful"]
LanguageHint = Literal["english", "taglish", "tagalog", "auto"]

PLATFORMS = ("shopee", "lazada", "tiktok")
TONES = ("friendly", "professional", "apology", "cheerful")
LANGUAGE_HINTS = ("english", "taglish", "tagalog", "auto")


def _pick(value, allowed: tuple[str, ...], default: str) -> str:
    if isinstance(value, str):
        value = value.strip().lower()
        if value in allowed:
            return value
    return default


class ReplyRequest(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    review_text: str = Field(alias="reviewText")
    product_name: str | None = Field(default=None, alias="productName")
    platform: Platform = Field(
        default="shopee",
        validation_alias=AliasChoices("platform", "marketplace"),
    )
    rating: int = 5
    tone: Tone = "friendly"
    language: LanguageHint = "auto"

    @field_validator("review_text", mode="before")
    @classmethod
    def _strip_review(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator("product_name", mode="before")
    @classmethod
    def _trim_product(cls, value):
        if value is None:
            return None
        name = str(value).strip()[: settings.product_name_max_length].strip()
        return name or None

    @field_validator("platform", mode="before")
    @classmethod
    def _default_platform(cls, value):
        return _pick(value, PLATFORMS, "shopee")

    @field_validator("rating", mode="before")
    @classmethod
    def _clamp_rating(cls, value):
        try:
            rating = int(float(value))
        except (TypeError, ValueError, OverflowError):
            return 5
        return max(1, min(5, rating))

    @field_validator("tone", mode="before")
    @classmethod
    def _default_tone(cls, value):
        return _pick(value, TONES, "friendly")

    @field_validator("language", mode="before")
    @classmethod
    def _default_language(cls, value):
        return _pick(value, LANGUAGE_HINTS, "auto")


class ReplyResult(BaseModel):
    reply: str
    engine: str  # provider path, e.g. "gemini" or "groq-fallback"
    language: str


class ErrorResponse(BaseModel):
    error: str
    details: str | None = None
