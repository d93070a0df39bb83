import logging

import google.generativeai as genai
from groq import Groq
from openai import OpenAI

from replypilot.config import Settings

logger = logging.getLogger(__name__)

GROQ = "groq"
GEMINI = "gemini"
OPENAI = "openai"


class TextProvider:
    """A remote text-generation service called with a system and a user instruction."""

    name = "provider"

    def __init__(self, api_key: str, model: str, temperature: float = 0.4,
                 max_tokens: int = 220, timeout: float | None = None):
        self.api_key = api_key
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.timeout = timeout
        self._client = None

    def complete(self, system: str, user: str) -> str:
        raise NotImplementedError


class _ChatCompletionsProvider(TextProvider):
    """Providers exposing the OpenAI-style ``chat.completions`` API."""

    def _get_client(self):
        raise NotImplementedError

    def complete(self, system: str, user: str) -> str:
        completion = self._get_client().chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": system},
                {"role": "user", "content": user},
            ],
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )
        text = (completion.choices[0].message.content or "").strip()
        logger.info("%s replied with %d chars (model=%s)", self.name, len(text), self.model)
        return text


class GroqProvider(_ChatCompletionsProvider):
    name = GROQ

    def _get_client(self) -> Groq:
        if self._client is None:
            self._client = Groq(api_key=self.api_key, timeout=self.timeout)
        return self._client


class OpenAIProvider(_ChatCompletionsProvider):
    name = OPENAI

    def _get_client(self) -> OpenAI:
        if self._client is None:
            self._client = OpenAI(api_key=self.api_key, timeout=self.timeout)
        return self._client


class GeminiProvider(TextProvider):
    name = GEMINI

    def _get_client(self):
        if self._client is None:
            genai.configure(api_key=self.api_key)
            self._client = genai
        return self._client

    def complete(self, system: str, user: str) -> str:
        client = self._get_client()
        gmodel = client.GenerativeModel(self.model, system_instruction=system)
        request_options = {"timeout": self.timeout} if self.timeout else None
        resp = gmodel.generate_content(
            user,
            generation_config={
                "temperature": self.temperature,
                "max_output_tokens": self.max_tokens,
            },
            request_options=request_options,
        )
        text = (resp.text or "").strip()
        logger.info("%s replied with %d chars (model=%s)", self.name, len(text), self.model)
        return text


def build_providers(settings: Settings) -> dict[str, TextProvider]:
    """Construct a provider for every vendor that has an API key configured."""
    common = {
        "temperature": settings.temperature,
        "max_tokens": settings.max_tokens,
        "timeout": settings.provider_timeout,
    }
    providers: dict[str, TextProvider] = {}
    if settings.groq_api_key:
        providers[GROQ] = GroqProvider(settings.groq_api_key, settings.groq_model, **common)
    if settings.gemini_api_key:
        providers[GEMINI] = GeminiProvider(settings.gemini_api_key, settings.gemini_model, **common)
    if settings.openai_api_key:
        providers[OPENAI] = OpenAIProvider(settings.openai_api_key, settings.openai_model, **common)
    logger.info("Configured providers: %s", ", ".join(providers) or "none")
    return providers
