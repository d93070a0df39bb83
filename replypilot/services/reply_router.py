import logging
from dataclasses import dataclass
from typing import Callable

from replypilot.errors import (
    EmptyReplyError,
    ProviderConfigError,
    ProviderError,
    UsageLimitError,
)
from replypilot.models.reply import ReplyRequest, ReplyResult
from replypilot.services.language import (
    ENGLISH,
    ENGLISH_MARKERS,
    TAGALOG,
    TAGALOG_MARKERS,
    TAGLISH,
    classify_language,
    count_markers,
    is_filipino,
)
from replypilot.services.normalizer import normalize_reply
from replypilot.services.prompt_builder import build_correction_prompts, build_prompts
from replypilot.services.providers import GEMINI, GROQ, TextProvider
from replypilot.services.usage import UsageTracker

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Route:
    name: str
    predicate: Callable[[str], bool]
    provider: str


DEFAULT_ROUTES = (
    Route("filipino", is_filipino, GEMINI),
    Route("default", lambda language: True, GROQ),
)

_API_KEY_ENV = {
    "groq": "GROQ_API_KEY",
    "gemini": "GEMINI_API_KEY",
    "openai": "OPENAI_API_KEY",
}


def looks_like_wrong_language(text: str, language: str) -> bool:
    """Marker-count check on generated text. Best effort, it can misfire both ways."""
    filipino = count_markers(text, TAGALOG_MARKERS)
    english = count_markers(text, ENGLISH_MARKERS)
    if language == ENGLISH:
        return filipino >= 2
    if language == TAGLISH:
        return filipino == 0 and english >= 3
    if language == TAGALOG:
        return english >= 3
    return False


class ReplyRouter:
    """
    Routes a review to a provider, applies a single fallback hop and an optional
    corrective rewrite, then normalizes the reply.

    Args:
        providers: Configured providers keyed by name.
        usage: Per-caller usage counter.
        routes: Ordered ``Route`` table; the first match with a configured provider wins.
        primary: Default provider, also the fallback for every other route.
        corrector: Provider used for the wrong-language rewrite. Defaults to ``primary``.
        max_sentences: Sentence cap applied by the normalizer.
    """

    def __init__(
        self,
        providers: dict[str, TextProvider],
        usage: UsageTracker,
        routes: tuple[Route, ...] = DEFAULT_ROUTES,
        primary: str = GROQ,
        corrector: str | None = None,
        max_sentences: int = 4,
    ):
        self.providers = providers
        self.usage = usage
        self.routes = routes
        self.primary = primary
        self.corrector = corrector if corrector in providers else primary
        self.max_sentences = max_sentences

    def select(self, language: str) -> tuple[str, str | None]:
        """Return ``(provider, fallback)`` names for a resolved language."""
        for route in self.routes:
            if route.predicate(language) and route.provider in self.providers:
                fallback = None
                if route.provider != self.primary and self.primary in self.providers:
                    fallback = self.primary
                logger.debug("Route '%s' -> %s (fallback=%s)", route.name, route.provider, fallback)
                return route.provider, fallback

        wanted = next((r.provider for r in self.routes if r.predicate(language)), self.primary)
        raise ProviderConfigError(f"{_API_KEY_ENV.get(wanted, wanted.upper())} is not set")

    def _call(self, name: str, system: str, user: str) -> str:
        return self.providers[name].complete(system, user)

    def _generate_raw(self, provider: str, fallback: str | None, system: str, user: str) -> tuple[str, str]:
        try:
            return self._call(provider, system, user), provider
        except Exception as exc:
            if fallback is None:
                logger.error("%s call failed with no fallback: %s", provider, exc)
                raise ProviderError(f"{provider}: {exc}") from exc
            logger.warning("%s call failed, falling back to %s: %s", provider, fallback, exc)

        try:
            return self._call(fallback, system, user), f"{fallback}-fallback"
        except Exception as exc:
            logger.error("Fallback %s call failed: %s", fallback, exc)
            raise ProviderError(f"{fallback}: {exc}") from exc

    def _correct(self, text: str, language: str) -> str | None:
        if self.corrector not in self.providers:
            return None
        prompts = build_correction_prompts(text, language)
        try:
            corrected = self._call(self.corrector, prompts.system, prompts.user)
        except Exception as exc:
            logger.warning("Corrective %s call failed, keeping original reply: %s", self.corrector, exc)
            return None
        return corrected.strip() or None

    def generate(self, request: ReplyRequest, caller_id: str) -> ReplyResult:
        if self.usage.is_over_limit(caller_id):
            raise UsageLimitError(f"Limit of {self.usage.limit} replies reached")

        language = classify_language(request.review_text, request.language)
        provider, fallback = self.select(language)
        logger.info("Generating %s reply via %s", language, provider)

        prompts = build_prompts(request, language)
        text, engine = self._generate_raw(provider, fallback, prompts.system, prompts.user)

        if text and looks_like_wrong_language(text, language):
            logger.info("Reply does not look like %s, asking %s to rewrite", language, self.corrector)
            corrected = self._correct(text, language)
            if corrected:
                text = corrected
                engine = f"{engine}+{self.corrector}-fix"

        reply = normalize_reply(text, language, self.max_sentences)
        if not reply:
            raise EmptyReplyError(f"{engine} returned no text")

        self.usage.increment(caller_id)
        return ReplyResult(reply=reply, engine=engine, language=language)
