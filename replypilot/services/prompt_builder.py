from dataclasses import dataclass
from pathlib import Path

from replypilot.models.reply import ReplyRequest
from replypilot.services.language import ENGLISH, TAGALOG

_PROMPT_PATH = Path(__file__).parent.parent / "prompts" / "system_prompt.txt"
_SYSTEM_PROMPT_TEMPLATE = _PROMPT_PATH.read_text(encoding="utf-8")

DEFAULT_PRODUCT = "the product"

MARKETPLACE_NAMES = {
    "shopee": "Shopee",
    "lazada": "Lazada",
    "tiktok": "TikTok Shop",
}

TONE_INSTRUCTIONS = {
    "friendly": "friendly and warm, like a helpful online seller.",
    "professional": "polite and professional, concise and courteous.",
    "apology": "sincerely apologetic and solution-focused; acknowledge the problem first.",
    "cheerful": "upbeat and cheerful, with positive energy but no exaggeration.",
}

LANGUAGE_INSTRUCTIONS = {
    ENGLISH: "Reply ONLY in English.",
    TAGALOG: "Sumagot gamit ang magalang at pormal na Filipino lamang (walang English). Gumamit ng 'po'.",
}
_TAGLISH_INSTRUCTION = (
    "Reply in natural Taglish (a mix of Filipino and English), like a friendly Filipino "
    "online seller. Use 'po' for politeness."
)

RATING_SENTIMENT = {
    5: "very positive 5-star review",
    4: "positive 4-star review",
    3: "neutral or mixed 3-star review",
    2: "negative 2-star review",
    1: "very negative 1-star review",
}


@dataclass(frozen=True)
class Prompts:
    system: str
    user: str


def build_prompts(request: ReplyRequest, language: str) -> Prompts:
    """Build the system and user instructions for a validated request."""
    marketplace = MARKETPLACE_NAMES.get(request.platform, "Shopee")
    product_name = request.product_name or DEFAULT_PRODUCT

    system = _SYSTEM_PROMPT_TEMPLATE.format(
        marketplace=marketplace,
        tone_instruction=TONE_INSTRUCTIONS[request.tone],
        language_instruction=LANGUAGE_INSTRUCTIONS.get(language, _TAGLISH_INSTRUCTION),
        product_name=product_name,
    ).strip()

    user = (
        f"Marketplace: {marketplace}\n"
        f"Rating: {request.rating} star(s) ({RATING_SENTIMENT[request.rating]})\n"
        f"Language setting: {language}\n"
        f"Product: {product_name}\n\n"
        f'Customer review:\n"""\n{request.review_text}\n"""\n\n'
        "Write the best possible public reply following all the rules."
    )
    return Prompts(system=system, user=user)


def build_correction_prompts(reply: str, language: str) -> Prompts:
    """Instructions for rewriting a reply that came back in the wrong language."""
    instruction = LANGUAGE_INSTRUCTIONS.get(language, _TAGLISH_INSTRUCTION)
    system = (
        "You rewrite marketplace seller replies. Keep the meaning, keep it 2-4 sentences, "
        f"do not add new facts. {instruction} Output only the rewritten reply."
    )
    return Prompts(system=system, user=reply)
