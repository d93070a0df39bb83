"""
Regex cleanup applied to raw provider output.

Every step is a plain ``str -> str`` function; ``normalize_reply`` runs them
in a fixed order. The order matters: phrase replacement runs before the
``po`` dedupe because the localized phrase itself contains ``po``.
"""
import logging
import re

from replypilot.services.language import TAGALOG, is_filipino

logger = logging.getLogger(__name__)

LOCALIZED_THANKS = "Salamat po sa pagtitiwala sa aming shop"

_TYPOS = (
    (re.compile(r"\bthnak you\b", re.IGNORECASE), "thank you"),
    (re.compile(r"\bthank's\b", re.IGNORECASE), "thanks"),
    (re.compile(r"\brecieve(d?)\b", re.IGNORECASE), r"receive\1"),
    (re.compile(r"\bsalamt\b", re.IGNORECASE), "salamat"),
    (re.compile(r"\bpasensiya\b", re.IGNORECASE), "pasensya"),
    (re.compile(r"\bmaraming salamats\b", re.IGNORECASE), "maraming salamat"),
)

_CORPORATE_PHRASES = re.compile(
    r"\b(?:we (?:truly |really )?appreciate your business"
    r"|thank you for your business"
    r"|we value your feedback)\b",
    re.IGNORECASE,
)

# Longest phrases first so "thank you so much" is not split by "thank you"
_FORMAL_TAGALOG = (
    (re.compile(r"\bthank you so much\b", re.IGNORECASE), "maraming salamat"),
    (re.compile(r"\bthank you\b", re.IGNORECASE), "salamat"),
    (re.compile(r"\bsorry\b", re.IGNORECASE), "paumanhin"),
    (re.compile(r"\bplease\b", re.IGNORECASE), "pakiusap"),
)

_REPEATED_PO = re.compile(r"\b(po)(?:[\s,]+po)+\b", re.IGNORECASE)
_HAS_PO = re.compile(r"\bpo\b", re.IGNORECASE)
_WHITESPACE = re.compile(r"\s+")
_SENTENCE_BREAK = re.compile(r"(?<=[.!?])\s+")
_TRAILING_TAIL = re.compile(r"[^\w]*$")


def fix_typos(text: str) -> str:
    for pattern, replacement in _TYPOS:
        text = pattern.sub(replacement, text)
    return text


def localize_corporate_phrases(text: str) -> str:
    return _CORPORATE_PHRASES.sub(LOCALIZED_THANKS, text)


def formalize_tagalog(text: str) -> str:
    for pattern, replacement in _FORMAL_TAGALOG:
        text = pattern.sub(replacement, text)
    return text


def dedupe_po(text: str) -> str:
    return _REPEATED_PO.sub(r"\1", text)


def trim_sentences(text: str, max_sentences: int) -> str:
    text = _WHITESPACE.sub(" ", text).strip()
    if max_sentences <= 0:
        return text
    sentences = _SENTENCE_BREAK.split(text)
    return " ".join(sentences[:max_sentences])


def ensure_po(text: str) -> str:
    """Add a ``po`` to the last sentence when the reply has none."""
    if not text or _HAS_PO.search(text):
        return text
    # Punctuation, emoji, quotes and brackets stay after the particle
    match = _TRAILING_TAIL.search(text)
    head = text[: match.start()].rstrip()
    if not head:
        return f"{text} po"
    return f"{head} po{match.group().lstrip()}"


def normalize_reply(text: str | None, language: str, max_sentences: int = 4) -> str | None:
    """
    Clean up a generated reply for the target ``language``.

    Empty or ``None`` input is returned unchanged. The function never raises;
    on an unexpected failure the input is returned as-is.
    """
    if not text:
        return text
    try:
        cleaned = fix_typos(text)
        if is_filipino(language):
            cleaned = localize_corporate_phrases(cleaned)
        if language == TAGALOG:
            cleaned = formalize_tagalog(cleaned)
        cleaned = dedupe_po(cleaned)
        cleaned = trim_sentences(cleaned, max_sentences)
        if is_filipino(language):
            cleaned = ensure_po(cleaned)
        return cleaned
    except Exception:
        logger.exception("Normalizer failed; returning raw reply")
        return text
