import re

ENGLISH = "english"
TAGLISH = "taglish"
TAGALOG = "tagalog"
AUTO = "auto"

CONCRETE_LANGUAGES = (ENGLISH, TAGLISH, TAGALOG)
FILIPINO_LANGUAGES = (TAGLISH, TAGALOG)

# Politeness particles and common Filipino function words
TAGALOG_MARKERS = (
    "po", "opo", "salamat", "naman", "lang", "kasi", "sana", "yung", "ang",
    "ng", "mga", "na", "sa", "ko", "mo", "nyo", "niyo", "kayo", "ako", "ito",
    "talaga", "sobra", "ganda", "maganda", "pero", "din", "rin", "ba",
    "hindi", "wala", "meron", "dumating", "agad", "maraming",
)

ENGLISH_MARKERS = (
    "the", "and", "you", "your", "we", "our", "for", "with", "thank",
    "thanks", "please", "is", "are", "was", "this", "that", "will", "hope",
)

_MIXED_THRESHOLD = 2


def _marker_pattern(markers: tuple[str, ...]) -> re.Pattern:
    return re.compile(r"\b(" + "|".join(re.escape(m) for m in markers) + r")\b")


_PATTERNS: dict[tuple[str, ...], re.Pattern] = {}


def count_markers(text: str | None, markers: tuple[str, ...] = TAGALOG_MARKERS) -> int:
    """Number of distinct marker words found in ``text`` as whole words."""
    if not text:
        return 0
    pattern = _PATTERNS.get(markers)
    if pattern is None:
        pattern = _PATTERNS[markers] = _marker_pattern(markers)
    return len(set(pattern.findall(text.lower())))


def classify_language(text: str | None, hint: str | None = None) -> str:
    """
    Resolve the reply language for a review.

    An explicit concrete hint wins. Otherwise two or more distinct Filipino
    markers classify the text as Taglish, anything less as English.
    """
    if isinstance(hint, str) and hint.strip().lower() in CONCRETE_LANGUAGES:
        return hint.strip().lower()
    if count_markers(text, TAGALOG_MARKERS) >= _MIXED_THRESHOLD:
        return TAGLISH
    return ENGLISH


def is_filipino(language: str) -> bool:
    return language in FILIPINO_LANGUAGES
