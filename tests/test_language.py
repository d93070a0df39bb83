import pytest

from replypilot.services.language import (
    ENGLISH,
    TAGALOG,
    TAGLISH,
    classify_language,
    count_markers,
)


class TestCountMarkers:
    def test_counts_distinct_whole_words(self):
        assert count_markers("salamat po, salamat po talaga") == 3

    def test_ignores_partial_words(self):
        # "sang" and "pound" contain "sa" and "po" but are not whole-word hits
        assert count_markers("sang pound") == 0

    def test_empty_text(self):
        assert count_markers("") == 0
        assert count_markers(None) == 0


class TestClassifyLanguage:
    @pytest.mark.parametrize("hint", [ENGLISH, TAGLISH, TAGALOG, " Taglish "])
    def test_concrete_hint_wins(self, hint):
        assert classify_language("Salamat po, ang ganda!", hint) == hint.strip().lower()

    def test_english_hint_overrides_filipino_text(self):
        assert classify_language("Salamat po, ang ganda talaga!", "english") == ENGLISH

    def test_two_markers_is_taglish(self):
        assert classify_language("Ang bilis dumating, thanks!", "auto") == TAGLISH

    def test_one_marker_is_english(self):
        assert classify_language("Great item po", "auto") == ENGLISH

    def test_no_markers_is_english(self):
        assert classify_language("Item arrived quickly and was well packed.") == ENGLISH

    def test_case_insensitive(self):
        assert classify_language("SALAMAT PO SELLER") == TAGLISH

    def test_unknown_hint_falls_back_to_detection(self):
        assert classify_language("Maganda naman yung item", "klingon") == TAGLISH

    def test_never_returns_tagalog_from_auto(self):
        assert classify_language("Maraming salamat po, napakaganda ng produkto ninyo") == TAGLISH

    def test_none_text(self):
        assert classify_language(None) == ENGLISH
