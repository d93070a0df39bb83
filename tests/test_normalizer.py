import pytest

from replypilot.services.normalizer import (
    LOCALIZED_THANKS,
    dedupe_po,
    ensure_po,
    normalize_reply,
    trim_sentences,
)


class TestNormalizeReply:
    def test_corporate_phrase_localized_for_taglish(self):
        out = normalize_reply("we appreciate your business.", "taglish")
        assert LOCALIZED_THANKS in out
        assert "we appreciate your business" not in out.lower()

    def test_corporate_phrase_kept_for_english(self):
        out = normalize_reply("We appreciate your business.", "english")
        assert out == "We appreciate your business."

    def test_typos_fixed(self):
        out = normalize_reply("Thnak you, we recieved your message.", "english")
        assert out.lower() == "thank you, we received your message."

    def test_po_appended_for_taglish(self):
        assert normalize_reply("Salamat sa order!", "taglish") == "Salamat sa order po!"

    def test_po_not_appended_for_english(self):
        assert normalize_reply("Thanks for the order!", "english") == "Thanks for the order!"

    def test_tagalog_vocabulary(self):
        out = normalize_reply("Thank you so much! Sorry for the delay.", "tagalog")
        assert "maraming salamat" in out
        assert "paumanhin" in out
        assert "thank you" not in out.lower()

    def test_sentence_limit(self):
        out = normalize_reply("One. Two! Three? Four. Five.", "english", max_sentences=4)
        assert out == "One. Two! Three? Four."

    @pytest.mark.parametrize("value", ["", None])
    def test_empty_input_unchanged(self, value):
        assert normalize_reply(value, "taglish") == value

    @pytest.mark.parametrize(
        "text,language",
        [
            ("Salamat po po sa order! Balik po kayo ulit. Ingat! Enjoy! Bye.", "taglish"),
            ("Thank you so much! Sorry for the delay.", "tagalog"),
            ("Thanks!   We hope you like it.\n\nSee you again. Take care. Bye now.", "english"),
            ("we appreciate your business. salamt", "taglish"),
            ("Salamat sa order !", "taglish"),
            ("Salamat sa order! Ingat! 😊", "taglish"),
        ],
    )
    def test_idempotent(self, text, language):
        once = normalize_reply(text, language, max_sentences=3)
        assert normalize_reply(once, language, max_sentences=3) == once


class TestSteps:
    def test_dedupe_po(self):
        assert dedupe_po("Salamat po po po!") == "Salamat po!"
        assert dedupe_po("Salamat po, po!") == "Salamat po!"

    def test_dedupe_leaves_single_po(self):
        assert dedupe_po("Opo, salamat po.") == "Opo, salamat po."

    def test_trim_collapses_whitespace(self):
        assert trim_sentences("Hello   there.\n\nThanks!", 4) == "Hello there. Thanks!"

    def test_ensure_po_without_punctuation(self):
        assert ensure_po("Salamat sa order") == "Salamat sa order po"

    def test_ensure_po_space_before_punctuation(self):
        assert ensure_po("Salamat sa order !") == "Salamat sa order po!"

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Salamat sa order! Ingat! 😊", "Salamat sa order! Ingat po! 😊"),
            ('Salamat sa order!"', 'Salamat sa order po!"'),
            ("(Salamat sa order!)", "(Salamat sa order po!)"),
        ],
    )
    def test_ensure_po_before_trailing_symbols(self, text, expected):
        assert ensure_po(text) == expected

    def test_ensure_po_keeps_existing(self):
        assert ensure_po("Salamat po!") == "Salamat po!"
