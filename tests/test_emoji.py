"""Tests for emoji classification and zero-width spacing."""

import pytest

from iostyle_mcp.emoji import (
    VARIATION_SELECTOR_16,
    ZERO_WIDTH_SPACE,
    CodePointClass,
    add_emoji_spacing,
    classify_code_point,
    is_emoji,
    is_emoji_presentation,
)
from iostyle_mcp.glyphs import to_bold, to_italic, to_monospace, to_strikethrough


class TestClassify:
    @pytest.mark.parametrize("ch", ["😀", "🚀", "👍", "⌚", "✅", "🇺", "🫠"])
    def test_presentation(self, ch):
        assert classify_code_point(ch) is CodePointClass.EMOJI_PRESENTATION

    def test_text_default_emoji_alone(self):
        """U+2764 HEAVY BLACK HEART is text-style without VS16."""
        assert classify_code_point("❤") is CodePointClass.OTHER

    def test_text_default_emoji_with_vs16(self):
        assert classify_code_point("❤", VARIATION_SELECTOR_16) is CodePointClass.EMOJI_VARIATION

    def test_digit_with_vs16(self):
        assert classify_code_point("1", VARIATION_SELECTOR_16) is CodePointClass.EMOJI_VARIATION

    @pytest.mark.parametrize("ch", ["a", "1", "#", "©", " ", "\u0336", "𝗔"])
    def test_other(self, ch):
        assert classify_code_point(ch) is CodePointClass.OTHER

    def test_non_emoji_with_vs16(self):
        assert classify_code_point("a", VARIATION_SELECTOR_16) is CodePointClass.OTHER

    def test_property_lookups(self):
        assert is_emoji("©")
        assert not is_emoji_presentation("©")
        assert is_emoji_presentation("😀")
        assert not is_emoji("A")
        assert not is_emoji("\U0001FAF9")


class TestAddEmojiSpacing:
    def test_single_emoji(self):
        assert add_emoji_spacing("Hi 😀 there") == "Hi 😀" + ZERO_WIDTH_SPACE + " there"

    def test_adjacent_emoji(self):
        assert add_emoji_spacing("🚀🚀") == "🚀\u200b🚀\u200b"

    def test_variation_selector_kept_with_base(self):
        assert add_emoji_spacing("I \u2764\ufe0f it") == "I \u2764\ufe0f\u200b it"

    def test_presentation_emoji_with_vs16(self):
        assert add_emoji_spacing("😀\ufe0f") == "😀\ufe0f\u200b"

    def test_zwj_sequence_split(self):
        """Per-code-point classification separates ZWJ sequence members."""
        assert add_emoji_spacing("👨\u200d👩") == "👨\u200b\u200d👩\u200b"

    def test_emoji_at_end(self):
        assert add_emoji_spacing("done ✅") == "done ✅\u200b"

    def test_plain_text_unchanged(self):
        assert add_emoji_spacing("Call me at 555-1234 #1") == "Call me at 555-1234 #1"

    def test_styled_glyphs_unchanged(self):
        styled = to_bold("Bold 42") + to_italic("It") + to_monospace("m0") + to_strikethrough("s")
        assert add_emoji_spacing(styled) == styled

    def test_empty(self):
        assert add_emoji_spacing("") == ""
