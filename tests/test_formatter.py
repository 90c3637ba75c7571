"""Tests for the WhatsApp markup → iOS-style converter."""

from iostyle_mcp.emoji import ZERO_WIDTH_SPACE
from iostyle_mcp.formatter import convert
from iostyle_mcp.glyphs import (
    STRIKETHROUGH_MARK,
    to_bold,
    to_italic,
    to_monospace,
    to_strikethrough,
)


class TestConvert:
    def test_bold(self):
        result = convert("*Hello*")
        assert result == "𝗛𝗲𝗹𝗹𝗼"
        assert "*" not in result

    def test_italic(self):
        assert convert("_Hi_") == "𝘏𝘪"

    def test_strikethrough(self):
        result = convert("~Hi~")
        assert result == "H" + STRIKETHROUGH_MARK + "i" + STRIKETHROUGH_MARK
        assert len(result) == 4

    def test_monospace(self):
        assert convert("```code```") == "𝚌𝚘𝚍𝚎"

    def test_mixed_in_sentence(self):
        result = convert("This is *bold* and _italic_ text")
        assert result == "This is " + to_bold("bold") + " and " + to_italic("italic") + " text"

    def test_all_four_styles(self):
        result = convert("*B* _I_ ~S~ ```M```")
        assert result == " ".join([
            to_bold("B"), to_italic("I"), to_strikethrough("S"), to_monospace("M"),
        ])

    def test_no_formatting(self):
        """Plain text passes through unchanged."""
        text = "Just a normal message"
        assert convert(text) == text

    def test_unmatched_delimiter(self):
        assert convert("*no close") == "*no close"

    def test_unmatched_underscore(self):
        text = "snake_case name"
        assert convert(text) == text

    def test_quotes(self):
        assert convert('He said "hi"') == "He said “hi”"

    def test_quotes_inside_bold(self):
        assert convert('*say "ok"*') == to_bold("say ") + "“" + to_bold("ok") + "”"

    def test_emoji_spacing(self):
        assert convert("Hi 😀 there") == "Hi 😀" + ZERO_WIDTH_SPACE + " there"

    def test_emoji_after_bold(self):
        assert convert("*hello* 🚀") == to_bold("hello") + " 🚀" + ZERO_WIDTH_SPACE

    def test_numbers_in_bold(self):
        result = convert("*v2.0*")
        assert result == "𝘃𝟮.𝟬"

    def test_newlines_preserved(self):
        result = convert("line1\n*bold*\nline3")
        assert result == "line1\n" + to_bold("bold") + "\nline3"

    def test_bold_before_italic(self):
        """Bold runs first, so italic only sees what bold left behind."""
        assert convert("_a*b_c*") == to_italic("a") + to_bold("b") + to_bold("c")

    def test_empty_string(self):
        assert convert("") == ""


class TestConvertIdempotence:
    def test_styled_output_is_stable(self):
        once = convert("*Hello* _world_ ~gone~ ```code 42```")
        assert convert(once) == once

    def test_mixed_residue_is_stable(self):
        once = convert("Meet at *10am*, _don_ ~not~ be late")
        assert convert(once) == once
