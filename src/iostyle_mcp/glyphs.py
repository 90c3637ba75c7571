"""ASCII → Unicode Mathematical Alphanumeric glyph tables.

WhatsApp-style inline markup is rendered with the same code point blocks
iOS shows for styled text:

    *bold*          → Math Sans-Serif Bold       (U+1D5D4 block)
    _italic_        → Math Sans-Serif Italic     (U+1D608 block)
    ~strike~        → each character + U+0336 COMBINING LONG STROKE OVERLAY
    ```monospace``` → Math Monospace              (U+1D670 block)

Tables are built once at import and exposed read-only.
"""

from __future__ import annotations

import enum
from types import MappingProxyType
from typing import Mapping

# ---------------------------------------------------------------------------
# Unicode Mathematical Alphanumeric Symbols offset tables
# ---------------------------------------------------------------------------

# Math Sans-Serif Bold: U+1D5D4 (A) .. U+1D607
_BOLD_UPPER_START = 0x1D5D4  # 𝗔
_BOLD_LOWER_START = 0x1D5EE  # 𝗮
_BOLD_DIGIT_START = 0x1D7EC  # 𝟬 (Math Sans-Serif Bold Digits)

# Math Sans-Serif Italic: U+1D608 (A) .. U+1D63B
_ITALIC_UPPER_START = 0x1D608  # 𝘈
_ITALIC_LOWER_START = 0x1D622  # 𝘢
# No italic digits in Unicode standard

# Math Monospace: U+1D670 (A) .. U+1D6A3
_MONO_UPPER_START = 0x1D670  # 𝙰
_MONO_LOWER_START = 0x1D68A  # 𝚊
_MONO_DIGIT_START = 0x1D7F6  # 𝟶 (Math Monospace Digits)

STRIKETHROUGH_MARK = "\u0336"  # COMBINING LONG STROKE OVERLAY


class StyleKind(enum.Enum):
    """Inline styles, valued by their (open == close) delimiter."""

    BOLD = "*"
    ITALIC = "_"
    STRIKETHROUGH = "~"
    MONOSPACE = "```"

    @property
    def delimiter(self) -> str:
        return self.value


def _build_table(upper_start: int, lower_start: int,
                 digit_start: int | None = None) -> Mapping[str, str]:
    """Build a read-only ASCII → Math block table."""
    table: dict[str, str] = {}
    for i in range(26):
        table[chr(65 + i)] = chr(upper_start + i)  # A-Z
        table[chr(97 + i)] = chr(lower_start + i)  # a-z
    if digit_start is not None:
        for i in range(10):
            table[chr(48 + i)] = chr(digit_start + i)  # 0-9
    return MappingProxyType(table)


BOLD_TABLE = _build_table(_BOLD_UPPER_START, _BOLD_LOWER_START, _BOLD_DIGIT_START)
ITALIC_TABLE = _build_table(_ITALIC_UPPER_START, _ITALIC_LOWER_START)
MONOSPACE_TABLE = _build_table(_MONO_UPPER_START, _MONO_LOWER_START, _MONO_DIGIT_START)

GLYPH_TABLES: Mapping[StyleKind, Mapping[str, str]] = MappingProxyType({
    StyleKind.BOLD: BOLD_TABLE,
    StyleKind.ITALIC: ITALIC_TABLE,
    StyleKind.MONOSPACE: MONOSPACE_TABLE,
})


def map_character(style: StyleKind, ch: str) -> str:
    """Return the styled form of a single character.

    Characters outside the style's source alphabet come back unchanged.
    Strikethrough applies to every character, so its result is always
    two code points long.
    """
    if style is StyleKind.STRIKETHROUGH:
        return ch + STRIKETHROUGH_MARK
    return GLYPH_TABLES[style].get(ch, ch)


def style_text(style: StyleKind, text: str) -> str:
    """Map every character of ``text`` through ``style``."""
    return "".join(map_character(style, ch) for ch in text)


def to_bold(text: str) -> str:
    """Convert plain text to Math Sans-Serif Bold Unicode."""
    return style_text(StyleKind.BOLD, text)


def to_italic(text: str) -> str:
    """Convert plain text to Math Sans-Serif Italic Unicode."""
    return style_text(StyleKind.ITALIC, text)


def to_strikethrough(text: str) -> str:
    """Overlay a long stroke on every character."""
    return style_text(StyleKind.STRIKETHROUGH, text)


def to_monospace(text: str) -> str:
    """Convert plain text to Math Monospace Unicode."""
    return style_text(StyleKind.MONOSPACE, text)
