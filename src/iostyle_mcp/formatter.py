"""WhatsApp markup → iOS-style Unicode rich text.

Converts the inline formatting WhatsApp users type into characters that
render as styled text anywhere plain text is accepted:

    *bold*          → 𝗯𝗼𝗹𝗱
    _italic_        → 𝘪𝘵𝘢𝘭𝘪𝘤
    ~strike~        → s̶t̶r̶i̶k̶e̶
    ```monospace``` → 𝚖𝚘𝚗𝚘𝚜𝚙𝚊𝚌𝚎
    "quotes"        → “quotes”

and inserts a zero-width space after each emoji.
"""

from __future__ import annotations

from iostyle_mcp.emoji import add_emoji_spacing
from iostyle_mcp.spans import PASS_ORDER, normalize_quotes, rewrite


def convert(text: str) -> str:
    """Convert WhatsApp inline markup to iOS-style Unicode.

    Processing order matters — styles claim delimiters in turn:
    1. *bold*
    2. _italic_
    3. ~strikethrough~
    4. ```monospace```
    5. straight quotes → curly quotes
    6. emoji spacing (last, after all glyph substitution)

    Non-alphanumeric characters within styled spans pass through unchanged
    (strikethrough marks every character). Unmatched delimiters are left
    as-is.

    Args:
        text: Message text with optional WhatsApp formatting.

    Returns:
        The styled text. Equal to ``text`` when there is nothing to convert.
    """
    for style in PASS_ORDER:
        text = rewrite(text, style)
    text = normalize_quotes(text)
    return add_emoji_spacing(text)
