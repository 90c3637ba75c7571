"""Delimiter span scanning: style rewriting and quote normalization.

Spans are found left to right, never overlap, and close at the nearest
following delimiter, so ``*a*b*c*`` holds two spans (``a`` and ``c``).
A delimiter with no partner is left in place along with the rest of the
text. There is no escaping and no nesting: each style is its own pass, and
whichever pass runs first claims the characters it matches.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator

from iostyle_mcp.glyphs import StyleKind, style_text

# Bold first, so a ``*`` run inside a would-be italic span resolves as bold.
PASS_ORDER: tuple[StyleKind, ...] = (
    StyleKind.BOLD,
    StyleKind.ITALIC,
    StyleKind.STRIKETHROUGH,
    StyleKind.MONOSPACE,
)

LEFT_DOUBLE_QUOTE = "\u201c"  # “
RIGHT_DOUBLE_QUOTE = "\u201d"  # ”
LEFT_SINGLE_QUOTE = "\u2018"  # ‘
RIGHT_SINGLE_QUOTE = "\u2019"  # ’


@dataclass(frozen=True)
class Span:
    """A delimited region: ``text[start:end]`` includes both delimiters."""

    start: int
    end: int
    interior: str


def find_spans(text: str, delimiter: str) -> Iterator[Span]:
    """Yield delimiter-bounded spans of ``text`` in order."""
    width = len(delimiter)
    pos = 0
    while True:
        start = text.find(delimiter, pos)
        if start < 0:
            return
        close = text.find(delimiter, start + width)
        if close < 0:
            return
        yield Span(start, close + width, text[start + width:close])
        pos = close + width


def _replace_spans(text: str, delimiter: str,
                   transform: Callable[[str], str]) -> str:
    pieces: list[str] = []
    cursor = 0
    for span in find_spans(text, delimiter):
        pieces.append(text[cursor:span.start])
        pieces.append(transform(span.interior))
        cursor = span.end
    if cursor == 0:
        return text
    pieces.append(text[cursor:])
    return "".join(pieces)


def rewrite(text: str, style: StyleKind) -> str:
    """Replace every ``style`` span with its styled interior.

    Both delimiters are dropped; an empty span (``**``) collapses to
    nothing.
    """
    return _replace_spans(text, style.delimiter, lambda inner: style_text(style, inner))


def normalize_quotes(text: str) -> str:
    """Turn straight ``"…"`` and ``'…'`` pairs into curly quotes.

    Apostrophes are not told apart from single quotes, so ``don't`` pairs
    with the next ``'`` in the message.
    """
    text = _replace_spans(
        text, '"', lambda inner: f"{LEFT_DOUBLE_QUOTE}{inner}{RIGHT_DOUBLE_QUOTE}"
    )
    return _replace_spans(
        text, "'", lambda inner: f"{LEFT_SINGLE_QUOTE}{inner}{RIGHT_SINGLE_QUOTE}"
    )
