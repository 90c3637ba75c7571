"""iostyle-mcp — FastMCP server that restyles chat messages iOS-style.

Exposes the converter and the bot's reply logic as MCP tools so any chat
client can call them over stdio.
"""

from __future__ import annotations

import logging
from typing import Any

from fastmcp import FastMCP

logger = logging.getLogger(__name__)

mcp = FastMCP("iOSStyle")


# ---------------------------------------------------------------------------
# Settings singleton
# ---------------------------------------------------------------------------

_settings = None


def get_settings():
    """Get or create the Settings singleton."""
    global _settings
    if _settings is not None:
        return _settings
    from iostyle_mcp.config import Settings

    _settings = Settings()
    return _settings


# ---------------------------------------------------------------------------
# MCP Tools
# ---------------------------------------------------------------------------


@mcp.tool()
async def health() -> dict:
    """Health check — returns service version and status."""
    import importlib.metadata as _meta

    from iostyle_mcp import __version__

    versions: dict[str, str] = {"iostyle_mcp": __version__}
    try:
        versions["fastmcp"] = _meta.version("fastmcp")
    except _meta.PackageNotFoundError:
        versions["fastmcp"] = "unknown"

    return {
        "service": "iostyle-mcp",
        "version": __version__,
        "versions": versions,
        "status": "ok",
    }


@mcp.tool()
async def service_status() -> dict[str, Any]:
    """Report the bot's message filtering settings and conversion order.

    Returns:
        settings: ignore_groups, ignore_broadcasts, only_process_formatted,
                  reply_prefix as currently configured.
        pass_order: Style passes in the order they are applied.
        version: Package version.
    """
    from iostyle_mcp import __version__
    from iostyle_mcp.spans import PASS_ORDER

    settings = get_settings()
    return {
        "version": __version__,
        "settings": {
            "ignore_groups": settings.ignore_groups,
            "ignore_broadcasts": settings.ignore_broadcasts,
            "only_process_formatted": settings.only_process_formatted,
            "reply_prefix": settings.reply_prefix,
        },
        "pass_order": [style.name.lower() for style in PASS_ORDER],
    }


@mcp.tool()
async def convert_text(text: str) -> dict[str, Any]:
    """Convert WhatsApp formatting to iOS-style Unicode rich text.

    Accepts WhatsApp inline formatting and converts it to Unicode
    Mathematical Alphanumeric Symbols:

        *bold*          → 𝗯𝗼𝗹𝗱
        _italic_        → 𝘪𝘵𝘢𝘭𝘪𝘤
        ~strike~        → s̶t̶r̶i̶k̶e̶
        ```monospace``` → 𝚖𝚘𝚗𝚘𝚜𝚙𝚊𝚌𝚎

    Straight quotes become curly quotes and emoji get a trailing
    zero-width space. Unmatched delimiters are left as-is.

    Args:
        text: Message text with optional WhatsApp formatting.

    Returns:
        original: The text as given.
        converted: The styled text.
        changed: Whether conversion altered the text.
    """
    from iostyle_mcp.formatter import convert

    converted = convert(text)
    return {
        "original": text,
        "converted": converted,
        "changed": converted != text,
    }


@mcp.tool()
async def preview_reply(
    text: str,
    sender: str = "",
    is_group: bool = False,
    is_broadcast: bool = False,
) -> dict[str, Any]:
    """Show the reply the bot would send for an inbound message.

    Applies the configured skip rules (groups, broadcasts, unformatted
    text), converts the message, and prepends the reply prefix. No reply
    is produced when the conversion leaves the text unchanged.

    Returns:
        eligible: Whether the message passes the skip rules.
        reply: The reply text, or null when nothing would be sent.
    """
    from iostyle_mcp.handler import InboundMessage, build_reply, is_eligible

    settings = get_settings()
    message = InboundMessage(
        body=text, sender=sender, is_group=is_group, is_broadcast=is_broadcast,
    )
    return {
        "eligible": is_eligible(message, settings),
        "reply": build_reply(message, settings),
    }


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main() -> None:
    """Entry point for the iostyle MCP server."""
    logging.basicConfig(level=get_settings().log_level.upper())
    logger.info("Starting iOS style converter")
    mcp.run()


if __name__ == "__main__":
    main()
