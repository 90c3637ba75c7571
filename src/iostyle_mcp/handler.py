"""Inbound message filtering and reply construction.

A chat client hands each inbound message to :func:`build_reply`; a reply
is only produced when the message is eligible and the conversion actually
changed its text.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from iostyle_mcp.config import Settings
from iostyle_mcp.formatter import convert

logger = logging.getLogger(__name__)

_FORMATTING_CHARS = re.compile(r"[*_~`]")


@dataclass(frozen=True)
class InboundMessage:
    """The parts of a chat message the bot looks at."""

    body: str
    sender: str = ""
    is_group: bool = False
    is_broadcast: bool = False


def has_formatting(text: str) -> bool:
    """True when ``text`` contains any WhatsApp formatting character."""
    return _FORMATTING_CHARS.search(text) is not None


def is_eligible(message: InboundMessage, settings: Settings) -> bool:
    """Apply the bot's skip rules to ``message``."""
    if settings.ignore_groups and message.is_group:
        logger.debug("Skipping group message from %s", message.sender)
        return False
    if settings.ignore_broadcasts and message.is_broadcast:
        logger.debug("Skipping broadcast from %s", message.sender)
        return False
    if not message.body or not message.body.strip():
        return False
    if settings.only_process_formatted and not has_formatting(message.body):
        return False
    return True


def build_reply(message: InboundMessage, settings: Settings) -> str | None:
    """Return the reply text for ``message``, or None when no reply is due."""
    if not is_eligible(message, settings):
        return None

    styled = convert(message.body)
    if styled == message.body:
        return None

    logger.info("Converted message from %s", message.sender or "unknown sender")
    return settings.reply_prefix + styled
