"""Telegram transport adapter (python-telegram-bot)."""

from courtbot.infrastructure.adapters.secondary.telegram.event import (
    TelegramChatEvent,
    to_reply_markup,
)
from courtbot.infrastructure.adapters.secondary.telegram.transport import (
    TelegramMessageSender,
    TelegramTransport,
)

__all__ = [
    "TelegramChatEvent",
    "TelegramMessageSender",
    "TelegramTransport",
    "to_reply_markup",
]
