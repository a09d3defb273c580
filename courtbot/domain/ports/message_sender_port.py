from typing import Protocol

from courtbot.domain.model.chat.keyboard import InlineKeyboard


class MessageSender(Protocol):
    """Outbound messaging used by command handlers."""

    async def send_message(
        self, chat_id: int, text: str, keyboard: InlineKeyboard | None = None
    ) -> int:
        """Send a message and return its ID."""
        ...
