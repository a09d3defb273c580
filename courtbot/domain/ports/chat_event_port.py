"""Inbound chat event port.

Transport adapters wrap their native update objects in something that
satisfies ``ChatEvent`` so the command and wizard services never touch the
transport library directly.
"""

from typing import Protocol

from courtbot.domain.model.chat.keyboard import InlineKeyboard
from courtbot.domain.model.chat.source import UserIdentity


class ChatEvent(Protocol):
    """A single inbound chat event (typed message or button press)."""

    @property
    def chat_id(self) -> int:
        """ID of the chat the event originated in."""
        ...

    @property
    def user(self) -> UserIdentity:
        """The user who sent the message or pressed the button."""
        ...

    @property
    def text(self) -> str | None:
        """Message text for typed messages, None for button presses."""
        ...

    @property
    def callback_id(self) -> str | None:
        """Callback query ID when the event is a button press."""
        ...

    @property
    def callback_data(self) -> str | None:
        """Data attached to the pressed button."""
        ...

    @property
    def message_id(self) -> int | None:
        """ID of the message the pressed button belongs to."""
        ...

    async def reply(self, text: str, keyboard: InlineKeyboard | None = None) -> None:
        """Send a message to the originating chat."""
        ...

    async def answer_callback(self, text: str | None = None) -> None:
        """Acknowledge a button press (no-op for typed messages)."""
        ...
