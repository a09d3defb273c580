"""Telegram chat event adapter.

Wraps a python-telegram-bot ``Update`` so it satisfies the ``ChatEvent``
port used by the dispatcher, the command service and the wizard service.
"""

from telegram import InlineKeyboardButton, InlineKeyboardMarkup, Update
from telegram.ext import ContextTypes

from courtbot.domain.model.chat.keyboard import InlineKeyboard
from courtbot.domain.model.chat.source import UserIdentity


def to_reply_markup(keyboard: InlineKeyboard | None) -> InlineKeyboardMarkup | None:
    """Convert a transport-independent keyboard to Telegram markup."""
    if not keyboard:
        return None
    return InlineKeyboardMarkup(
        [
            [InlineKeyboardButton(button.text, callback_data=button.callback_data) for button in row]
            for row in keyboard
        ]
    )


class TelegramChatEvent:
    """A message or callback query received from Telegram."""

    def __init__(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        self._update = update
        self._context = context

        tg_user = update.effective_user
        self._user = UserIdentity(
            id=tg_user.id,
            username=tg_user.username,
            first_name=tg_user.first_name,
            last_name=tg_user.last_name,
        )

    @property
    def chat_id(self) -> int:
        return self._update.effective_chat.id

    @property
    def user(self) -> UserIdentity:
        return self._user

    @property
    def text(self) -> str | None:
        if self._update.callback_query is not None:
            return None
        message = self._update.effective_message
        return message.text if message is not None else None

    @property
    def callback_id(self) -> str | None:
        query = self._update.callback_query
        return query.id if query is not None else None

    @property
    def callback_data(self) -> str | None:
        query = self._update.callback_query
        return query.data if query is not None else None

    @property
    def message_id(self) -> int | None:
        message = self._update.effective_message
        return message.message_id if message is not None else None

    async def reply(self, text: str, keyboard: InlineKeyboard | None = None) -> None:
        await self._context.bot.send_message(
            chat_id=self.chat_id,
            text=text,
            reply_markup=to_reply_markup(keyboard),
        )

    async def answer_callback(self, text: str | None = None) -> None:
        query = self._update.callback_query
        if query is None:
            return
        await query.answer(text=text)
