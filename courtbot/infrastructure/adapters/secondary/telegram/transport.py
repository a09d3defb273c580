"""Telegram transport.

Binds the chat dispatcher to a python-telegram-bot ``Application`` and
provides the outbound ``MessageSender`` used by command handlers.
"""

import logging

from telegram import Bot, Update
from telegram.ext import (
    Application,
    CallbackQueryHandler,
    ContextTypes,
    MessageHandler,
    filters,
)

from courtbot.domain.model.chat.keyboard import InlineKeyboard
from courtbot.infrastructure.adapters.secondary.telegram.event import (
    TelegramChatEvent,
    to_reply_markup,
)
from courtbot.infrastructure.chat.dispatcher import ChatDispatcher

logger = logging.getLogger(__name__)


class TelegramMessageSender:
    """``MessageSender`` backed by a Telegram bot."""

    def __init__(self, bot: Bot) -> None:
        self._bot = bot

    async def send_message(
        self, chat_id: int, text: str, keyboard: InlineKeyboard | None = None
    ) -> int:
        message = await self._bot.send_message(
            chat_id=chat_id,
            text=text,
            reply_markup=to_reply_markup(keyboard),
        )
        return message.message_id


class TelegramTransport:
    """Feeds Telegram updates into the chat dispatcher."""

    def __init__(self, dispatcher: ChatDispatcher) -> None:
        self._dispatcher = dispatcher

    def bind(self, application: Application) -> None:
        """Register update handlers on ``application``."""
        # edited messages are not answers or new commands
        new_messages = filters.UpdateType.MESSAGE
        application.add_handler(MessageHandler(filters.COMMAND & new_messages, self.on_command))
        application.add_handler(
            MessageHandler(filters.TEXT & ~filters.COMMAND & new_messages, self.on_text)
        )
        application.add_handler(CallbackQueryHandler(self.on_callback))
        application.add_error_handler(self.on_error)
        logger.info("Telegram transport bound")

    async def on_command(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        if update.effective_user is None:
            return
        await self._dispatcher.handle_command(TelegramChatEvent(update, context))

    async def on_text(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        if update.effective_user is None:
            return
        await self._dispatcher.handle_text(TelegramChatEvent(update, context))

    async def on_callback(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        if update.effective_user is None:
            return
        await self._dispatcher.handle_callback(TelegramChatEvent(update, context))

    async def on_error(self, update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
        logger.error("Error while handling update %s", update, exc_info=context.error)

    async def shutdown(self, _application: Application) -> None:
        """``post_shutdown`` hook: stop commands still awaiting input."""
        await self._dispatcher.close()
