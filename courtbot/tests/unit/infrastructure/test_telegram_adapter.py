"""Unit tests for the Telegram adapter (no network)."""

from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock

import pytest
from telegram import Chat, InlineKeyboardMarkup, Message, Update, User

from courtbot.domain.model.chat.keyboard import InlineButton
from courtbot.infrastructure.adapters.secondary.telegram.event import (
    TelegramChatEvent,
    to_reply_markup,
)
from courtbot.infrastructure.adapters.secondary.telegram.transport import (
    TelegramMessageSender,
    TelegramTransport,
)


def _user():
    user = MagicMock()
    user.id = 42
    user.username = "bob"
    user.first_name = "Bob"
    user.last_name = None
    return user


def _message_update(text: str):
    update = MagicMock()
    update.effective_user = _user()
    update.effective_chat.id = -100
    update.message.text = text
    update.message.message_id = 10
    update.effective_message = update.message
    update.callback_query = None
    return update


def _callback_update(data: str):
    update = MagicMock()
    update.effective_user = _user()
    update.effective_chat.id = -100
    update.message = None
    update.callback_query.id = "q-1"
    update.callback_query.data = data
    update.callback_query.message.message_id = 77
    update.effective_message = update.callback_query.message
    update.callback_query.answer = AsyncMock()
    return update


def _context():
    context = MagicMock()
    context.bot.send_message = AsyncMock()
    return context


@pytest.mark.unit
class TestReplyMarkup:
    def test_empty_keyboard(self):
        assert to_reply_markup(None) is None
        assert to_reply_markup([]) is None

    def test_rows_are_preserved(self):
        markup = to_reply_markup(
            [
                [InlineButton(text="Mon", callback_data="wizard:select:Mon")],
                [InlineButton(text="Cancel", callback_data="wizard:cancel")],
            ]
        )

        assert isinstance(markup, InlineKeyboardMarkup)
        rows = markup.inline_keyboard
        assert rows[0][0].text == "Mon"
        assert rows[0][0].callback_data == "wizard:select:Mon"
        assert rows[1][0].callback_data == "wizard:cancel"


@pytest.mark.unit
class TestTelegramChatEvent:
    def test_message_fields(self):
        event = TelegramChatEvent(_message_update("/event join"), _context())

        assert event.chat_id == -100
        assert event.user.id == 42
        assert event.user.username == "bob"
        assert event.text == "/event join"
        assert event.callback_id is None
        assert event.callback_data is None
        assert event.message_id == 10

    def test_callback_fields(self):
        event = TelegramChatEvent(_callback_update("event:join"), _context())

        assert event.text is None
        assert event.callback_id == "q-1"
        assert event.callback_data == "event:join"
        assert event.message_id == 77

    @pytest.mark.asyncio
    async def test_reply_sends_to_chat(self):
        context = _context()
        event = TelegramChatEvent(_message_update("hi"), context)

        await event.reply("Choose:", [[InlineButton(text="Cancel", callback_data="wizard:cancel")]])

        kwargs = context.bot.send_message.await_args.kwargs
        assert kwargs["chat_id"] == -100
        assert kwargs["text"] == "Choose:"
        assert isinstance(kwargs["reply_markup"], InlineKeyboardMarkup)

    @pytest.mark.asyncio
    async def test_answer_callback(self):
        update = _callback_update("event:join")
        event = TelegramChatEvent(update, _context())

        await event.answer_callback("Busy")

        update.callback_query.answer.assert_awaited_once_with(text="Busy")

    @pytest.mark.asyncio
    async def test_answer_callback_on_message_is_noop(self):
        event = TelegramChatEvent(_message_update("hi"), _context())

        await event.answer_callback()


@pytest.mark.unit
class TestTelegramTransport:
    @pytest.mark.asyncio
    async def test_updates_reach_dispatcher(self):
        dispatcher = MagicMock()
        dispatcher.handle_command = AsyncMock()
        dispatcher.handle_text = AsyncMock()
        dispatcher.handle_callback = AsyncMock()
        transport = TelegramTransport(dispatcher)

        await transport.on_command(_message_update("/help"), _context())
        await transport.on_text(_message_update("21:00"), _context())
        await transport.on_callback(_callback_update("wizard:cancel"), _context())

        assert dispatcher.handle_command.await_args.args[0].text == "/help"
        assert dispatcher.handle_text.await_args.args[0].text == "21:00"
        assert dispatcher.handle_callback.await_args.args[0].callback_data == "wizard:cancel"

    @pytest.mark.asyncio
    async def test_updates_without_user_are_dropped(self):
        dispatcher = MagicMock()
        dispatcher.handle_command = AsyncMock()
        update = _message_update("/help")
        update.effective_user = None

        await TelegramTransport(dispatcher).on_command(update, _context())

        dispatcher.handle_command.assert_not_awaited()

    def test_bind_registers_handlers(self):
        application = MagicMock()

        TelegramTransport(MagicMock()).bind(application)

        assert application.add_handler.call_count == 3
        application.add_error_handler.assert_called_once()

    @pytest.mark.asyncio
    async def test_message_sender_returns_id(self):
        bot = MagicMock()
        bot.send_message = AsyncMock(return_value=MagicMock(message_id=123))

        message_id = await TelegramMessageSender(bot).send_message(-100, "Hello")

        assert message_id == 123
        bot.send_message.assert_awaited_once_with(chat_id=-100, text="Hello", reply_markup=None)


def _real_update(text: str, edited: bool = False) -> Update:
    message = Message(
        message_id=5,
        date=datetime.now(UTC),
        chat=Chat(id=-100, type=Chat.GROUP),
        from_user=User(id=42, first_name="Bob", is_bot=False),
        text=text,
    )
    if edited:
        return Update(update_id=2, edited_message=message)
    return Update(update_id=1, message=message)


@pytest.mark.unit
class TestEditedMessages:
    def _text_handler(self):
        application = MagicMock()
        TelegramTransport(MagicMock()).bind(application)
        return application.add_handler.call_args_list[1].args[0]

    def test_text_handler_ignores_edits(self):
        handler = self._text_handler()

        assert handler.check_update(_real_update("ev_1"))
        assert not handler.check_update(_real_update("ev_9 typo fixed", edited=True))

    def test_edited_message_text_is_read(self):
        event = TelegramChatEvent(_real_update("ev_9 typo fixed", edited=True), _context())

        assert event.text == "ev_9 typo fixed"
        assert event.message_id == 5
        assert event.callback_id is None
