"""Handlers for the utility commands (start, help, myid, getchatid)."""

from typing import Any

from courtbot.application.commands.utility.defs import HELP_TEXT
from courtbot.application.services.command.types import CommandHandler
from courtbot.domain.model.chat.source import SourceContext
from courtbot.domain.ports.message_sender_port import MessageSender


def make_utility_handlers(sender: MessageSender) -> dict[str, CommandHandler]:
    """Build the utility command handlers bound to ``sender``."""

    async def handle_start(_data: dict[str, Any], source: SourceContext) -> None:
        await sender.send_message(
            source.chat.id,
            f"Hi {source.user.display_name}! I schedule court sessions for this group.\n\n"
            "Type /help to see what I can do.",
        )

    async def handle_help(_data: dict[str, Any], source: SourceContext) -> None:
        await sender.send_message(source.chat.id, HELP_TEXT)

    async def handle_myid(_data: dict[str, Any], source: SourceContext) -> None:
        await sender.send_message(source.chat.id, f"Your user ID: {source.user.id}")

    async def handle_getchatid(_data: dict[str, Any], source: SourceContext) -> None:
        await sender.send_message(source.chat.id, f"Chat ID: {source.chat.id}")

    return {
        "start": handle_start,
        "help": handle_help,
        "myid": handle_myid,
        "getchatid": handle_getchatid,
    }
