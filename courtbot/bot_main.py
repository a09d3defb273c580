"""Telegram bot entry point.

Usage:
    python -m courtbot.bot_main
"""

import logging

from telegram.ext import Application, ApplicationBuilder

from courtbot.application.commands import register_commands
from courtbot.application.commands.utility.handlers import make_utility_handlers
from courtbot.configuration.config import Settings, get_settings
from courtbot.configuration.di_container import DIContainer
from courtbot.infrastructure.adapters.secondary.telegram import (
    TelegramMessageSender,
    TelegramTransport,
)

logger = logging.getLogger("courtbot.bot_main")


async def _post_shutdown(application: Application) -> None:
    transport: TelegramTransport | None = application.bot_data.get("transport")
    if transport is not None:
        await transport.shutdown(application)


def build_application(settings: Settings) -> Application:
    """Wire the container, the command catalogue and the Telegram transport."""
    if not settings.telegram_bot_token:
        raise ValueError("TELEGRAM_BOT_TOKEN is not set")

    application = (
        ApplicationBuilder()
        .token(settings.telegram_bot_token)
        .post_shutdown(_post_shutdown)
        .build()
    )
    sender = TelegramMessageSender(application.bot)
    container = DIContainer(settings=settings, message_sender=sender)

    register_commands(container.command_registry(), make_utility_handlers(sender))

    transport = TelegramTransport(container.dispatcher())
    transport.bind(application)
    application.bot_data["container"] = container
    application.bot_data["transport"] = transport
    return application


def main() -> None:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level, format=settings.log_format)

    application = build_application(settings)
    logger.info(
        "Starting courtbot (wizard timeout: %ss, admin: %s)",
        settings.wizard_timeout_seconds,
        settings.admin_user_id,
    )
    application.run_polling()


if __name__ == "__main__":
    main()
