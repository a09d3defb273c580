"""Command completion system.

Parses chat commands, collects missing fields through the wizard
service, and invokes the registered domain handler.
"""

from courtbot.application.services.command.command_registry import CommandRegistry
from courtbot.application.services.command.command_service import CommandService
from courtbot.application.services.command.types import (
    CommandDefinition,
    CommandHandler,
    CommandParser,
    ParseResult,
    ParserInput,
    RegisteredCommand,
)

__all__ = [
    "CommandDefinition",
    "CommandHandler",
    "CommandParser",
    "CommandRegistry",
    "CommandService",
    "ParseResult",
    "ParserInput",
    "RegisteredCommand",
]
