"""Command catalogue.

Every chat command the bot understands, keyed by registry key. Domain
services supply the handlers and bind them through ``register_commands``.
"""

import logging
from collections.abc import Mapping

from courtbot.application.commands.event.defs import ADMIN_COMMANDS, EVENT_COMMANDS
from courtbot.application.commands.scaffold.defs import SCAFFOLD_COMMANDS
from courtbot.application.commands.utility.defs import UTILITY_COMMANDS
from courtbot.application.services.command.command_registry import CommandRegistry
from courtbot.application.services.command.types import CommandDefinition, CommandHandler

logger = logging.getLogger(__name__)

COMMAND_DEFINITIONS: dict[str, CommandDefinition] = {
    **UTILITY_COMMANDS,
    **EVENT_COMMANDS,
    **SCAFFOLD_COMMANDS,
    **ADMIN_COMMANDS,
}


def register_commands(
    registry: CommandRegistry,
    handlers: Mapping[str, CommandHandler],
) -> None:
    """Register the catalogue definition of every key in ``handlers``.

    Raises:
        KeyError: If a handler is supplied for a key with no definition.
        CommandAlreadyRegisteredError: If a key is already registered.
    """
    unknown = sorted(set(handlers) - set(COMMAND_DEFINITIONS))
    if unknown:
        raise KeyError(f"No command definition for: {', '.join(unknown)}")

    for key, handler in handlers.items():
        registry.register(key, COMMAND_DEFINITIONS[key], handler)
    logger.info("Registered %d commands", len(handlers))


__all__ = ["COMMAND_DEFINITIONS", "register_commands"]
