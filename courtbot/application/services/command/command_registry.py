"""Command registry.

Maps a command key (``event:join``, ``scaffold:create``, ``help``) to its
parser, wizard steps and bound domain handler.
"""

import logging
from collections.abc import Iterator

from courtbot.application.services.command.types import (
    CommandDefinition,
    CommandHandler,
    RegisteredCommand,
)
from courtbot.domain.exceptions.command import CommandAlreadyRegisteredError

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Central registry for chat commands.

    Registration is expected to complete at startup before any inbound
    event is dispatched; the registry is read-only afterwards.
    """

    def __init__(self) -> None:
        self._commands: dict[str, RegisteredCommand] = {}

    def register(
        self,
        key: str,
        definition: CommandDefinition,
        handler: CommandHandler,
    ) -> None:
        """Register a command definition with its handler.

        Args:
            key: Registry key, e.g. ``event:join``.
            definition: Parser and wizard steps for the command.
            handler: Domain handler invoked with the resolved data.

        Raises:
            CommandAlreadyRegisteredError: If ``key`` is already registered.
        """
        if key in self._commands:
            raise CommandAlreadyRegisteredError(key)

        self._commands[key] = RegisteredCommand(
            key=key,
            parser=definition.parser,
            steps=tuple(definition.steps),
            handler=handler,
        )
        logger.debug("Registered command: %s", key)

    def get(self, key: str) -> RegisteredCommand | None:
        """Look up a registered command; None if the key is unknown."""
        return self._commands.get(key)

    def keys(self) -> list[str]:
        """Sorted list of registered command keys."""
        return sorted(self._commands)

    def __contains__(self, key: object) -> bool:
        return key in self._commands

    def __iter__(self) -> Iterator[RegisteredCommand]:
        return iter(self._commands.values())

    def __len__(self) -> int:
        return len(self._commands)
