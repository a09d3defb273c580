"""Chat dispatcher.

Routes inbound chat events either to the wizard service (answers,
selections and cancellation for a pending prompt) or to the command
service (registered commands typed by the user or triggered by a button).
"""

import asyncio
import logging

from courtbot.application.services.command.command_registry import CommandRegistry
from courtbot.application.services.command.command_service import CommandService
from courtbot.application.services.command.types import RegisteredCommand
from courtbot.application.services.wizard.renderer import (
    WIZARD_CANCEL_DATA,
    WIZARD_SELECT_PREFIX,
)
from courtbot.application.services.wizard.wizard_service import WizardService
from courtbot.domain.exceptions.wizard import BUSY_MESSAGE, WizardBusyError
from courtbot.domain.ports.chat_event_port import ChatEvent

logger = logging.getLogger(__name__)

CANCEL_COMMAND = "cancel"
ADMIN_COMMAND = "admin"

UNKNOWN_COMMAND_MESSAGE = "Unknown command"
UNKNOWN_ACTION_MESSAGE = "Unknown action"
NOTHING_TO_CANCEL_MESSAGE = "Nothing to cancel."
ADMIN_ONLY_MESSAGE = "This command is only available to administrators"
ADMIN_USAGE_MESSAGE = "Usage: /admin <command> <subcommand> [args...]"
UNKNOWN_ADMIN_COMMAND_MESSAGE = "Unknown admin command"
ERROR_MESSAGE = "An error occurred"


def split_command(text: str) -> tuple[str, list[str]]:
    """Split ``/base@botname arg1 arg2`` into ``("base", ["arg1", "arg2"])``."""
    parts = text.strip().split()
    if not parts:
        return "", []
    base = parts[0].lstrip("/").split("@", 1)[0].lower()
    return base, parts[1:]


class ChatDispatcher:
    """Entry point for every inbound chat event.

    Commands run as background tasks: the transport delivers updates one
    at a time, and a command suspended in the wizard only resumes once a
    later update is delivered, so awaiting it here would deadlock.
    """

    def __init__(
        self,
        registry: CommandRegistry,
        command_service: CommandService,
        wizard_service: WizardService,
        admin_user_id: int | None = None,
    ) -> None:
        self._registry = registry
        self._command_service = command_service
        self._wizard_service = wizard_service
        self._admin_user_id = admin_user_id
        self._tasks: set[asyncio.Task] = set()

    @property
    def running_tasks(self) -> set[asyncio.Task]:
        """Commands currently executing (including those awaiting input)."""
        return set(self._tasks)

    async def handle_text(self, event: ChatEvent) -> None:
        """Plain text message: an answer to a pending wizard prompt, if any."""
        if self._wizard_service.is_active(event.user.id):
            await self._feed_input(event, event.text or "")

    async def handle_command(self, event: ChatEvent) -> None:
        """Slash command typed by the user."""
        user_id = event.user.id
        base, args = split_command(event.text or "")

        if self._wizard_service.is_active(user_id):
            if base == CANCEL_COMMAND:
                await self._wizard_service.cancel(user_id, event)
            else:
                await event.reply(BUSY_MESSAGE)
            return

        if base == CANCEL_COMMAND:
            await event.reply(NOTHING_TO_CANCEL_MESSAGE)
            return

        if base == ADMIN_COMMAND:
            await self._handle_admin(event, args)
            return

        registered, command_args = self._resolve(base, args)
        if registered is None:
            await event.reply(UNKNOWN_COMMAND_MESSAGE)
            return
        self._spawn(registered, command_args, event)

    async def handle_callback(self, event: ChatEvent) -> None:
        """Inline button press."""
        user_id = event.user.id
        data = event.callback_data or ""

        if data == WIZARD_CANCEL_DATA:
            await self._wizard_service.cancel(user_id, event)
            await event.answer_callback()
            return

        if data.startswith(WIZARD_SELECT_PREFIX):
            await self._feed_input(event, data[len(WIZARD_SELECT_PREFIX) :])
            await event.answer_callback()
            return

        if self._wizard_service.is_active(user_id):
            await event.answer_callback(BUSY_MESSAGE)
            return

        registered, args = self._resolve_callback(data)
        if registered is None:
            logger.warning("Unknown callback action: %s", data)
            await event.answer_callback(UNKNOWN_ACTION_MESSAGE)
            return

        await event.answer_callback()
        self._spawn(registered, args, event)

    async def close(self) -> None:
        """Cancel every running command (used on shutdown)."""
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)

    async def _feed_input(self, event: ChatEvent, raw_value: str) -> None:
        """Pass an answer to the wizard; the step stays pending if re-prompting fails."""
        try:
            await self._wizard_service.handle_input(event, raw_value)
        except Exception:
            logger.exception("Wizard input error for user %s", event.user.id)
            await event.reply(ERROR_MESSAGE)

    async def _handle_admin(self, event: ChatEvent, args: list[str]) -> None:
        """``/admin <base> <sub> [args...]`` - admin-only commands."""
        if self._admin_user_id is None or event.user.id != self._admin_user_id:
            await event.reply(ADMIN_ONLY_MESSAGE)
            return

        if not args:
            await event.reply(ADMIN_USAGE_MESSAGE)
            return

        inner_base, inner_args = args[0].lower(), args[1:]
        registered = None
        command_args = inner_args
        if inner_args:
            inner_key = f"{inner_base}:{inner_args[0].lower()}"
            registered = self._registry.get(f"{ADMIN_COMMAND}:{inner_key}") or self._registry.get(
                inner_key
            )
            command_args = inner_args[1:]
        if registered is None:
            registered = self._registry.get(inner_base)
            command_args = inner_args

        if registered is None:
            await event.reply(UNKNOWN_ADMIN_COMMAND_MESSAGE)
            return
        self._spawn(registered, command_args, event)

    def _resolve(self, base: str, args: list[str]) -> tuple[RegisteredCommand | None, list[str]]:
        """``base sub args`` -> ``base:sub`` with ``args``, else ``base`` with all args.

        Command names are case-insensitive; arguments are passed through as typed.
        """
        if args:
            registered = self._registry.get(f"{base}:{args[0].lower()}")
            if registered is not None:
                return registered, args[1:]
        return self._registry.get(base), args

    def _resolve_callback(self, data: str) -> tuple[RegisteredCommand | None, list[str]]:
        """``event:join`` or ``event:join:<id>`` -> registered command and its args."""
        registered = self._registry.get(data)
        if registered is not None:
            return registered, []

        parts = data.split(":")
        if len(parts) > 2:
            registered = self._registry.get(f"{parts[0]}:{parts[1]}")
            if registered is not None:
                return registered, [":".join(parts[2:])]
        return None, []

    def _spawn(self, registered: RegisteredCommand, args: list[str], event: ChatEvent) -> None:
        task = asyncio.create_task(
            self._run(registered, args, event), name=f"command:{registered.key}"
        )
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _run(self, registered: RegisteredCommand, args: list[str], event: ChatEvent) -> None:
        try:
            await self._command_service.run(registered, args, event)
        except WizardBusyError as e:
            await event.reply(str(e))
        except Exception:
            logger.exception("Command error: %s", registered.key)
            await event.reply(ERROR_MESSAGE)
