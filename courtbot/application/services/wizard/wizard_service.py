"""
Wizard Service - suspends a command until the user supplies a missing field.

A command invocation that lacks a field calls ``collect()``, which sends a
prompt and then awaits a Future stored in a per-user map. The user's next
message or button press arrives as a separate chat event; the dispatcher
routes it to ``handle_input()`` or ``cancel()``, which resolve that Future
and let the original invocation continue.

State per user id: Idle -> Awaiting(step) -> Idle. At most one pending
conversation exists per user. All mutations happen on the event loop
thread, so no locking is needed.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from courtbot.application.services.wizard.renderer import render_error, render_step
from courtbot.domain.exceptions.wizard import (
    StepParseError,
    WizardBusyError,
    WizardCancelledError,
)
from courtbot.domain.model.wizard.step import HydratedStep, StepOption, StepType
from courtbot.domain.ports.chat_event_port import ChatEvent

logger = logging.getLogger(__name__)

CANCELLED_MESSAGE = "Cancelled."
DEFAULT_TIMEOUT_SECONDS = 5 * 60


@dataclass
class PendingWizard:
    """
    A conversation waiting for the user's answer.

    Attributes:
        step: The step being collected
        event: Event of the command being completed
        future: Resolves with the parsed value, or fails with WizardCancelledError
        timer: Idle-timeout handle, None when timeouts are disabled
        created_at: When the prompt was registered
    """

    step: HydratedStep
    event: ChatEvent
    future: asyncio.Future
    timer: asyncio.TimerHandle | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))


class WizardService:
    """Collects missing command fields one chat turn at a time.

    Usage:
        value = await wizard.collect(step, event)  # suspends

        # later, from the dispatcher, on the user's next event
        await wizard.handle_input(next_event, "21:00")
    """

    def __init__(self, timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS) -> None:
        """
        Args:
            timeout_seconds: Idle time after which a pending conversation is
                cancelled automatically. ``0`` disables the timeout.
        """
        self._timeout_seconds = timeout_seconds
        self._pending: dict[int, PendingWizard] = {}

    def is_active(self, user_id: int) -> bool:
        """Whether the user has a conversation awaiting input."""
        return user_id in self._pending

    async def collect(self, step: HydratedStep, event: ChatEvent) -> Any:
        """Prompt the user for ``step`` and wait for a valid answer.

        Args:
            step: Hydrated step describing the field to collect
            event: Event of the command being completed; the prompt is sent
                through it

        Returns:
            The value produced by the step's parse function (or the raw
            input when the step has none)

        Raises:
            WizardCancelledError: The user cancelled or the conversation
                timed out
            WizardBusyError: The user already has a pending conversation
        """
        user_id = event.user.id
        if user_id in self._pending:
            raise WizardBusyError(user_id)

        loop = asyncio.get_running_loop()
        entry = PendingWizard(step=step, event=event, future=loop.create_future())
        if self._timeout_seconds > 0:
            entry.timer = loop.call_later(self._timeout_seconds, self._expire, user_id, entry)
        self._pending[user_id] = entry
        logger.debug("Wizard awaiting '%s' from user %s", step.param, user_id)

        try:
            options = await self._load_options(step)
            rendered = render_step(step, options)
            await event.reply(rendered.text, rendered.keyboard)
            return await entry.future
        finally:
            self._discard(user_id, entry)

    async def handle_input(self, event: ChatEvent, raw_value: str) -> None:
        """Feed the user's answer (typed text or selected option value).

        Invalid input (StepParseError) re-sends the prompt with the error and
        keeps the conversation pending. Does nothing if the user has no
        pending conversation.
        """
        user_id = event.user.id
        entry = self._pending.get(user_id)
        if entry is None:
            return

        try:
            value = entry.step.apply(raw_value)
        except StepParseError as e:
            logger.debug(
                "Wizard input rejected for '%s' from user %s: %s",
                entry.step.param,
                user_id,
                e.message,
            )
            options = await self._load_options(entry.step)
            rendered = render_error(entry.step, e.message, options)
            await event.reply(rendered.text, rendered.keyboard)
            return

        self._discard(user_id, entry)
        if not entry.future.done():
            entry.future.set_result(value)

    async def cancel(self, user_id: int, event: ChatEvent) -> None:
        """Cancel the user's pending conversation, if any.

        The suspended ``collect()`` raises WizardCancelledError and the user
        gets a single "Cancelled." message.
        """
        entry = self._pending.get(user_id)
        if entry is None:
            return

        self._discard(user_id, entry)
        if not entry.future.done():
            entry.future.set_exception(WizardCancelledError())
        logger.debug("Wizard for '%s' cancelled by user %s", entry.step.param, user_id)
        await event.reply(CANCELLED_MESSAGE)

    async def _load_options(self, step: HydratedStep) -> list[StepOption] | None:
        if step.type != StepType.SELECT or step.load is None:
            return None
        return await step.load()

    def _expire(self, user_id: int, entry: PendingWizard) -> None:
        if self._pending.get(user_id) is not entry:
            return
        self._discard(user_id, entry)
        if not entry.future.done():
            entry.future.set_exception(WizardCancelledError("Wizard timed out"))
        idle = (datetime.now(UTC) - entry.created_at).total_seconds()
        logger.info(
            "Wizard for '%s' from user %s expired after %.1fs idle",
            entry.step.param,
            user_id,
            idle,
        )

    def _discard(self, user_id: int, entry: PendingWizard) -> None:
        if entry.timer is not None:
            entry.timer.cancel()
        if self._pending.get(user_id) is entry:
            del self._pending[user_id]
