"""Command service.

Runs a registered command end to end: parse the arguments, collect any
missing fields through the wizard service, build the invocation source
context and call the domain handler.
"""

import inspect
import logging

from courtbot.application.services.command.types import ParserInput, RegisteredCommand
from courtbot.application.services.wizard.wizard_service import WizardService
from courtbot.domain.exceptions.command import MissingWizardStepError
from courtbot.domain.exceptions.wizard import WizardCancelledError
from courtbot.domain.model.chat.source import (
    CallbackSource,
    ChatRef,
    CommandSource,
    SourceContext,
)
from courtbot.domain.ports.chat_event_port import ChatEvent
from courtbot.domain.ports.container_port import ServiceResolver

logger = logging.getLogger(__name__)


def build_source_context(event: ChatEvent) -> SourceContext:
    """Describe how ``event`` triggered a command.

    Button presses (events carrying a callback ID) produce a CallbackSource,
    everything else a CommandSource. Both carry the same chat and user.
    """
    chat = ChatRef(id=event.chat_id)
    if event.callback_id:
        return CallbackSource(chat=chat, user=event.user, callback_id=event.callback_id)
    return CommandSource(chat=chat, user=event.user)


class CommandService:
    """Completes and executes registered commands.

    Holds no long-lived state of its own; it threads data between the
    parser, the wizard service and the handler.
    """

    def __init__(self, container: ServiceResolver, wizard_service: WizardService) -> None:
        self._container = container
        self._wizard_service = wizard_service

    async def run(
        self,
        registered: RegisteredCommand,
        args: list[str],
        event: ChatEvent,
    ) -> None:
        """Execute ``registered`` for ``event``.

        A parser error is replied verbatim and nothing else happens. A
        cancelled wizard ends the run silently.

        Raises:
            MissingWizardStepError: The parser reported a field the command
                has no step for.
            Exception: Anything raised by the parser or the handler.
        """
        try:
            result = registered.parser(
                ParserInput(args=list(args), event=event, container=self._container)
            )
            if inspect.isawaitable(result):
                result = await result

            if result.is_error:
                logger.debug("Command %s rejected arguments: %s", registered.key, result.error)
                await event.reply(result.error)
                return

            data = dict(result.parsed)
            for param in result.missing:
                step = registered.step_for(param)
                if step is None:
                    raise MissingWizardStepError(param)
                hydrated = step.hydrate(self._container)
                data[param] = await self._wizard_service.collect(hydrated, event)

            source = build_source_context(event)
            logger.info(
                "Running command %s for user %s (%s)",
                registered.key,
                source.user.id,
                source.type.value,
            )
            await registered.handler(data, source)
        except WizardCancelledError:
            logger.debug("Command %s cancelled during input collection", registered.key)
