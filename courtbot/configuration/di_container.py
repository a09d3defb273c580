"""Dependency Injection Container.

Name-based container: command parsers and wizard option loaders look up
collaborators with ``container.resolve("event_repository")``. Core
services are lazy singletons created on first access.
"""

import logging
from collections.abc import Callable
from typing import Any

from courtbot.application.services.command.command_registry import CommandRegistry
from courtbot.application.services.command.command_service import CommandService
from courtbot.application.services.wizard.wizard_service import WizardService
from courtbot.configuration.config import Settings, get_settings
from courtbot.domain.ports.message_sender_port import MessageSender
from courtbot.domain.ports.repositories.event_repository import EventRepository
from courtbot.domain.ports.repositories.scaffold_repository import ScaffoldRepository
from courtbot.infrastructure.chat.dispatcher import ChatDispatcher

logger = logging.getLogger(__name__)


class DIContainer:
    """Process-wide service container.

    Built once at startup; the command registry it owns must be fully
    populated before the first chat event is dispatched.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        event_repository: EventRepository | None = None,
        scaffold_repository: ScaffoldRepository | None = None,
        message_sender: MessageSender | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._services: dict[str, Any] = {}
        self._factories: dict[str, Callable[[], Any]] = {}

        self.register("container", self)
        self.register("settings", self._settings)
        if event_repository is not None:
            self.register("event_repository", event_repository)
        if scaffold_repository is not None:
            self.register("scaffold_repository", scaffold_repository)
        if message_sender is not None:
            self.register("message_sender", message_sender)

        self.register_factory("command_registry", CommandRegistry)
        self.register_factory(
            "wizard_service",
            lambda: WizardService(timeout_seconds=self._settings.wizard_timeout_seconds),
        )
        self.register_factory(
            "command_service",
            lambda: CommandService(container=self, wizard_service=self.wizard_service()),
        )
        self.register_factory(
            "chat_dispatcher",
            lambda: ChatDispatcher(
                registry=self.command_registry(),
                command_service=self.command_service(),
                wizard_service=self.wizard_service(),
                admin_user_id=self._settings.admin_user_id,
            ),
        )

    def register(self, name: str, service: Any) -> None:
        """Register a ready-made service instance under ``name``."""
        self._factories.pop(name, None)
        self._services[name] = service

    def register_factory(self, name: str, factory: Callable[[], Any]) -> None:
        """Register a factory; its result is created once, on first resolve."""
        self._services.pop(name, None)
        self._factories[name] = factory

    def resolve(self, name: str) -> Any:
        """Return the service registered under ``name``.

        Raises:
            KeyError: If nothing is registered under ``name``.
        """
        if name in self._services:
            return self._services[name]
        factory = self._factories.get(name)
        if factory is None:
            raise KeyError(f"Service '{name}' is not registered")
        service = factory()
        self._services[name] = service
        logger.debug("Created service: %s", name)
        return service

    def __contains__(self, name: object) -> bool:
        return name in self._services or name in self._factories

    @property
    def settings(self) -> Settings:
        return self._settings

    # === Core services ===

    def command_registry(self) -> CommandRegistry:
        return self.resolve("command_registry")

    def wizard_service(self) -> WizardService:
        return self.resolve("wizard_service")

    def command_service(self) -> CommandService:
        return self.resolve("command_service")

    def dispatcher(self) -> ChatDispatcher:
        return self.resolve("chat_dispatcher")
