"""Unit tests for Settings and DIContainer."""

import pytest
from pydantic import ValidationError

from courtbot.application.services.command.command_registry import CommandRegistry
from courtbot.application.services.command.command_service import CommandService
from courtbot.application.services.wizard.wizard_service import WizardService
from courtbot.configuration.config import Settings
from courtbot.configuration.di_container import DIContainer
from courtbot.infrastructure.chat.dispatcher import ChatDispatcher


@pytest.fixture
def settings() -> Settings:
    return Settings(
        TELEGRAM_BOT_TOKEN="123:abc",
        ADMIN_USER_ID=7,
        WIZARD_TIMEOUT_SECONDS=30,
        _env_file=None,
    )


@pytest.mark.unit
class TestSettings:
    def test_values_from_aliases(self, settings):
        assert settings.telegram_bot_token == "123:abc"
        assert settings.admin_user_id == 7
        assert settings.wizard_timeout_seconds == 30

    def test_defaults(self, monkeypatch):
        for name in ("TELEGRAM_BOT_TOKEN", "ADMIN_USER_ID", "WIZARD_TIMEOUT_SECONDS", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.admin_user_id is None
        assert settings.wizard_timeout_seconds == 300
        assert settings.log_level == "INFO"

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("WIZARD_TIMEOUT_SECONDS", "0")
        monkeypatch.setenv("LOG_LEVEL", " debug ")

        settings = Settings(_env_file=None)

        assert settings.wizard_timeout_seconds == 0
        assert settings.log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Settings(LOG_LEVEL="chatty", _env_file=None)

    def test_negative_timeout_rejected(self):
        with pytest.raises(ValidationError):
            Settings(WIZARD_TIMEOUT_SECONDS=-1, _env_file=None)


@pytest.mark.unit
class TestDIContainer:
    def test_core_services_are_singletons(self, settings):
        container = DIContainer(settings=settings)

        assert isinstance(container.command_registry(), CommandRegistry)
        assert isinstance(container.wizard_service(), WizardService)
        assert isinstance(container.command_service(), CommandService)
        assert isinstance(container.dispatcher(), ChatDispatcher)
        assert container.wizard_service() is container.wizard_service()
        assert container.resolve("command_registry") is container.command_registry()

    def test_resolves_itself_and_settings(self, settings):
        container = DIContainer(settings=settings)

        assert container.resolve("container") is container
        assert container.resolve("settings") is settings

    def test_registered_repositories(self, settings, mock_event_repository, mock_scaffold_repository):
        container = DIContainer(
            settings=settings,
            event_repository=mock_event_repository,
            scaffold_repository=mock_scaffold_repository,
        )

        assert container.resolve("event_repository") is mock_event_repository
        assert container.resolve("scaffold_repository") is mock_scaffold_repository
        assert "message_sender" not in container

    def test_unknown_service(self, settings):
        container = DIContainer(settings=settings)

        with pytest.raises(KeyError, match="Service 'nope' is not registered"):
            container.resolve("nope")

    def test_factory_is_lazy(self, settings):
        container = DIContainer(settings=settings)
        calls = []
        container.register_factory("clock", lambda: calls.append(1) or "tick")

        assert calls == []
        assert container.resolve("clock") == "tick"
        assert container.resolve("clock") == "tick"
        assert calls == [1]

    def test_register_overrides_factory(self, settings):
        container = DIContainer(settings=settings)
        registry = CommandRegistry()

        container.register("command_registry", registry)

        assert container.command_registry() is registry
