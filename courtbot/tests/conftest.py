"""Pytest configuration and shared fixtures for testing."""

from datetime import datetime
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from courtbot.application.services.command.command_registry import CommandRegistry
from courtbot.application.services.command.command_service import CommandService
from courtbot.application.services.wizard.wizard_service import WizardService
from courtbot.domain.model.chat.source import UserIdentity
from courtbot.domain.model.schedule.day_of_week import DayOfWeek
from courtbot.domain.model.schedule.event import Event, EventStatus
from courtbot.domain.model.schedule.scaffold import Scaffold

# Constants
TEST_CHAT_ID = -100123
TEST_USER_ID = 42
TEST_ADMIN_ID = 7


class FakeChatEvent:
    """In-memory ChatEvent: records replies and callback answers."""

    def __init__(
        self,
        user_id: int = TEST_USER_ID,
        chat_id: int = TEST_CHAT_ID,
        text: str | None = None,
        callback_id: str | None = None,
        callback_data: str | None = None,
        message_id: int | None = None,
        username: str | None = "player",
    ) -> None:
        self.chat_id = chat_id
        self.user = UserIdentity(id=user_id, username=username, first_name="Test")
        self.text = text
        self.callback_id = callback_id
        self.callback_data = callback_data
        self.message_id = message_id
        self.reply = AsyncMock()
        self.answer_callback = AsyncMock()

    @property
    def replies(self) -> list[str]:
        """Texts of every reply sent through this event."""
        return [c.args[0] for c in self.reply.await_args_list]

    def last_keyboard(self) -> Any:
        call = self.reply.await_args
        if len(call.args) > 1:
            return call.args[1]
        return call.kwargs.get("keyboard")


class FakeContainer:
    """Minimal name-based container for parsers and loaders."""

    def __init__(self, **services: Any) -> None:
        self._services = dict(services)

    def resolve(self, name: str) -> Any:
        if name not in self._services:
            raise KeyError(f"Service '{name}' is not registered")
        return self._services[name]


# --- Chat Event Fixtures ---


@pytest.fixture
def make_event():
    """Factory for command/text events."""

    def _make(text: str | None = None, user_id: int = TEST_USER_ID, **kwargs: Any):
        return FakeChatEvent(user_id=user_id, text=text, **kwargs)

    return _make


@pytest.fixture
def make_callback():
    """Factory for button-press events."""

    def _make(
        data: str,
        user_id: int = TEST_USER_ID,
        message_id: int | None = 555,
        callback_id: str = "cb-1",
    ):
        return FakeChatEvent(
            user_id=user_id,
            callback_id=callback_id,
            callback_data=data,
            message_id=message_id,
        )

    return _make


# --- Repository Fixtures ---


@pytest.fixture
def sample_events() -> list[Event]:
    return [
        Event(id="ev_1", starts_at=datetime(2024, 1, 20, 21, 0), courts=2, status=EventStatus.ANNOUNCED),
        Event(id="ev_2", starts_at=datetime(2024, 1, 21, 19, 0), courts=3, status=EventStatus.ANNOUNCED),
        Event(id="ev_3", starts_at=datetime(2024, 1, 22, 18, 0), courts=1, status=EventStatus.CREATED),
    ]


@pytest.fixture
def sample_scaffolds() -> list[Scaffold]:
    return [
        Scaffold(id="sc_1", day_of_week=DayOfWeek.TUE, time="21:00", default_courts=2),
        Scaffold(
            id="sc_2",
            day_of_week=DayOfWeek.SAT,
            time="10:00",
            default_courts=3,
            is_active=False,
        ),
    ]


@pytest.fixture
def mock_event_repository(sample_events):
    repo = MagicMock()
    repo.get_events = AsyncMock(return_value=sample_events)
    repo.find_by_message_id = AsyncMock(return_value=None)
    return repo


@pytest.fixture
def mock_scaffold_repository(sample_scaffolds):
    repo = MagicMock()
    repo.get_scaffolds = AsyncMock(return_value=sample_scaffolds)
    return repo


@pytest.fixture
def container(mock_event_repository, mock_scaffold_repository) -> FakeContainer:
    return FakeContainer(
        event_repository=mock_event_repository,
        scaffold_repository=mock_scaffold_repository,
    )


# --- Service Fixtures ---


@pytest.fixture
def registry() -> CommandRegistry:
    """Create an empty CommandRegistry."""
    return CommandRegistry()


@pytest.fixture
def wizard_service() -> WizardService:
    return WizardService(timeout_seconds=0)


@pytest.fixture
def command_service(container, wizard_service) -> CommandService:
    return CommandService(container=container, wizard_service=wizard_service)
