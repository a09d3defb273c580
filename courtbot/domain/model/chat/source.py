"""Invocation source context.

Describes how a command was triggered (typed command or button press)
together with the originating chat and user identity. Built fresh for
every invocation and never persisted.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

from courtbot.domain.shared_kernel import ValueObject


class SourceType(str, Enum):
    """How a command was triggered."""

    COMMAND = "command"
    CALLBACK = "callback"


@dataclass(frozen=True)
class ChatRef(ValueObject):
    """The chat a command was issued in."""

    id: int


@dataclass(frozen=True)
class UserIdentity(ValueObject):
    """Identity of the user who triggered a command."""

    id: int
    username: str | None = None
    first_name: str | None = None
    last_name: str | None = None

    @property
    def display_name(self) -> str:
        """Best human-readable name for mentions and listings."""
        if self.username:
            return f"@{self.username}"
        full = " ".join(part for part in (self.first_name, self.last_name) if part)
        return full or str(self.id)


@dataclass(frozen=True, kw_only=True)
class SourceContext(ValueObject):
    """Base for both invocation variants."""

    chat: ChatRef
    user: UserIdentity

    @property
    def type(self) -> SourceType:
        raise NotImplementedError


@dataclass(frozen=True, kw_only=True)
class CommandSource(SourceContext):
    """Command typed by the user, e.g. ``/event join``."""

    @property
    def type(self) -> Literal[SourceType.COMMAND]:
        return SourceType.COMMAND


@dataclass(frozen=True, kw_only=True)
class CallbackSource(SourceContext):
    """Command triggered by pressing an inline button."""

    callback_id: str

    @property
    def type(self) -> Literal[SourceType.CALLBACK]:
        return SourceType.CALLBACK
