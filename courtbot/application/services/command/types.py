"""Core type definitions for the command completion system.

Defines the parser contract (input and result), the static command
definition exported by command modules, and the registered command that
binds a definition to its domain handler.
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any

from courtbot.domain.model.chat.source import SourceContext
from courtbot.domain.model.wizard.step import WizardStep
from courtbot.domain.ports.chat_event_port import ChatEvent
from courtbot.domain.ports.container_port import ServiceResolver


@dataclass(frozen=True, kw_only=True)
class ParserInput:
    """What a command parser receives.

    Attributes:
        args: Positional arguments after the command name.
        event: The triggering chat event.
        container: DI container for parsers that need to look things up.
    """

    args: list[str]
    event: ChatEvent
    container: ServiceResolver


@dataclass(kw_only=True)
class ParseResult:
    """What a command parser returns.

    Exactly one of three outcomes:
    - ``error`` set: the provided arguments are malformed;
    - ``missing`` non-empty: fields to collect interactively, in order;
    - neither: every field is resolved.

    Attributes:
        parsed: Fields resolved so far.
        missing: Fields still to collect, in collection order.
        error: Message shown verbatim to the user.
    """

    parsed: dict[str, Any] = field(default_factory=dict)
    missing: list[str] = field(default_factory=list)
    error: str | None = None

    def __post_init__(self) -> None:
        if self.error is not None and self.missing:
            raise ValueError("A parse result cannot carry both an error and missing fields")

    @classmethod
    def complete(cls, **parsed: Any) -> "ParseResult":
        return cls(parsed=parsed)

    @classmethod
    def needs(cls, *missing: str, **parsed: Any) -> "ParseResult":
        return cls(parsed=parsed, missing=list(missing))

    @classmethod
    def failed(cls, error: str) -> "ParseResult":
        return cls(error=error)

    @property
    def is_error(self) -> bool:
        return self.error is not None

    @property
    def is_complete(self) -> bool:
        return self.error is None and not self.missing


CommandParser = Callable[[ParserInput], ParseResult | Awaitable[ParseResult]]
CommandHandler = Callable[[dict[str, Any], SourceContext], Awaitable[None]]


def no_args(_input: ParserInput) -> ParseResult:
    """Parser for commands that take no arguments."""
    return ParseResult()


@dataclass(frozen=True, kw_only=True)
class CommandDefinition:
    """Static command definition - what command modules export.

    Attributes:
        parser: Turns raw arguments into a ParseResult.
        steps: Wizard steps for every field the parser may report missing.
    """

    parser: CommandParser
    steps: tuple[WizardStep, ...] = ()


@dataclass(frozen=True, kw_only=True)
class RegisteredCommand:
    """A command definition bound to its domain handler.

    Attributes:
        key: Registry key, e.g. ``event:join``.
        parser: Turns raw arguments into a ParseResult.
        steps: Wizard steps for every field the parser may report missing.
        handler: Async function invoked with the fully-resolved data.
    """

    key: str
    parser: CommandParser
    steps: tuple[WizardStep, ...]
    handler: CommandHandler

    def step_for(self, param: str) -> WizardStep | None:
        """Return the wizard step that collects ``param``, if any."""
        for step in self.steps:
            if step.param == param:
                return step
        return None
