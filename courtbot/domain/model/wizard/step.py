"""Wizard step descriptors.

A ``WizardStep`` describes how to collect one missing command field: what
to ask, whether the answer is typed or picked from a list, how to validate
it, and where dynamic choices come from. Steps are declared once at import
time and never mutated; ``hydrate`` binds a step to the runtime container
to produce the ``HydratedStep`` the wizard engine works with.
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from courtbot.domain.ports.container_port import ServiceResolver
from courtbot.domain.shared_kernel import ValueObject


class StepType(str, Enum):
    """Input kind of a wizard step."""

    TEXT = "text"
    SELECT = "select"


@dataclass(frozen=True)
class StepOption(ValueObject):
    """A selectable choice offered by a SELECT step."""

    value: str
    label: str


OptionLoader = Callable[[], Awaitable[list[StepOption]]]
LoaderFactory = Callable[[ServiceResolver], OptionLoader]
ParseFn = Callable[[str], Any]


@dataclass(frozen=True, kw_only=True)
class HydratedStep:
    """A wizard step with its option loader bound to the container.

    Attributes:
        param: Name of the command field this step fills in.
        type: TEXT or SELECT.
        prompt: Question shown to the user.
        columns: Number of option buttons per keyboard row.
        load: Zero-argument coroutine function returning the current options.
        parse: Validates/transforms raw input; raises StepParseError to re-prompt.
    """

    param: str
    type: StepType
    prompt: str
    columns: int = 1
    load: OptionLoader | None = None
    parse: ParseFn | None = None

    def apply(self, raw_value: str) -> Any:
        """Run the step's parse function, or pass the raw value through."""
        if self.parse is None:
            return raw_value
        return self.parse(raw_value)


@dataclass(frozen=True, kw_only=True)
class WizardStep:
    """Static definition of a wizard step.

    Attributes:
        param: Name of the command field this step fills in.
        type: TEXT or SELECT.
        prompt: Question shown to the user.
        columns: Number of option buttons per keyboard row.
        create_loader: Builds the option loader from the DI container.
        parse: Validates/transforms raw input; raises StepParseError to re-prompt.
    """

    param: str
    type: StepType
    prompt: str
    columns: int = 1
    create_loader: LoaderFactory | None = None
    parse: ParseFn | None = None

    def hydrate(self, container: ServiceResolver) -> HydratedStep:
        """Bind the option loader to ``container``.

        No caching: every call invokes ``create_loader`` again so that each
        collection sees current choices.
        """
        return HydratedStep(
            param=self.param,
            type=self.type,
            prompt=self.prompt,
            columns=self.columns,
            load=self.create_loader(container) if self.create_loader else None,
            parse=self.parse,
        )
