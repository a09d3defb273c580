"""Renders wizard steps as prompt text plus an inline keyboard."""

from dataclasses import dataclass, field

from courtbot.domain.model.chat.keyboard import InlineButton, InlineKeyboard
from courtbot.domain.model.wizard.step import HydratedStep, StepOption, StepType

WIZARD_CANCEL_DATA = "wizard:cancel"
WIZARD_SELECT_PREFIX = "wizard:select:"

NO_OPTIONS_NOTICE = "(no options available)"


@dataclass(frozen=True)
class RenderedStep:
    """Prompt text and keyboard for a wizard step."""

    text: str
    keyboard: InlineKeyboard = field(default_factory=list)


def _cancel_row() -> list[InlineButton]:
    return [InlineButton(text="Cancel", callback_data=WIZARD_CANCEL_DATA)]


def render_step(step: HydratedStep, options: list[StepOption] | None = None) -> RenderedStep:
    """Render ``step`` with its current ``options``.

    SELECT steps with options get one button per option, ``step.columns``
    per row. TEXT steps, and SELECT steps without options, only get the
    Cancel button.
    """
    keyboard: InlineKeyboard = []

    if step.type == StepType.SELECT and not options:
        keyboard.append(_cancel_row())
        return RenderedStep(text=f"{step.prompt}\n\n{NO_OPTIONS_NOTICE}", keyboard=keyboard)

    if step.type == StepType.SELECT:
        columns = max(step.columns, 1)
        buttons = [
            InlineButton(text=opt.label, callback_data=f"{WIZARD_SELECT_PREFIX}{opt.value}")
            for opt in options
        ]
        for start in range(0, len(buttons), columns):
            keyboard.append(buttons[start : start + columns])

    keyboard.append(_cancel_row())
    return RenderedStep(text=step.prompt, keyboard=keyboard)


def render_error(
    step: HydratedStep,
    error: str,
    options: list[StepOption] | None = None,
) -> RenderedStep:
    """Render ``step`` again with a validation error appended."""
    rendered = render_step(step, options)
    return RenderedStep(text=f"{rendered.text}\n\n❌ {error}", keyboard=rendered.keyboard)
