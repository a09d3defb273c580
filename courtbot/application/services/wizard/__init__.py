"""Wizard service - multi-turn collection of missing command fields."""

from courtbot.application.services.wizard.renderer import (
    WIZARD_CANCEL_DATA,
    WIZARD_SELECT_PREFIX,
    RenderedStep,
    render_error,
    render_step,
)
from courtbot.application.services.wizard.wizard_service import WizardService

__all__ = [
    "WIZARD_CANCEL_DATA",
    "WIZARD_SELECT_PREFIX",
    "RenderedStep",
    "WizardService",
    "render_error",
    "render_step",
]
