"""
Domain exceptions for courtbot.

This module provides the exception hierarchy raised by the command
registry, the command orchestrator and the wizard (conversation) engine.
"""

from courtbot.domain.exceptions.command import (
    CommandAlreadyRegisteredError,
    CommandError,
    MissingWizardStepError,
)
from courtbot.domain.exceptions.wizard import (
    StepParseError,
    WizardBusyError,
    WizardCancelledError,
    WizardError,
)

__all__ = [
    "CommandError",
    "CommandAlreadyRegisteredError",
    "MissingWizardStepError",
    "WizardError",
    "StepParseError",
    "WizardCancelledError",
    "WizardBusyError",
]
