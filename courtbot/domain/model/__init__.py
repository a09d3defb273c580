# flake8: noqa

# Chat domain models
from courtbot.domain.model.chat.keyboard import InlineButton, InlineKeyboard
from courtbot.domain.model.chat.source import (
    CallbackSource,
    ChatRef,
    CommandSource,
    SourceContext,
    SourceType,
    UserIdentity,
)

# Wizard domain models
from courtbot.domain.model.wizard.step import HydratedStep, StepOption, StepType, WizardStep

# Schedule domain models
from courtbot.domain.model.schedule.day_of_week import DayOfWeek, parse_day_of_week
from courtbot.domain.model.schedule.event import Event, EventStatus
from courtbot.domain.model.schedule.scaffold import Scaffold

__all__ = [
    # Chat
    "InlineButton",
    "InlineKeyboard",
    "ChatRef",
    "UserIdentity",
    "SourceType",
    "SourceContext",
    "CommandSource",
    "CallbackSource",
    # Wizard
    "StepType",
    "StepOption",
    "WizardStep",
    "HydratedStep",
    # Schedule
    "DayOfWeek",
    "parse_day_of_week",
    "Event",
    "EventStatus",
    "Scaffold",
]
