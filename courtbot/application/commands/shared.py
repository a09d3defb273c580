"""Validators and wizard steps shared by event and scaffold commands."""

import re

from courtbot.domain.exceptions.wizard import StepParseError
from courtbot.domain.model.wizard.step import StepType, WizardStep

_TIME_PATTERN = re.compile(r"^([0-1]?[0-9]|2[0-3]):[0-5][0-9]$")


def parse_time(value: str) -> str:
    """Validate an HH:MM time of day."""
    value = value.strip()
    if not _TIME_PATTERN.match(value):
        raise StepParseError("Invalid time format. Use HH:MM (e.g., 21:00)")
    return value


def parse_courts(value: str) -> int:
    """Validate a positive number of courts."""
    try:
        courts = int(value.strip())
    except ValueError:
        courts = 0
    if courts < 1:
        raise StepParseError("Number of courts must be a positive number")
    return courts


def parse_username(value: str) -> str:
    """Normalize a Telegram username, dropping a leading ``@``."""
    username = strip_at(value.strip())
    if not username or " " in username:
        raise StepParseError("Enter a single username, e.g. @johndoe")
    return username


def strip_at(value: str) -> str:
    return value[1:] if value.startswith("@") else value


time_step = WizardStep(
    param="time",
    type=StepType.TEXT,
    prompt="Enter time (HH:MM):",
    parse=parse_time,
)

courts_step = WizardStep(
    param="courts",
    type=StepType.TEXT,
    prompt="How many courts?",
    parse=parse_courts,
)

username_step = WizardStep(
    param="targetUsername",
    type=StepType.TEXT,
    prompt="Enter the username (e.g. @johndoe):",
    parse=parse_username,
)
