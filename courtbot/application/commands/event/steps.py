from datetime import date

from courtbot.application.commands.loaders import (
    active_scaffolds_loader,
    announced_events_loader,
)
from courtbot.domain.exceptions.wizard import StepParseError
from courtbot.domain.model.schedule.day_of_week import parse_day_of_week
from courtbot.domain.model.wizard.step import StepType, WizardStep

RELATIVE_DAYS = ("today", "tomorrow")


def parse_event_day(value: str) -> str:
    """Accept a day name, ``today``/``tomorrow`` or an ISO date (YYYY-MM-DD)."""
    value = value.strip()
    day = parse_day_of_week(value)
    if day is not None:
        return day.value
    if value.lower() in RELATIVE_DAYS:
        return value.lower()
    try:
        return date.fromisoformat(value).isoformat()
    except ValueError:
        raise StepParseError(
            f"Invalid day: {value}. Use a day name (Sat), today, tomorrow or YYYY-MM-DD"
        ) from None


event_select_step = WizardStep(
    param="eventId",
    type=StepType.SELECT,
    prompt="Choose an event:",
    create_loader=announced_events_loader,
)

scaffold_select_step = WizardStep(
    param="scaffoldId",
    type=StepType.SELECT,
    prompt="Choose a scaffold:",
    create_loader=active_scaffolds_loader,
)

event_day_step = WizardStep(
    param="day",
    type=StepType.TEXT,
    prompt="Enter day (e.g. Sat, tomorrow, 2024-01-20):",
    parse=parse_event_day,
)
