from courtbot.application.commands.loaders import (
    active_scaffolds_loader,
    all_scaffolds_loader,
    days_loader,
)
from courtbot.domain.exceptions.wizard import StepParseError
from courtbot.domain.model.schedule.day_of_week import DayOfWeek, parse_day_of_week
from courtbot.domain.model.wizard.step import StepType, WizardStep


def parse_day(value: str) -> DayOfWeek:
    day = parse_day_of_week(value)
    if day is None:
        raise StepParseError(f"Invalid day: {value}. Use Mon, Tue, Wed, Thu, Fri, Sat, Sun")
    return day


day_step = WizardStep(
    param="day",
    type=StepType.SELECT,
    prompt="Choose a day of the week:",
    columns=4,
    create_loader=days_loader,
    parse=parse_day,
)

scaffold_select_step = WizardStep(
    param="scaffoldId",
    type=StepType.SELECT,
    prompt="Choose a scaffold:",
    create_loader=active_scaffolds_loader,
)

# toggling must also offer inactive scaffolds
scaffold_toggle_step = WizardStep(
    param="scaffoldId",
    type=StepType.SELECT,
    prompt="Choose a scaffold to toggle:",
    create_loader=all_scaffolds_loader,
)
