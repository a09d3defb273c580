from enum import Enum


class DayOfWeek(str, Enum):
    """Day of the week, in the short form shown to users."""

    MON = "Mon"
    TUE = "Tue"
    WED = "Wed"
    THU = "Thu"
    FRI = "Fri"
    SAT = "Sat"
    SUN = "Sun"


_DAY_ALIASES: dict[str, DayOfWeek] = {}
for _day in DayOfWeek:
    _DAY_ALIASES[_day.value.lower()] = _day
for _full, _day in zip(
    ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"),
    DayOfWeek,
):
    _DAY_ALIASES[_full] = _day


def parse_day_of_week(value: str) -> DayOfWeek | None:
    """Parse a short or full English day name, case-insensitively.

    Returns None when the value is not a day name.
    """
    return _DAY_ALIASES.get(value.strip().lower())
