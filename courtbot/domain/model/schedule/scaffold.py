from dataclasses import dataclass

from courtbot.domain.model.schedule.day_of_week import DayOfWeek
from courtbot.domain.shared_kernel import Entity


@dataclass(kw_only=True)
class Scaffold(Entity):
    """Template for a weekly recurring session"""

    day_of_week: DayOfWeek
    time: str  # HH:MM
    default_courts: int
    is_active: bool = True
