"""Option loaders for SELECT steps.

Each factory receives the DI container and returns the zero-argument
coroutine function the wizard calls to fetch the current choices.
"""

from courtbot.domain.model.schedule.day_of_week import DayOfWeek
from courtbot.domain.model.schedule.event import EventStatus
from courtbot.domain.model.wizard.step import OptionLoader, StepOption
from courtbot.domain.ports.container_port import ServiceResolver
from courtbot.domain.ports.repositories.event_repository import EventRepository
from courtbot.domain.ports.repositories.scaffold_repository import ScaffoldRepository


def announced_events_loader(container: ServiceResolver) -> OptionLoader:
    async def load() -> list[StepOption]:
        repo: EventRepository = container.resolve("event_repository")
        events = await repo.get_events()
        return [
            StepOption(value=e.id, label=f"{e.starts_at:%a %d %b %H:%M} ({e.id})")
            for e in events
            if e.status == EventStatus.ANNOUNCED
        ]

    return load


def _scaffolds_loader(container: ServiceResolver, active_only: bool) -> OptionLoader:
    async def load() -> list[StepOption]:
        repo: ScaffoldRepository = container.resolve("scaffold_repository")
        scaffolds = await repo.get_scaffolds()
        return [
            StepOption(value=s.id, label=f"{s.day_of_week.value} {s.time} ({s.id})")
            for s in scaffolds
            if s.is_active or not active_only
        ]

    return load


def active_scaffolds_loader(container: ServiceResolver) -> OptionLoader:
    return _scaffolds_loader(container, active_only=True)


def all_scaffolds_loader(container: ServiceResolver) -> OptionLoader:
    return _scaffolds_loader(container, active_only=False)


def days_loader(_container: ServiceResolver) -> OptionLoader:
    async def load() -> list[StepOption]:
        return [StepOption(value=d.value, label=d.value) for d in DayOfWeek]

    return load
