from abc import ABC, abstractmethod

from courtbot.domain.model.schedule.event import Event


class EventRepository(ABC):
    """Repository interface for Event entity"""

    @abstractmethod
    async def get_events(self) -> list[Event]:
        """List all events"""

    @abstractmethod
    async def find_by_message_id(self, message_id: str) -> Event | None:
        """Find the event whose announcement is the given chat message"""
