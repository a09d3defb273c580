from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from courtbot.domain.shared_kernel import Entity


class EventStatus(str, Enum):
    """Lifecycle status of a session."""

    CREATED = "created"
    ANNOUNCED = "announced"
    CANCELLED = "cancelled"
    FINISHED = "finished"
    FINALIZED = "finalized"
    PAID = "paid"


@dataclass(kw_only=True)
class Event(Entity):
    """A single scheduled session"""

    starts_at: datetime
    courts: int
    status: EventStatus = EventStatus.CREATED
    telegram_message_id: str | None = None
