"""
Domain Ports - Hexagonal architecture interfaces.

Ports define contracts that infrastructure adapters implement.
Domain layer depends on these interfaces, not concrete implementations.
"""

from courtbot.domain.ports.chat_event_port import ChatEvent
from courtbot.domain.ports.container_port import ServiceResolver
from courtbot.domain.ports.message_sender_port import MessageSender
from courtbot.domain.ports.repositories.event_repository import EventRepository
from courtbot.domain.ports.repositories.scaffold_repository import ScaffoldRepository

__all__ = [
    "ChatEvent",
    "MessageSender",
    "ServiceResolver",
    "EventRepository",
    "ScaffoldRepository",
]
