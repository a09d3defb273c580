from abc import ABC, abstractmethod

from courtbot.domain.model.schedule.scaffold import Scaffold


class ScaffoldRepository(ABC):
    """Repository interface for Scaffold entity"""

    @abstractmethod
    async def get_scaffolds(self) -> list[Scaffold]:
        """List all scaffolds"""
