from abc import ABC, abstractmethod

from src.service.order.domain.entity.event_entity import Event, Show


class IEventQueryRepo(ABC):
    @abstractmethod
    async def find_event_by_id(self, *, event_id: str) -> Event:
        """
        Raises:
            NotFoundError: unknown event id
        """
        pass

    @abstractmethod
    async def find_show_by_id(self, *, show_id: str) -> Show:
        """
        Raises:
            NotFoundError: unknown show id
        """
        pass
