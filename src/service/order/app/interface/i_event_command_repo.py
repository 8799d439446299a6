from abc import ABC, abstractmethod

from src.service.order.domain.entity.event_entity import Event


class IEventCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, event: Event) -> Event:
        """
        Insert the event with its promotors, artists, shows, locations,
        ticket stocks and order rules.
        """
        pass
