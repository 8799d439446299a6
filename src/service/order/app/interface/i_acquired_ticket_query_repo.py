from abc import ABC, abstractmethod


class IAcquiredTicketQueryRepo(ABC):
    @abstractmethod
    async def count(self, *, event_id: str, customer_id: int) -> int:
        """Number of tickets the customer already holds for the event."""
        pass
