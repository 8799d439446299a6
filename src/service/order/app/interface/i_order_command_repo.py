"""
Order Command Repository Interface

Runs on the unit-of-work session; every call joins the open transaction.
"""

from abc import ABC, abstractmethod

from src.service.order.domain.entity.order_entity import Order


class IOrderCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, order: Order) -> Order:
        """Insert the order row and its items."""
        pass

    @abstractmethod
    async def update(self, *, order: Order) -> Order:
        """Persist status, payment references and updated_at."""
        pass

    @abstractmethod
    async def find_by_id_for_update(self, *, order_id: str) -> Order:
        """
        Load the order and lock its row until the transaction ends.

        Raises:
            NotFoundError: unknown order id
        """
        pass
