from abc import ABC, abstractmethod

from src.service.order.domain.entity.ticket_stock_entity import TicketStock


class ITicketStockCommandRepo(ABC):
    """Inventory store. The row lock is the only guard against over-sale."""

    @abstractmethod
    async def find_by_id_for_update(self, *, ticket_stock_id: str) -> TicketStock:
        """
        SELECT ... FOR UPDATE; blocks other buyers of the same tier until commit/rollback.

        Raises:
            NotFoundError: unknown ticket stock id
        """
        pass

    @abstractmethod
    async def update(self, *, ticket_stock: TicketStock) -> TicketStock:
        """Write back acquired and last_stock_update."""
        pass
