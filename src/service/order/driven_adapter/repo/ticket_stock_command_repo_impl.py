from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.order.app.interface.i_ticket_stock_command_repo import ITicketStockCommandRepo
from src.service.order.domain.entity.ticket_stock_entity import TicketStock
from src.service.order.driven_adapter.model.ticket_stock_model import TicketStockModel


class TicketStockCommandRepoImpl(ITicketStockCommandRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @staticmethod
    def _to_entity(db_stock: TicketStockModel) -> TicketStock:
        return TicketStock(
            id=db_stock.id,
            event_id=db_stock.event_id,
            show_id=db_stock.show_id,
            online_for=db_stock.online_for,
            tier=db_stock.tier,
            allocation=db_stock.allocation,
            acquired=db_stock.acquired,
            price=db_stock.price,
            last_stock_update=db_stock.last_stock_update,
        )

    @Logger.io
    async def find_by_id_for_update(self, *, ticket_stock_id: str) -> TicketStock:
        result = await self.session.execute(
            select(TicketStockModel).where(TicketStockModel.id == ticket_stock_id).with_for_update()
        )
        db_stock = result.scalar_one_or_none()
        if db_stock is None:
            raise NotFoundError(f"ticket stock's properties with id '{ticket_stock_id}' is not found")
        return self._to_entity(db_stock)

    @Logger.io
    async def update(self, *, ticket_stock: TicketStock) -> TicketStock:
        await self.session.execute(
            update(TicketStockModel)
            .where(TicketStockModel.id == ticket_stock.id)
            .values(
                acquired=ticket_stock.acquired,
                last_stock_update=ticket_stock.last_stock_update,
            )
        )
        return ticket_stock
