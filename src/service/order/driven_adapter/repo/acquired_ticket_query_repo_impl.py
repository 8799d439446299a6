from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.order.app.interface.i_acquired_ticket_query_repo import IAcquiredTicketQueryRepo
from src.service.order.driven_adapter.model.ticket_stock_model import AcquiredTicketModel


class AcquiredTicketQueryRepoImpl(IAcquiredTicketQueryRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @Logger.io
    async def count(self, *, event_id: str, customer_id: int) -> int:
        result = await self.session.execute(
            select(func.count(AcquiredTicketModel.id)).where(
                AcquiredTicketModel.event_id == event_id,
                AcquiredTicketModel.customer_id == customer_id,
            )
        )
        return int(result.scalar_one())
