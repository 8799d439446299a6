"""
Unit of Work Pattern

- UoW owns one database session and its transaction
- Repositories obtained from the UoW share that session
- Leaving the block without commit() rolls back, releasing any row locks
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

import anyio
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.database.orm_db_setting import get_async_session


if TYPE_CHECKING:
    from src.service.order.app.interface.i_acquired_ticket_query_repo import (
        IAcquiredTicketQueryRepo,
    )
    from src.service.order.app.interface.i_event_command_repo import IEventCommandRepo
    from src.service.order.app.interface.i_event_query_repo import IEventQueryRepo
    from src.service.order.app.interface.i_order_command_repo import IOrderCommandRepo
    from src.service.order.app.interface.i_order_rule_query_repo import IOrderRuleQueryRepo
    from src.service.order.app.interface.i_ticket_stock_command_repo import (
        ITicketStockCommandRepo,
    )


class AbstractUnitOfWork(abc.ABC):
    """
    Usage:
        async with uow:
            stock = await uow.ticket_stock_command_repo.find_by_id_for_update(...)
            await uow.order_command_repo.create(order=order)
            await uow.commit()
    """

    order_command_repo: IOrderCommandRepo
    ticket_stock_command_repo: ITicketStockCommandRepo
    acquired_ticket_query_repo: IAcquiredTicketQueryRepo
    order_rule_query_repo: IOrderRuleQueryRepo
    event_query_repo: IEventQueryRepo
    event_command_repo: IEventCommandRepo

    async def __aenter__(self) -> AbstractUnitOfWork:
        return self

    async def __aexit__(self, *args) -> None:
        await self.rollback()

    async def commit(self) -> None:
        await self._commit()

    @abc.abstractmethod
    async def _commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def rollback(self) -> None:
        raise NotImplementedError


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def __aenter__(self) -> AbstractUnitOfWork:
        from src.service.order.driven_adapter.repo.acquired_ticket_query_repo_impl import (
            AcquiredTicketQueryRepoImpl,
        )
        from src.service.order.driven_adapter.repo.event_command_repo_impl import (
            EventCommandRepoImpl,
        )
        from src.service.order.driven_adapter.repo.event_query_repo_impl import (
            EventQueryRepoImpl,
        )
        from src.service.order.driven_adapter.repo.order_command_repo_impl import (
            OrderCommandRepoImpl,
        )
        from src.service.order.driven_adapter.repo.order_rule_query_repo_impl import (
            OrderRuleQueryRepoImpl,
        )
        from src.service.order.driven_adapter.repo.ticket_stock_command_repo_impl import (
            TicketStockCommandRepoImpl,
        )

        self.order_command_repo = OrderCommandRepoImpl(session=self.session)
        self.ticket_stock_command_repo = TicketStockCommandRepoImpl(session=self.session)
        self.acquired_ticket_query_repo = AcquiredTicketQueryRepoImpl(session=self.session)
        self.order_rule_query_repo = OrderRuleQueryRepoImpl(session=self.session)
        self.event_query_repo = EventQueryRepoImpl(session=self.session)
        self.event_command_repo = EventCommandRepoImpl(session=self.session)

        return await super().__aenter__()

    async def _commit(self) -> None:
        await self.session.commit()

    async def rollback(self) -> None:
        # Shielded so a cancelled (timed-out) workflow still releases its locks
        with anyio.CancelScope(shield=True):
            await self.session.rollback()


def get_unit_of_work(
    session: AsyncSession = Depends(get_async_session),
) -> AbstractUnitOfWork:
    return SqlAlchemyUnitOfWork(session)
