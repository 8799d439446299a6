from datetime import datetime, timezone
from typing import Self

from fastapi import Depends
from opentelemetry import trace

from src.platform.concurrency.deadline import workflow_deadline
from src.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.platform.logging.loguru_io import Logger
from src.service.order.domain.entity.order_entity import Order


class OnExpireOrderUseCase:
    """
    Deferred expiry callback.

    A paid order is left untouched (payment won the race). Stock is not
    returned to the pool.
    """

    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def execute(self, *, order_id: str) -> Order:
        with self.tracer.start_as_current_span(
            'use_case.on_expire_order', attributes={'order.id': order_id}
        ):
            with workflow_deadline():
                async with self.uow:
                    order = await self.uow.order_command_repo.find_by_id_for_update(
                        order_id=order_id
                    )
                    if order.is_paid():
                        Logger.base.info(f'⌛ [EXPIRE_ORDER] Order {order_id} already PAID, skip')
                        return order

                    order = order.mark_as_expired(now=datetime.now(timezone.utc))
                    await self.uow.order_command_repo.update(order=order)
                    await self.uow.commit()

            Logger.base.info(f'⌛ [EXPIRE_ORDER] Order {order_id} is EXPIRED')
            return order
