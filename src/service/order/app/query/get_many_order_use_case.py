from typing import List, Self, Tuple

import anyio
from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.concurrency.deadline import workflow_deadline
from src.platform.config.di import Container
from src.platform.exception.exceptions import BadRequestError
from src.platform.logging.loguru_io import Logger
from src.service.order.app.interface.i_order_query_repo import IOrderQueryRepo
from src.service.order.domain.entity.account_entity import Account
from src.service.order.domain.entity.order_entity import Order


class GetManyOrderUseCase:
    def __init__(self, *, order_query_repo: IOrderQueryRepo) -> None:
        self.order_query_repo = order_query_repo
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        order_query_repo: IOrderQueryRepo = Depends(Provide[Container.order_query_repo]),
    ) -> Self:
        return cls(order_query_repo=order_query_repo)

    @Logger.io
    async def execute(self, *, account: Account, page: int, size: int) -> Tuple[List[Order], int]:
        """
        One page of the caller's orders (newest first) and the caller's total order count.

        Count and page are fetched concurrently; if either fails the other is
        cancelled and the error propagates.
        """
        if page < 1 or size < 1:
            raise BadRequestError('page and size must be greater than 0')

        offset = (page - 1) * size
        result: dict[str, object] = {}

        async def fetch_total() -> None:
            result['total'] = await self.order_query_repo.count(customer_id=account.id)

        async def fetch_orders() -> None:
            result['orders'] = await self.order_query_repo.find_many(
                customer_id=account.id, offset=offset, limit=size
            )

        with self.tracer.start_as_current_span(
            'use_case.get_many_order',
            attributes={'customer.id': account.id, 'page': page, 'size': size},
        ):
            with workflow_deadline():
                try:
                    async with anyio.create_task_group() as tg:
                        tg.start_soon(fetch_total)
                        tg.start_soon(fetch_orders)
                except ExceptionGroup as eg:
                    # Surface the first failure so the error handlers can map it
                    raise eg.exceptions[0] from eg

                orders: List[Order] = result['orders']  # type: ignore[assignment]
                items_by_order = await self.order_query_repo.find_items_by_order_ids(
                    order_ids=[order.id for order in orders]
                )

            for order in orders:
                order.items = items_by_order.get(order.id, [])

            return orders, int(result['total'])  # type: ignore[arg-type]
