"""
Order Query Repository Implementation

Opens a fresh session per call (an AsyncSession can not serve two
concurrent queries), so count and page can be fetched in parallel.
"""

from collections import defaultdict
from contextlib import AbstractAsyncContextManager
from typing import Callable, Dict, List

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.order.app.interface.i_order_query_repo import IOrderQueryRepo
from src.service.order.domain.entity.order_entity import Item, Order
from src.service.order.driven_adapter.model.order_model import OrderItemModel, OrderModel
from src.service.order.driven_adapter.repo.order_command_repo_impl import (
    item_model_to_entity,
    order_model_to_entity,
)


class OrderQueryRepoImpl(IOrderQueryRepo):
    def __init__(
        self, session_factory: Callable[..., AbstractAsyncContextManager[AsyncSession]]
    ) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def count(self, *, customer_id: int) -> int:
        async with self.session_factory() as session:
            result = await session.execute(
                select(func.count(OrderModel.id)).where(OrderModel.customer_id == customer_id)
            )
            return int(result.scalar_one())

    @Logger.io
    async def find_many(self, *, customer_id: int, offset: int, limit: int) -> List[Order]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(OrderModel)
                .where(OrderModel.customer_id == customer_id)
                .order_by(OrderModel.id.desc())
                .offset(offset)
                .limit(limit)
            )
            return [order_model_to_entity(db_order) for db_order in result.scalars().all()]

    @Logger.io
    async def find_items_by_order_ids(self, *, order_ids: List[str]) -> Dict[str, List[Item]]:
        if not order_ids:
            return {}

        async with self.session_factory() as session:
            result = await session.execute(
                select(OrderItemModel)
                .where(OrderItemModel.order_id.in_(order_ids))
                .order_by(OrderItemModel.id)
            )
            items_by_order: Dict[str, List[Item]] = defaultdict(list)
            for db_item in result.scalars().all():
                items_by_order[db_item.order_id].append(item_model_to_entity(db_item))
            return dict(items_by_order)
