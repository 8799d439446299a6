from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.order.app.interface.i_order_rule_query_repo import IOrderRuleQueryRepo
from src.service.order.domain.entity.order_rule_entity import OrderRuleDay, OrderRuleRangeDate
from src.service.order.driven_adapter.model.order_rule_model import (
    OrderRuleDayModel,
    OrderRuleRangeDateModel,
)


class OrderRuleQueryRepoImpl(IOrderRuleQueryRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @Logger.io
    async def find_range_date_by_event_id(self, *, event_id: str) -> OrderRuleRangeDate:
        result = await self.session.execute(
            select(OrderRuleRangeDateModel).where(OrderRuleRangeDateModel.event_id == event_id)
        )
        db_rule = result.scalar_one_or_none()
        if db_rule is None:
            raise NotFoundError(f"order rule's properties with event id '{event_id}' is not found")
        return OrderRuleRangeDate(
            event_id=db_rule.event_id,
            start_date=db_rule.start_date,
            end_date=db_rule.end_date,
        )

    @Logger.io
    async def find_days_by_event_id(self, *, event_id: str) -> List[OrderRuleDay]:
        result = await self.session.execute(
            select(OrderRuleDayModel)
            .where(OrderRuleDayModel.event_id == event_id)
            .order_by(OrderRuleDayModel.day)
        )
        return [
            OrderRuleDay(event_id=db_day.event_id, day=db_day.day)
            for db_day in result.scalars().all()
        ]
