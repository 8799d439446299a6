from abc import ABC, abstractmethod
from typing import List

from src.service.order.domain.entity.order_rule_entity import OrderRuleDay, OrderRuleRangeDate


class IOrderRuleQueryRepo(ABC):
    @abstractmethod
    async def find_range_date_by_event_id(self, *, event_id: str) -> OrderRuleRangeDate:
        """
        Raises:
            NotFoundError: event has no sale window configured
        """
        pass

    @abstractmethod
    async def find_days_by_event_id(self, *, event_id: str) -> List[OrderRuleDay]:
        pass
