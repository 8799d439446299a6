"""
Order Query Repository Interface

Read-only; each call opens its own session so calls can run concurrently.
"""

from abc import ABC, abstractmethod
from typing import Dict, List

from src.service.order.domain.entity.order_entity import Item, Order


class IOrderQueryRepo(ABC):
    @abstractmethod
    async def count(self, *, customer_id: int) -> int:
        pass

    @abstractmethod
    async def find_many(self, *, customer_id: int, offset: int, limit: int) -> List[Order]:
        """Newest first (id descending), without items."""
        pass

    @abstractmethod
    async def find_items_by_order_ids(self, *, order_ids: List[str]) -> Dict[str, List[Item]]:
        pass
