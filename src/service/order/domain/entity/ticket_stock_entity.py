from datetime import datetime
from enum import StrEnum
from typing import Optional

import attrs

from src.platform.exception.exceptions import BadRequestError
from src.platform.types.prefixed_id import TICKET_STOCK_ID_PREFIX, generate_prefixed_id


class TicketTier(StrEnum):
    WOOD = 'WOOD'
    BRONZE = 'BRONZE'
    SILVER = 'SILVER'
    GOLD = 'GOLD'
    ONLINE = 'ONLINE'


@attrs.define
class TicketStock:
    id: str
    event_id: str
    show_id: str
    tier: str
    allocation: int
    price: float
    last_stock_update: datetime
    acquired: int = 0
    online_for: Optional[str] = None

    @classmethod
    def create(
        cls,
        *,
        event_id: str,
        show_id: str,
        tier: str,
        allocation: int,
        price: float,
        now: datetime,
        online_for: Optional[str] = None,
    ) -> 'TicketStock':
        return cls(
            id=generate_prefixed_id(TICKET_STOCK_ID_PREFIX),
            event_id=event_id,
            show_id=show_id,
            tier=tier,
            allocation=allocation,
            price=price,
            last_stock_update=now,
            acquired=0,
            online_for=online_for,
        )

    @property
    def remaining(self) -> int:
        return self.allocation - self.acquired

    def belongs_to_show(self, show_id: str) -> bool:
        return self.show_id == show_id

    def reserve(self, *, quantity: int, now: datetime) -> 'TicketStock':
        """Take `quantity` units; the caller must hold the row lock until commit."""
        if quantity < 1:
            raise BadRequestError('quantity must be at least 1')
        if self.acquired + quantity > self.allocation:
            raise BadRequestError('out of stock')
        return attrs.evolve(self, acquired=self.acquired + quantity, last_stock_update=now)
