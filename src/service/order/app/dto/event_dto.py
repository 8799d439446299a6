"""Admin event-authoring input, already parsed and validated at the HTTP boundary."""

from datetime import datetime
from typing import List

import attrs

from src.service.order.domain.entity.event_entity import Location, Promotor


@attrs.define(frozen=True)
class TicketAllocationInput:
    tier: str
    allocation_by_percentage: float
    price: float


@attrs.define(frozen=True)
class ShowInput:
    venue: str
    type: str
    online: bool
    location: Location
    total_ticket_allocation: int
    ticket_allocation: List[TicketAllocationInput]
    time: datetime


@attrs.define(frozen=True)
class CreateEventInput:
    name: str
    description: str
    artists: List[str]
    promotors: List[Promotor]
    online_ticket_price: float
    total_online_ticket_allocation: int
    shows: List[ShowInput]
    order_rule_days: List[int]
    order_rule_start_date: datetime
    order_rule_end_date: datetime
