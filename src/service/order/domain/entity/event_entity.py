from datetime import datetime
from enum import StrEnum
from typing import List, Optional

import attrs

from src.platform.types.prefixed_id import EVENT_ID_PREFIX, SHOW_ID_PREFIX, generate_prefixed_id
from src.service.order.domain.entity.order_rule_entity import OrderRuleDay, OrderRuleRangeDate
from src.service.order.domain.entity.ticket_stock_entity import TicketStock


ONLINE_VENUE = 'ONLINE'


class EventStatus(StrEnum):
    ACTIVE = 'ACTIVE'
    INACTIVE = 'INACTIVE'


class ShowStatus(StrEnum):
    ACTIVE = 'ACTIVE'
    INACTIVE = 'INACTIVE'


class ShowType(StrEnum):
    LIVE = 'LIVE'
    HOLOGRAM_LIVE = 'HOLOGRAM_LIVE'
    ONLINE = 'ONLINE'


@attrs.define
class Location:
    country: str
    city: str
    formatted_address: str
    latitude: float
    longitude: float
    event_id: str = ''
    show_id: str = ''


@attrs.define
class Promotor:
    name: str
    email: str
    phone: str
    event_id: str = ''


@attrs.define
class Artist:
    name: str
    event_id: str = ''


@attrs.define
class Show:
    id: str
    event_id: str
    venue: str
    type: str
    time: datetime
    status: str = ShowStatus.ACTIVE
    location: Optional[Location] = None
    ticket_stocks: List[TicketStock] = attrs.field(factory=list)

    @classmethod
    def create(
        cls, *, event_id: str, venue: str, type: str, time: datetime, location: Location
    ) -> 'Show':
        show_id = generate_prefixed_id(SHOW_ID_PREFIX)
        return cls(
            id=show_id,
            event_id=event_id,
            venue=venue,
            type=type,
            time=time,
            status=ShowStatus.ACTIVE,
            location=attrs.evolve(location, event_id=event_id, show_id=show_id),
        )

    def belongs_to_event(self, event_id: str) -> bool:
        return self.event_id == event_id


@attrs.define
class Event:
    id: str
    name: str
    description: str
    status: str
    created_at: datetime
    updated_at: datetime
    promotors: List[Promotor] = attrs.field(factory=list)
    artists: List[Artist] = attrs.field(factory=list)
    shows: List[Show] = attrs.field(factory=list)
    order_rule_range_date: Optional[OrderRuleRangeDate] = None
    order_rule_days: List[OrderRuleDay] = attrs.field(factory=list)

    @classmethod
    def create(cls, *, name: str, description: str, now: datetime) -> 'Event':
        return cls(
            id=generate_prefixed_id(EVENT_ID_PREFIX),
            name=name,
            description=description,
            status=EventStatus.ACTIVE,
            created_at=now,
            updated_at=now,
        )

    @property
    def ticket_stocks(self) -> List[TicketStock]:
        return [stock for show in self.shows for stock in show.ticket_stocks]
