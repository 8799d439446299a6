from datetime import datetime
from typing import List, Literal, Optional
from zoneinfo import ZoneInfo

from pydantic import BaseModel, EmailStr, Field, field_validator

from src.platform.config.core_setting import settings
from src.service.order.app.dto.event_dto import (
    CreateEventInput,
    ShowInput,
    TicketAllocationInput,
)
from src.service.order.domain.entity.event_entity import Event, Location, Promotor, Show


LOCAL_DATETIME_FORMAT = '%Y-%m-%d %H:%M:%S'


def parse_local_datetime(value: str) -> datetime:
    """'YYYY-MM-DD HH:MM:SS' wall-clock time in the application timezone."""
    try:
        naive = datetime.strptime(value, LOCAL_DATETIME_FORMAT)
    except ValueError as e:
        raise ValueError(f'must match format {LOCAL_DATETIME_FORMAT}') from e
    return naive.replace(tzinfo=ZoneInfo(settings.APPLICATION_TIMEZONE))


class LocationRequest(BaseModel):
    country: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    formatted_address: str = ''
    latitude: float
    longitude: float


class TicketAllocationRequest(BaseModel):
    tier: Literal['WOOD', 'BRONZE', 'SILVER', 'GOLD']
    allocation_by_percentage: float = Field(..., gt=0, le=100)
    price: float = Field(..., gt=0)


class ShowRequest(BaseModel):
    venue: str = Field(..., min_length=1)
    type: Literal['LIVE', 'HOLOGRAM_LIVE']
    online: bool = False
    location: LocationRequest
    total_ticket_allocation: int = Field(..., ge=0)
    ticket_allocation: List[TicketAllocationRequest] = Field(..., min_length=1)
    time: str

    @field_validator('time')
    @classmethod
    def check_time_format(cls, v: str) -> str:
        parse_local_datetime(v)
        return v


class PromotorRequest(BaseModel):
    name: str = Field(..., min_length=1)
    email: EmailStr
    phone: str = Field(..., min_length=1)


class OrderRuleRangeDateRequest(BaseModel):
    start_date: str
    end_date: str

    @field_validator('start_date', 'end_date')
    @classmethod
    def check_date_format(cls, v: str) -> str:
        parse_local_datetime(v)
        return v


class CreateEventRequest(BaseModel):
    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    artists: List[str] = Field(..., min_length=1)
    promotors: List[PromotorRequest] = Field(..., min_length=1)
    online_ticket_price: float = Field(..., gt=0)
    total_online_ticket_allocation: int = Field(..., gt=0)
    shows: List[ShowRequest] = Field(..., min_length=1)
    order_rule_day: List[int] = []
    order_rule_range_date: OrderRuleRangeDateRequest

    @field_validator('order_rule_day')
    @classmethod
    def check_iso_weekdays(cls, v: List[int]) -> List[int]:
        if any(day < 1 or day > 7 for day in v):
            raise ValueError('days must be between 1 (Monday) and 7 (Sunday)')
        return v

    model_config = {
        'json_schema_extra': {
            'example': {
                'name': 'Coldplay: Music of the Spheres',
                'description': 'World tour, Jakarta',
                'artists': ['Coldplay'],
                'promotors': [
                    {'name': 'PK Entertainment', 'email': 'info@pk.co.id', 'phone': '0211234567'}
                ],
                'online_ticket_price': 250000,
                'total_online_ticket_allocation': 10000,
                'shows': [
                    {
                        'venue': 'Gelora Bung Karno',
                        'type': 'LIVE',
                        'online': True,
                        'location': {
                            'country': 'Indonesia',
                            'city': 'Jakarta',
                            'formatted_address': 'Jl. Pintu Satu Senayan',
                            'latitude': -6.2186,
                            'longitude': 106.8019,
                        },
                        'total_ticket_allocation': 50000,
                        'ticket_allocation': [
                            {'tier': 'GOLD', 'allocation_by_percentage': 20, 'price': 3500000},
                            {'tier': 'SILVER', 'allocation_by_percentage': 80, 'price': 1500000},
                        ],
                        'time': '2026-11-15 19:00:00',
                    }
                ],
                'order_rule_day': [1, 2, 3, 4, 5, 6, 7],
                'order_rule_range_date': {
                    'start_date': '2026-10-01 10:00:00',
                    'end_date': '2026-11-14 23:59:59',
                },
            }
        }
    }

    def to_input(self) -> CreateEventInput:
        return CreateEventInput(
            name=self.name,
            description=self.description,
            artists=list(self.artists),
            promotors=[
                Promotor(name=p.name, email=str(p.email), phone=p.phone) for p in self.promotors
            ],
            online_ticket_price=self.online_ticket_price,
            total_online_ticket_allocation=self.total_online_ticket_allocation,
            shows=[
                ShowInput(
                    venue=show.venue,
                    type=show.type,
                    online=show.online,
                    location=Location(**show.location.model_dump()),
                    total_ticket_allocation=show.total_ticket_allocation,
                    ticket_allocation=[
                        TicketAllocationInput(
                            tier=allocation.tier,
                            allocation_by_percentage=allocation.allocation_by_percentage,
                            price=allocation.price,
                        )
                        for allocation in show.ticket_allocation
                    ],
                    time=parse_local_datetime(show.time),
                )
                for show in self.shows
            ],
            order_rule_days=list(self.order_rule_day),
            order_rule_start_date=parse_local_datetime(self.order_rule_range_date.start_date),
            order_rule_end_date=parse_local_datetime(self.order_rule_range_date.end_date),
        )


class LocationResponse(BaseModel):
    country: str
    city: str
    formatted_address: str
    latitude: float
    longitude: float


class PromotorResponse(BaseModel):
    name: str
    email: str
    phone: str


class ShowResponse(BaseModel):
    id: str
    venue: str
    type: str
    location: Optional[LocationResponse] = None
    time: datetime
    status: str

    @classmethod
    def from_entity(cls, show: Show) -> 'ShowResponse':
        location = (
            LocationResponse(
                country=show.location.country,
                city=show.location.city,
                formatted_address=show.location.formatted_address,
                latitude=show.location.latitude,
                longitude=show.location.longitude,
            )
            if show.location is not None
            else None
        )
        return cls(
            id=show.id,
            venue=show.venue,
            type=show.type,
            location=location,
            time=show.time,
            status=show.status,
        )


class CreateEventResponse(BaseModel):
    id: str
    name: str
    description: str
    status: str
    promotors: List[PromotorResponse]
    artists: List[str]
    shows: List[ShowResponse]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, event: Event) -> 'CreateEventResponse':
        return cls(
            id=event.id,
            name=event.name,
            description=event.description,
            status=event.status,
            promotors=[
                PromotorResponse(name=p.name, email=p.email, phone=p.phone)
                for p in event.promotors
            ],
            artists=[artist.name for artist in event.artists],
            shows=[ShowResponse.from_entity(show) for show in event.shows],
            created_at=event.created_at,
            updated_at=event.updated_at,
        )
