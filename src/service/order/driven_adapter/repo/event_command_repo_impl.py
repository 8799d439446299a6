from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.order.app.interface.i_event_command_repo import IEventCommandRepo
from src.service.order.domain.entity.event_entity import Event
from src.service.order.driven_adapter.model.event_model import (
    ArtistModel,
    EventModel,
    LocationModel,
    PromotorModel,
    ShowModel,
)
from src.service.order.driven_adapter.model.order_rule_model import (
    OrderRuleDayModel,
    OrderRuleRangeDateModel,
)
from src.service.order.driven_adapter.model.ticket_stock_model import TicketStockModel


class EventCommandRepoImpl(IEventCommandRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @Logger.io
    async def create(self, *, event: Event) -> Event:
        self.session.add(
            EventModel(
                id=event.id,
                name=event.name,
                description=event.description,
                status=event.status,
                created_at=event.created_at,
                updated_at=event.updated_at,
            )
        )
        self.session.add_all(
            PromotorModel(event_id=event.id, name=p.name, email=p.email, phone=p.phone)
            for p in event.promotors
        )
        self.session.add_all(ArtistModel(event_id=event.id, name=a.name) for a in event.artists)

        for show in event.shows:
            self.session.add(
                ShowModel(
                    id=show.id,
                    event_id=event.id,
                    venue=show.venue,
                    type=show.type,
                    time=show.time,
                    status=show.status,
                )
            )
            if show.location is not None:
                self.session.add(
                    LocationModel(
                        show_id=show.id,
                        event_id=event.id,
                        country=show.location.country,
                        city=show.location.city,
                        formatted_address=show.location.formatted_address,
                        latitude=show.location.latitude,
                        longitude=show.location.longitude,
                    )
                )

        self.session.add_all(
            TicketStockModel(
                id=stock.id,
                event_id=stock.event_id,
                show_id=stock.show_id,
                online_for=stock.online_for,
                tier=stock.tier,
                allocation=stock.allocation,
                acquired=stock.acquired,
                price=stock.price,
                last_stock_update=stock.last_stock_update,
            )
            for stock in event.ticket_stocks
        )

        if event.order_rule_range_date is not None:
            self.session.add(
                OrderRuleRangeDateModel(
                    event_id=event.id,
                    start_date=event.order_rule_range_date.start_date,
                    end_date=event.order_rule_range_date.end_date,
                )
            )
        self.session.add_all(
            OrderRuleDayModel(event_id=event.id, day=rule.day) for rule in event.order_rule_days
        )

        await self.session.flush()
        return event
