from datetime import datetime, timezone
from typing import Self

from fastapi import Depends
from opentelemetry import trace

from src.platform.concurrency.deadline import workflow_deadline
from src.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.platform.exception.exceptions import ForbiddenError
from src.platform.logging.loguru_io import Logger
from src.service.order.app.dto.event_dto import CreateEventInput, ShowInput
from src.service.order.domain.entity.account_entity import Account
from src.service.order.domain.entity.event_entity import (
    ONLINE_VENUE,
    Artist,
    Event,
    Promotor,
    Show,
    ShowType,
)
from src.service.order.domain.entity.order_rule_entity import OrderRuleDay, OrderRuleRangeDate
from src.service.order.domain.entity.ticket_stock_entity import TicketStock, TicketTier
from src.service.order.domain.value_object.order_pricing import round_half_up


class CreateEventUseCase:
    """
    Create an event with its shows, ticket stock and sales rules in one transaction.

    Each live show gets one stock per tier, sized as a percentage of the
    show's total allocation. A show flagged `online` also gets a companion
    ONLINE show whose single ONLINE stock points back to the live show;
    the online allocation is split evenly across all shows of the request.
    """

    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)) -> Self:
        return cls(uow=uow)

    @staticmethod
    def _build_shows(
        *, event_id: str, request: CreateEventInput, now: datetime
    ) -> list[Show]:
        shows: list[Show] = []
        online_percentage = 100 / len(request.shows) if request.shows else 0

        for show_input in request.shows:
            live_show = Show.create(
                event_id=event_id,
                venue=show_input.venue,
                type=show_input.type,
                time=show_input.time,
                location=show_input.location,
            )
            live_show.ticket_stocks = [
                TicketStock.create(
                    event_id=event_id,
                    show_id=live_show.id,
                    tier=allocation.tier,
                    allocation=round_half_up(
                        allocation.allocation_by_percentage
                        / 100
                        * show_input.total_ticket_allocation
                    ),
                    price=allocation.price,
                    now=now,
                )
                for allocation in show_input.ticket_allocation
            ]
            shows.append(live_show)

            if show_input.online:
                shows.append(
                    CreateEventUseCase._build_online_show(
                        event_id=event_id,
                        live_show=live_show,
                        show_input=show_input,
                        allocation=round_half_up(
                            online_percentage / 100 * request.total_online_ticket_allocation
                        ),
                        price=request.online_ticket_price,
                        now=now,
                    )
                )

        return shows

    @staticmethod
    def _build_online_show(
        *,
        event_id: str,
        live_show: Show,
        show_input: ShowInput,
        allocation: int,
        price: float,
        now: datetime,
    ) -> Show:
        online_show = Show.create(
            event_id=event_id,
            venue=ONLINE_VENUE,
            type=ShowType.ONLINE,
            time=show_input.time,
            location=show_input.location,
        )
        online_show.ticket_stocks = [
            TicketStock.create(
                event_id=event_id,
                show_id=online_show.id,
                online_for=live_show.id,
                tier=TicketTier.ONLINE,
                allocation=allocation,
                price=price,
                now=now,
            )
        ]
        return online_show

    @Logger.io
    async def execute(self, *, account: Account, request: CreateEventInput) -> Event:
        if not account.is_admin():
            raise ForbiddenError('only admin can create event')

        with self.tracer.start_as_current_span(
            'use_case.create_event', attributes={'event.name': request.name}
        ):
            now = datetime.now(timezone.utc)
            event = Event.create(name=request.name, description=request.description, now=now)
            event.promotors = [
                Promotor(event_id=event.id, name=p.name, email=p.email, phone=p.phone)
                for p in request.promotors
            ]
            event.artists = [Artist(event_id=event.id, name=name) for name in request.artists]
            event.shows = self._build_shows(event_id=event.id, request=request, now=now)
            event.order_rule_range_date = OrderRuleRangeDate(
                event_id=event.id,
                start_date=request.order_rule_start_date,
                end_date=request.order_rule_end_date,
            )
            event.order_rule_days = [
                OrderRuleDay(event_id=event.id, day=day) for day in request.order_rule_days
            ]

            with workflow_deadline():
                async with self.uow:
                    await self.uow.event_command_repo.create(event=event)
                    await self.uow.commit()

            Logger.base.info(
                f'🎪 [CREATE_EVENT] Event {event.id} created with {len(event.shows)} shows '
                f'and {len(event.ticket_stocks)} ticket stocks'
            )
            return event
