from datetime import timedelta

import pytest

from src.platform.exception.exceptions import ForbiddenError
from src.service.order.app.command.create_event_use_case import CreateEventUseCase
from src.service.order.app.dto.event_dto import CreateEventInput, ShowInput, TicketAllocationInput
from src.service.order.domain.entity.account_entity import AccountRole
from src.service.order.domain.entity.event_entity import Location, Promotor, ShowType
from src.service.order.domain.entity.ticket_stock_entity import TicketTier
from test.service.order.unit.helpers import NOW, FakeUnitOfWork, make_account


pytestmark = pytest.mark.unit


def _location() -> Location:
    return Location(
        country='Indonesia',
        city='Jakarta',
        formatted_address='Jl. Pintu Satu Senayan',
        latitude=-6.2186,
        longitude=106.8019,
    )


def _show_input(*, online: bool, total: int = 1000, days_ahead: int = 30) -> ShowInput:
    return ShowInput(
        venue='Gelora Bung Karno',
        type=ShowType.LIVE,
        online=online,
        location=_location(),
        total_ticket_allocation=total,
        ticket_allocation=[
            TicketAllocationInput(tier=TicketTier.GOLD, allocation_by_percentage=20, price=2500000),
            TicketAllocationInput(tier=TicketTier.SILVER, allocation_by_percentage=30, price=1500000),
            TicketAllocationInput(tier=TicketTier.BRONZE, allocation_by_percentage=50, price=750000),
        ],
        time=NOW + timedelta(days=days_ahead),
    )


def _request(*shows: ShowInput, total_online: int = 1000) -> CreateEventInput:
    return CreateEventInput(
        name='Coldplay: Music of the Spheres',
        description='World tour, Jakarta',
        artists=['Coldplay'],
        promotors=[Promotor(name='PK Entertainment', email='pk@example.com', phone='0812')],
        online_ticket_price=250000,
        total_online_ticket_allocation=total_online,
        shows=list(shows),
        order_rule_days=[1, 2, 3, 4, 5, 6, 7],
        order_rule_start_date=NOW,
        order_rule_end_date=NOW + timedelta(days=14),
    )


class TestCreateEvent:
    @pytest.fixture
    def admin(self):
        return make_account(id=1, role=AccountRole.ADMIN)

    @pytest.mark.asyncio
    async def test_tier_stocks_follow_percentage_allocation(self, admin):
        # Arrange
        uow = FakeUnitOfWork()
        use_case = CreateEventUseCase(uow=uow)

        # Act
        event = await use_case.execute(account=admin, request=_request(_show_input(online=False)))

        # Assert
        assert len(event.shows) == 1
        show = event.shows[0]
        assert show.event_id == event.id
        assert show.location.show_id == show.id
        assert {s.tier: s.allocation for s in show.ticket_stocks} == {
            'GOLD': 200,
            'SILVER': 300,
            'BRONZE': 500,
        }
        assert all(s.acquired == 0 for s in show.ticket_stocks)
        assert [p.event_id for p in event.promotors] == [event.id]
        assert [a.name for a in event.artists] == ['Coldplay']
        assert [d.day for d in event.order_rule_days] == [1, 2, 3, 4, 5, 6, 7]
        assert event.order_rule_range_date.end_date == NOW + timedelta(days=14)

        uow.event_command_repo.create.assert_awaited_once_with(event=event)
        assert uow.committed is True

    @pytest.mark.asyncio
    async def test_online_show_gets_companion_stream(self, admin):
        # Arrange
        uow = FakeUnitOfWork()
        use_case = CreateEventUseCase(uow=uow)

        # Act
        event = await use_case.execute(
            account=admin,
            request=_request(_show_input(online=True), _show_input(online=False, days_ahead=31)),
        )

        # Assert
        assert len(event.shows) == 3
        live, online, _ = event.shows
        assert online.type == ShowType.ONLINE
        assert online.venue == 'ONLINE'
        assert online.time == live.time
        assert len(online.ticket_stocks) == 1
        stream_stock = online.ticket_stocks[0]
        assert stream_stock.tier == TicketTier.ONLINE
        assert stream_stock.online_for == live.id
        assert stream_stock.price == 250000
        # Online allocation is split across both shows of the request
        assert stream_stock.allocation == 500

    @pytest.mark.asyncio
    async def test_online_split_rounds_to_nearest(self, admin):
        uow = FakeUnitOfWork()
        use_case = CreateEventUseCase(uow=uow)

        event = await use_case.execute(
            account=admin,
            request=_request(
                _show_input(online=True),
                _show_input(online=True, days_ahead=31),
                _show_input(online=True, days_ahead=32),
            ),
        )

        online_stocks = [s for s in event.ticket_stocks if s.tier == TicketTier.ONLINE]
        assert [s.allocation for s in online_stocks] == [333, 333, 333]

    @pytest.mark.asyncio
    async def test_customer_can_not_create_event(self):
        # Arrange
        uow = FakeUnitOfWork()
        use_case = CreateEventUseCase(uow=uow)

        # Act & Assert
        with pytest.raises(ForbiddenError, match='only admin can create event'):
            await use_case.execute(
                account=make_account(), request=_request(_show_input(online=False))
            )
        uow.event_command_repo.create.assert_not_awaited()
