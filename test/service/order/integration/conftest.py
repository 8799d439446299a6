"""
Integration fixtures: seed one on-sale event against the real test database.

The event sells every day inside a window around now, has one show and one
ticket stock. Ids are shared with the unit helpers so entity builders line up.
"""

from datetime import datetime, timedelta, timezone
from typing import Callable

import pytest
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from src.platform.database.orm_db_setting import get_session_maker
from src.service.order.driven_adapter.model import (
    EventModel,
    LocationModel,
    OrderItemModel,
    OrderModel,
    OrderRuleDayModel,
    OrderRuleRangeDateModel,
    ShowModel,
    TicketStockModel,
)
from test.service.order.unit.helpers import EVENT_ID, SHOW_ID, TICKET_STOCK_ID


@pytest.fixture
async def session_maker() -> async_sessionmaker[AsyncSession]:
    # Built inside the test loop so the engine is bound to it
    return get_session_maker()


@pytest.fixture
def seed_sale(session_maker) -> Callable:
    async def _seed(*, allocation: int = 100, acquired: int = 0, price: float = 100000) -> None:
        now = datetime.now(timezone.utc)
        async with session_maker() as session:
            session.add_all(
                [
                    EventModel(
                        id=EVENT_ID,
                        name='Coldplay: Music of the Spheres',
                        description='World tour, Jakarta',
                        status='ACTIVE',
                    ),
                    ShowModel(
                        id=SHOW_ID,
                        event_id=EVENT_ID,
                        venue='Gelora Bung Karno',
                        type='LIVE',
                        time=now + timedelta(days=30),
                        status='ACTIVE',
                    ),
                    LocationModel(
                        show_id=SHOW_ID,
                        event_id=EVENT_ID,
                        country='Indonesia',
                        city='Jakarta',
                        formatted_address='Jl. Pintu Satu Senayan',
                        latitude=-6.2186,
                        longitude=106.8019,
                    ),
                    TicketStockModel(
                        id=TICKET_STOCK_ID,
                        event_id=EVENT_ID,
                        show_id=SHOW_ID,
                        tier='GOLD',
                        allocation=allocation,
                        acquired=acquired,
                        price=price,
                    ),
                    OrderRuleRangeDateModel(
                        event_id=EVENT_ID,
                        start_date=now - timedelta(days=1),
                        end_date=now + timedelta(days=1),
                    ),
                    *[OrderRuleDayModel(event_id=EVENT_ID, day=day) for day in range(1, 8)],
                ]
            )
            await session.commit()

    return _seed


@pytest.fixture
def read_stock_acquired(session_maker) -> Callable:
    async def _read() -> int:
        async with session_maker() as session:
            result = await session.execute(
                select(TicketStockModel.acquired).where(TicketStockModel.id == TICKET_STOCK_ID)
            )
            return result.scalar_one()

    return _read


@pytest.fixture
def count_rows(session_maker) -> Callable:
    async def _count() -> tuple[int, int]:
        """(orders, order items) currently stored."""
        async with session_maker() as session:
            orders = (await session.execute(select(OrderModel.id))).scalars().all()
            items = (await session.execute(select(OrderItemModel.id))).scalars().all()
            return len(orders), len(items)

    return _count
