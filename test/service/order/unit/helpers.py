from datetime import datetime, timedelta, timezone
from typing import Optional
from unittest.mock import AsyncMock, Mock

from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.service.order.app.dto.payment_dto import ChargeResponse, VaNumber
from src.service.order.domain.entity.account_entity import Account, AccountRole
from src.service.order.domain.entity.event_entity import Event, Location, Show
from src.service.order.domain.entity.order_entity import Order, OrderStatus
from src.service.order.domain.entity.order_rule_entity import OrderRuleDay, OrderRuleRangeDate
from src.service.order.domain.entity.ticket_stock_entity import TicketStock


NOW = datetime(2026, 10, 19, 3, 0, tzinfo=timezone.utc)

EVENT_ID = 'EVENT0192F3A1B2C37D4E8F90A1B2C3D4E5F6'
SHOW_ID = 'SHOW0192F3A1B2C37D4E8F90A1B2C3D4E5F7'
TICKET_STOCK_ID = 'TSTK0192F3A1B2C37D4E8F90A1B2C3D4E5F8'
ORDER_ID = 'TO0192F3A1B2C37D4E8F90A1B2C3D4E5F9'
TRANSACTION_ID = '9aed5972-5b6a-401e-894b-a32c91ed1a3a'


class FakeUnitOfWork(AbstractUnitOfWork):
    """Unit of work whose repositories are AsyncMocks; records commits."""

    def __init__(self) -> None:
        self.order_command_repo: Mock = AsyncMock()
        self.ticket_stock_command_repo: Mock = AsyncMock()
        self.acquired_ticket_query_repo: Mock = AsyncMock()
        self.order_rule_query_repo: Mock = AsyncMock()
        self.event_query_repo: Mock = AsyncMock()
        self.event_command_repo: Mock = AsyncMock()
        self.committed = False
        self.rollback_count = 0

    async def _commit(self) -> None:
        self.committed = True

    async def rollback(self) -> None:
        self.rollback_count += 1


def make_account(*, id: int = 7, role: AccountRole = AccountRole.CUSTOMER) -> Account:
    return Account(id=id, name='Budi Santoso', email='budi@example.com', role=role)


def make_event() -> Event:
    return Event(
        id=EVENT_ID,
        name='Coldplay: Music of the Spheres',
        description='World tour, Jakarta',
        status='ACTIVE',
        created_at=NOW,
        updated_at=NOW,
    )


def make_show(*, event_id: str = EVENT_ID) -> Show:
    return Show(
        id=SHOW_ID,
        event_id=event_id,
        venue='Gelora Bung Karno',
        type='LIVE',
        time=NOW + timedelta(days=30),
        location=Location(
            country='Indonesia',
            city='Jakarta',
            formatted_address='Jl. Pintu Satu Senayan',
            latitude=-6.2186,
            longitude=106.8019,
            event_id=event_id,
            show_id=SHOW_ID,
        ),
    )


def make_stock(
    *, show_id: str = SHOW_ID, allocation: int = 100, acquired: int = 0, price: float = 100000
) -> TicketStock:
    return TicketStock(
        id=TICKET_STOCK_ID,
        event_id=EVENT_ID,
        show_id=show_id,
        tier='GOLD',
        allocation=allocation,
        acquired=acquired,
        price=price,
        last_stock_update=NOW - timedelta(days=1),
    )


def make_range_date(
    *, start: Optional[datetime] = None, end: Optional[datetime] = None
) -> OrderRuleRangeDate:
    now = datetime.now(timezone.utc)
    return OrderRuleRangeDate(
        event_id=EVENT_ID,
        start_date=start or now - timedelta(days=1),
        end_date=end or now + timedelta(days=1),
    )


def every_day() -> list[OrderRuleDay]:
    return [OrderRuleDay(event_id=EVENT_ID, day=day) for day in range(1, 8)]


def make_order(*, status: OrderStatus = OrderStatus.WAITING_FOR_PAYMENT) -> Order:
    return Order(
        id=ORDER_ID,
        payment_method='bca',
        transaction_id=TRANSACTION_ID,
        virtual_account='12345678901',
        status=status,
        customer_id=7,
        customer_name='Budi Santoso',
        customer_email='budi@example.com',
        tax_percentage=10,
        service_charge_percentage=5,
        discount_percentage=0,
        service_charge=5000,
        tax=10000,
        discount=0,
        subtotal=100000,
        total_amount=115000,
        created_at=NOW,
        updated_at=NOW,
    )


def make_charge_response(*, order_id: str = ORDER_ID) -> ChargeResponse:
    return ChargeResponse(
        transaction_id=TRANSACTION_ID,
        transaction_status='pending',
        order_id=order_id,
        status_code='201',
        status_message='Success, Bank Transfer transaction is created',
        gross_amount='115000.00',
        payment_type='bank_transfer',
        va_numbers=[VaNumber(bank='bca', va_number='12345678901')],
    )
