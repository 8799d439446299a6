from datetime import datetime, timedelta, timezone
from typing import Self
from zoneinfo import ZoneInfo

import anyio
import attrs
from dependency_injector.wiring import Provide, inject
from fastapi import Depends
import orjson
from opentelemetry import trace
from sqlalchemy.exc import SQLAlchemyError

from src.platform.concurrency.deadline import workflow_deadline
from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.platform.exception.exceptions import BadRequestError, ForbiddenError, InternalError
from src.platform.logging.loguru_io import Logger
from src.service.order.app.dto.payment_dto import ChargeRequest
from src.service.order.app.dto.task_dto import ScheduledHttpRequest, ScheduledTask
from src.service.order.app.interface.i_payment_gateway import IPaymentGateway
from src.service.order.app.interface.i_task_scheduler import ITaskScheduler
from src.service.order.domain.entity.account_entity import Account
from src.service.order.domain.entity.order_entity import Order
from src.service.order.domain.entity.order_rule_entity import check_sales_rules
from src.service.order.domain.value_object.order_pricing import OrderPricing


EXPIRE_ORDER_PATH = '/v1/customerapp/orders/on-expire'


class PlaceOrderUseCase:
    """
    Place a ticket order and charge it through the payment gateway.

    Flow (one transaction, bounded by the workflow deadline):
    1. Sales rules: event sale window, then allowed weekday
    2. Entitlement: one acquired ticket per customer per event
    3. Load event and show, check they belong together
    4. Lock the ticket stock row (SELECT ... FOR UPDATE) and reserve capacity
    5. Price the order and charge the gateway (virtual account)
    6. Save order + item + stock increment, commit

    After commit, an expire-order callback is scheduled with whatever is left
    of the same deadline. A scheduling failure or overrun is only logged
    because the order is already durable.

    The stock row lock is held across the gateway round trip, so concurrent
    buyers of the same stock serialize on it.
    """

    def __init__(
        self,
        *,
        uow: AbstractUnitOfWork,
        payment_gateway: IPaymentGateway,
        task_scheduler: ITaskScheduler,
    ) -> None:
        self.uow = uow
        self.payment_gateway = payment_gateway
        self.task_scheduler = task_scheduler
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(get_unit_of_work),
        payment_gateway: IPaymentGateway = Depends(Provide[Container.payment_gateway]),
        task_scheduler: ITaskScheduler = Depends(Provide[Container.task_scheduler]),
    ) -> Self:
        return cls(uow=uow, payment_gateway=payment_gateway, task_scheduler=task_scheduler)

    @Logger.io
    async def execute(
        self,
        *,
        account: Account,
        payment_method: str,
        event_id: str,
        show_id: str,
        ticket_stock_id: str,
        quantity: int,
    ) -> Order:
        with self.tracer.start_as_current_span(
            'use_case.place_order',
            attributes={
                'customer.id': account.id,
                'event.id': event_id,
                'ticket_stock.id': ticket_stock_id,
            },
        ):
            deadline = anyio.current_time() + settings.APPLICATION_TIMEOUT_SECONDS
            with workflow_deadline():
                order = await self._place(
                    account=account,
                    payment_method=payment_method,
                    event_id=event_id,
                    show_id=show_id,
                    ticket_stock_id=ticket_stock_id,
                    quantity=quantity,
                )

            Logger.base.info(
                f'🎫 [PLACE_ORDER] Order {order.id} placed for customer {account.id} '
                f'(transaction={order.transaction_id})'
            )

            with anyio.CancelScope(deadline=deadline) as scope:
                await self._schedule_expiry(order=order)
            if scope.cancelled_caught:
                Logger.base.error(
                    f'⏰ [PLACE_ORDER] Expiry scheduling for order {order.id} ran past the deadline'
                )
            return order

    async def _place(
        self,
        *,
        account: Account,
        payment_method: str,
        event_id: str,
        show_id: str,
        ticket_stock_id: str,
        quantity: int,
    ) -> Order:
        now = datetime.now(timezone.utc)

        async with self.uow:
            range_date = await self.uow.order_rule_query_repo.find_range_date_by_event_id(
                event_id=event_id
            )
            days = await self.uow.order_rule_query_repo.find_days_by_event_id(event_id=event_id)
            check_sales_rules(
                now,
                range_date=range_date,
                days=days,
                tz=ZoneInfo(settings.APPLICATION_TIMEZONE),
            )

            acquired = await self.uow.acquired_ticket_query_repo.count(
                event_id=event_id, customer_id=account.id
            )
            if acquired >= 1:
                raise ForbiddenError('you are already acquired a ticket for this event')

            event = await self.uow.event_query_repo.find_event_by_id(event_id=event_id)
            show = await self.uow.event_query_repo.find_show_by_id(show_id=show_id)
            if not show.belongs_to_event(event.id):
                raise BadRequestError('invalid show id')

            stock = await self.uow.ticket_stock_command_repo.find_by_id_for_update(
                ticket_stock_id=ticket_stock_id
            )
            if not stock.belongs_to_show(show.id):
                raise BadRequestError('invalid ticket stock id')
            reserved_stock = stock.reserve(quantity=quantity, now=now)

            pricing = OrderPricing.calculate(
                price=stock.price,
                quantity=quantity,
                service_charge_percentage=settings.SERVICE_CHARGE_PERCENTAGE,
                tax_percentage=settings.TAX_PERCENTAGE,
            )
            order = Order.place(
                payment_method=payment_method,
                customer_id=account.id,
                customer_name=account.name,
                customer_email=account.email,
                pricing=pricing,
                now=now,
            )
            order.add_item(
                ticket_stock_id=stock.id,
                show_id=show.id,
                event_id=event.id,
                event_name=event.name,
                show_venue=show.venue,
                tier=stock.tier,
                price=stock.price,
                quantity=quantity,
            )

            charge = await self.payment_gateway.charge(
                request=ChargeRequest(
                    bank=payment_method,
                    order_id=order.id,
                    gross_amount=pricing.gross_amount,
                )
            )
            order = order.attach_payment(
                transaction_id=charge.transaction_id,
                virtual_account=charge.virtual_account,
            )

            order = await self.uow.order_command_repo.create(order=order)
            await self.uow.ticket_stock_command_repo.update(ticket_stock=reserved_stock)

            try:
                await self.uow.commit()
            except SQLAlchemyError as e:
                raise InternalError('failed to save order') from e

        return order

    async def _schedule_expiry(self, *, order: Order) -> None:
        task = ScheduledTask(
            queue=settings.ORDER_EXPIRE_QUEUE,
            request=ScheduledHttpRequest(
                url=f'{settings.APPLICATION_BASE_URL}{EXPIRE_ORDER_PATH}',
                body=orjson.dumps(attrs.asdict(order)),
            ),
            schedule_at=order.created_at + timedelta(seconds=settings.ORDER_EXPIRE_DURATION_SECONDS),
        )
        try:
            await self.task_scheduler.schedule(task=task)
        except Exception as e:
            Logger.base.error(
                f'⏰ [PLACE_ORDER] Failed to schedule expiry for order {order.id}: {e}'
            )
