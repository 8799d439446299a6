from datetime import datetime, timezone
from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.concurrency.deadline import workflow_deadline
from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.platform.logging.loguru_io import Logger
from src.service.order.app.dto.payment_dto import SETTLEMENT_TRANSACTION_STATUS
from src.service.order.app.interface.i_order_event_publisher import IOrderEventPublisher
from src.service.order.domain.domain_event.order_domain_event import OrderPaidDomainEvent
from src.service.order.domain.entity.order_entity import Order


class OnPaymentNotificationUseCase:
    """
    Payment gateway webhook.

    Only `settlement` notifications move an order, and only out of
    WAITING_FOR_PAYMENT; duplicate or late webhooks are no-ops. The paid
    event is published after commit; a publish failure is only logged.
    """

    def __init__(
        self,
        *,
        uow: AbstractUnitOfWork,
        event_publisher: IOrderEventPublisher,
    ) -> None:
        self.uow = uow
        self.event_publisher = event_publisher
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(get_unit_of_work),
        event_publisher: IOrderEventPublisher = Depends(
            Provide[Container.order_event_publisher]
        ),
    ) -> Self:
        return cls(uow=uow, event_publisher=event_publisher)

    @Logger.io
    async def execute(
        self, *, transaction_id: str, transaction_status: str, order_id: str
    ) -> Optional[Order]:
        """Returns the paid order, or None when nothing changed."""
        if transaction_status != SETTLEMENT_TRANSACTION_STATUS:
            Logger.base.info(
                f'💳 [PAYMENT_NOTIFICATION] Ignoring {transaction_status} for order {order_id}'
            )
            return None

        with self.tracer.start_as_current_span(
            'use_case.on_payment_notification',
            attributes={'order.id': order_id, 'transaction.id': transaction_id},
        ):
            with workflow_deadline():
                async with self.uow:
                    order = await self.uow.order_command_repo.find_by_id_for_update(
                        order_id=order_id
                    )
                    if not order.is_waiting_for_payment():
                        Logger.base.info(
                            f'💳 [PAYMENT_NOTIFICATION] Order {order_id} already {order.status}'
                        )
                        return None

                    order = order.mark_as_paid(now=datetime.now(timezone.utc))
                    await self.uow.order_command_repo.update(order=order)
                    await self.uow.commit()

            Logger.base.info(f'💳 [PAYMENT_NOTIFICATION] Order {order_id} is PAID')

            try:
                await self.event_publisher.publish_order_paid(
                    event=OrderPaidDomainEvent.from_order(order=order)
                )
            except Exception as e:
                Logger.base.error(
                    f'📤 [PAYMENT_NOTIFICATION] Failed to publish order-paid for {order_id}: {e}'
                )

            return order
