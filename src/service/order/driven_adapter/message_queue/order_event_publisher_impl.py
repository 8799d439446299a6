"""
Order Event Publisher Implementation

Concrete adapter that implements IOrderEventPublisher using confluent-kafka.
Settled orders go to the order-paid topic keyed by transaction id, so all
messages for one payment stay on one partition.
"""

import orjson

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger
from src.platform.message_queue.event_publisher import publish
from src.service.order.app.interface.i_order_event_publisher import IOrderEventPublisher
from src.service.order.domain.domain_event.order_domain_event import OrderPaidDomainEvent


class OrderEventPublisherImpl(IOrderEventPublisher):
    def __init__(self, *, topic: str | None = None) -> None:
        self.topic = topic or settings.ORDER_PAID_TOPIC

    @Logger.io
    async def publish_order_paid(self, *, event: OrderPaidDomainEvent) -> None:
        await publish(
            topic=self.topic,
            key=event.transaction_id,
            value=orjson.dumps(event.to_payload()),
            headers={'message_type': event.__class__.__name__},
        )
