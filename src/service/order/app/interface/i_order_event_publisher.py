"""
Order Event Publisher Interface

Use cases depend on this port; the Kafka adapter handles topics,
keys and serialization.
"""

from abc import ABC, abstractmethod

from src.service.order.domain.domain_event.order_domain_event import OrderPaidDomainEvent


class IOrderEventPublisher(ABC):
    @abstractmethod
    async def publish_order_paid(self, *, event: OrderPaidDomainEvent) -> None:
        """
        Publish the settled order keyed by its transaction id.

        Ordering is only guaranteed per key.
        """
        pass
