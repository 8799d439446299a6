"""
Order Domain Events

Published after the order state change is committed so downstream fulfillment
(e.g. ticket issuing) can react.
"""

from typing import Any

import attrs

from src.service.order.domain.entity.order_entity import Order


@attrs.define
class OrderPaidDomainEvent:
    """Fired once an order settles; carries the full order snapshot."""

    transaction_id: str
    order: Order

    @classmethod
    def from_order(cls, *, order: Order) -> 'OrderPaidDomainEvent':
        return cls(transaction_id=order.transaction_id or '', order=order)

    def to_payload(self) -> dict[str, Any]:
        return attrs.asdict(self.order)
