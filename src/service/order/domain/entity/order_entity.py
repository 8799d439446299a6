from datetime import datetime
from enum import StrEnum
from typing import List, Optional

import attrs

from src.platform.exception.exceptions import DomainError
from src.platform.types.prefixed_id import ORDER_ID_PREFIX, generate_prefixed_id
from src.service.order.domain.value_object.order_pricing import OrderPricing


class OrderStatus(StrEnum):
    WAITING_FOR_PAYMENT = 'WAITING_FOR_PAYMENT'
    PAID = 'PAID'
    EXPIRED = 'EXPIRED'


class PaymentMethod(StrEnum):
    BCA = 'bca'
    BRI = 'bri'
    BNI = 'bni'


@attrs.define
class Item:
    order_id: str
    ticket_stock_id: str
    show_id: str
    event_id: str
    event_name: str
    show_venue: str
    tier: str
    price: float
    quantity: int
    id: Optional[int] = None


@attrs.define
class Order:
    id: str
    payment_method: str
    status: OrderStatus
    customer_id: int
    customer_name: str
    customer_email: str
    tax_percentage: float
    service_charge_percentage: float
    discount_percentage: float
    service_charge: float
    tax: float
    discount: float
    subtotal: float
    total_amount: float
    created_at: datetime
    updated_at: datetime
    transaction_id: Optional[str] = None
    virtual_account: Optional[str] = None
    items: List[Item] = attrs.field(factory=list)

    @classmethod
    def place(
        cls,
        *,
        payment_method: str,
        customer_id: int,
        customer_name: str,
        customer_email: str,
        pricing: OrderPricing,
        now: datetime,
    ) -> 'Order':
        """New order awaiting payment; the id is minted here so every attempt gets a fresh one."""
        return cls(
            id=generate_prefixed_id(ORDER_ID_PREFIX),
            payment_method=payment_method,
            status=OrderStatus.WAITING_FOR_PAYMENT,
            customer_id=customer_id,
            customer_name=customer_name,
            customer_email=customer_email,
            tax_percentage=pricing.tax_percentage,
            service_charge_percentage=pricing.service_charge_percentage,
            discount_percentage=pricing.discount_percentage,
            service_charge=pricing.service_charge,
            tax=pricing.tax,
            discount=pricing.discount,
            subtotal=pricing.subtotal,
            total_amount=pricing.total_amount,
            created_at=now,
            updated_at=now,
        )

    def add_item(
        self,
        *,
        ticket_stock_id: str,
        show_id: str,
        event_id: str,
        event_name: str,
        show_venue: str,
        tier: str,
        price: float,
        quantity: int,
    ) -> Item:
        item = Item(
            order_id=self.id,
            ticket_stock_id=ticket_stock_id,
            show_id=show_id,
            event_id=event_id,
            event_name=event_name,
            show_venue=show_venue,
            tier=tier,
            price=price,
            quantity=quantity,
        )
        self.items.append(item)
        return item

    def attach_payment(self, *, transaction_id: str, virtual_account: Optional[str]) -> 'Order':
        return attrs.evolve(self, transaction_id=transaction_id, virtual_account=virtual_account)

    def is_waiting_for_payment(self) -> bool:
        return self.status == OrderStatus.WAITING_FOR_PAYMENT

    def is_paid(self) -> bool:
        return self.status == OrderStatus.PAID

    def mark_as_paid(self, *, now: datetime) -> 'Order':
        if not self.is_waiting_for_payment():
            raise DomainError(f'order with status {self.status} can not be paid')
        return attrs.evolve(self, status=OrderStatus.PAID, updated_at=now)

    def mark_as_expired(self, *, now: datetime) -> 'Order':
        if self.is_paid():
            raise DomainError('paid order can not be expired')
        return attrs.evolve(self, status=OrderStatus.EXPIRED, updated_at=now)
