from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from src.service.order.domain.entity.order_entity import Item, Order


class PlaceOrderRequest(BaseModel):
    payment_method: Literal['bca', 'bri', 'bni']
    event_id: str = Field(..., min_length=1)
    show_id: str = Field(..., min_length=1)
    ticket_stock_id: str = Field(..., min_length=1)
    quantity: int

    @field_validator('quantity')
    @classmethod
    def only_one_ticket_per_order(cls, v: int) -> int:
        if v != 1:
            raise ValueError('quantity must be 1')
        return v

    model_config = {
        'json_schema_extra': {
            'example': {
                'payment_method': 'bca',
                'event_id': 'EVENT0192F3A1B2C37D4E8F90A1B2C3D4E5F6',
                'show_id': 'SHOW0192F3A1B2C37D4E8F90A1B2C3D4E5F7',
                'ticket_stock_id': 'TSTK0192F3A1B2C37D4E8F90A1B2C3D4E5F8',
                'quantity': 1,
            }
        }
    }


class ItemResponse(BaseModel):
    order_id: str
    ticket_stock_id: str
    show_id: str
    event_id: str
    event_name: str
    show_venue: str
    tier: str
    price: float
    quantity: int

    @classmethod
    def from_entity(cls, item: Item) -> 'ItemResponse':
        return cls(
            order_id=item.order_id,
            ticket_stock_id=item.ticket_stock_id,
            show_id=item.show_id,
            event_id=item.event_id,
            event_name=item.event_name,
            show_venue=item.show_venue,
            tier=item.tier,
            price=item.price,
            quantity=item.quantity,
        )


class OrderResponse(BaseModel):
    id: str
    payment_method: str
    transaction_id: Optional[str] = None
    virtual_account: Optional[str] = None
    status: str
    customer_id: int
    customer_name: str
    customer_email: str
    tax_percentage: float
    service_charge_percentage: float
    discount_percentage: float
    service_charge: float
    tax: float
    discount: float
    items: List[ItemResponse]
    subtotal: float
    total_amount: float
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, order: Order) -> 'OrderResponse':
        return cls(
            id=order.id,
            payment_method=order.payment_method,
            transaction_id=order.transaction_id,
            virtual_account=order.virtual_account,
            status=order.status.value,
            customer_id=order.customer_id,
            customer_name=order.customer_name,
            customer_email=order.customer_email,
            tax_percentage=order.tax_percentage,
            service_charge_percentage=order.service_charge_percentage,
            discount_percentage=order.discount_percentage,
            service_charge=order.service_charge,
            tax=order.tax,
            discount=order.discount,
            items=[ItemResponse.from_entity(item) for item in order.items],
            subtotal=order.subtotal,
            total_amount=order.total_amount,
            created_at=order.created_at,
            updated_at=order.updated_at,
        )


class PaymentNotificationRequest(BaseModel):
    """Gateway webhook body; fields other than these are ignored."""

    transaction_id: str
    transaction_status: str
    order_id: str

    model_config = {
        'json_schema_extra': {
            'example': {
                'transaction_id': '9aed5972-5b6a-401e-894b-a32c91ed1a3a',
                'transaction_status': 'settlement',
                'order_id': 'TO0192F3A1B2C37D4E8F90A1B2C3D4E5F9',
            }
        }
    }


class ExpireOrderRequest(BaseModel):
    """Expiry task body: the order as it was serialized at placement."""

    id: str = Field(..., min_length=1)
    transaction_id: Optional[str] = None


class ExpireOrderResponse(BaseModel):
    id: str
    transaction_id: Optional[str] = None
