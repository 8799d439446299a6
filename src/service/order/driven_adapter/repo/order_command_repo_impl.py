"""
Order Command Repository Implementation

Works on the session injected by the unit of work; flushes but never commits.
"""

from typing import List

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.order.app.interface.i_order_command_repo import IOrderCommandRepo
from src.service.order.domain.entity.order_entity import Item, Order, OrderStatus
from src.service.order.driven_adapter.model.order_model import OrderItemModel, OrderModel


def order_model_to_entity(db_order: OrderModel, items: List[Item] | None = None) -> Order:
    return Order(
        id=db_order.id,
        payment_method=db_order.payment_method,
        transaction_id=db_order.transaction_id,
        virtual_account=db_order.virtual_account,
        status=OrderStatus(db_order.status),
        customer_id=db_order.customer_id,
        customer_name=db_order.customer_name,
        customer_email=db_order.customer_email,
        tax_percentage=db_order.tax_percentage,
        service_charge_percentage=db_order.service_charge_percentage,
        discount_percentage=db_order.discount_percentage,
        service_charge=db_order.service_charge,
        tax=db_order.tax,
        discount=db_order.discount,
        subtotal=db_order.subtotal,
        total_amount=db_order.total_amount,
        created_at=db_order.created_at,
        updated_at=db_order.updated_at,
        items=items or [],
    )


def item_model_to_entity(db_item: OrderItemModel) -> Item:
    return Item(
        id=db_item.id,
        order_id=db_item.order_id,
        ticket_stock_id=db_item.ticket_stock_id,
        show_id=db_item.show_id,
        event_id=db_item.event_id,
        event_name=db_item.event_name,
        show_venue=db_item.show_venue,
        tier=db_item.tier,
        price=db_item.price,
        quantity=db_item.quantity,
    )


class OrderCommandRepoImpl(IOrderCommandRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @Logger.io
    async def create(self, *, order: Order) -> Order:
        self.session.add(
            OrderModel(
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
                subtotal=order.subtotal,
                total_amount=order.total_amount,
                created_at=order.created_at,
                updated_at=order.updated_at,
            )
        )
        # Parent row first so item foreign keys resolve
        await self.session.flush()

        db_items = [
            OrderItemModel(
                order_id=order.id,
                ticket_stock_id=item.ticket_stock_id,
                show_id=item.show_id,
                event_id=item.event_id,
                event_name=item.event_name,
                show_venue=item.show_venue,
                tier=item.tier,
                price=item.price,
                quantity=item.quantity,
            )
            for item in order.items
        ]
        self.session.add_all(db_items)
        await self.session.flush()

        order.items = [item_model_to_entity(db_item) for db_item in db_items]
        return order

    @Logger.io
    async def update(self, *, order: Order) -> Order:
        result = await self.session.execute(
            update(OrderModel)
            .where(OrderModel.id == order.id)
            .values(
                status=order.status.value,
                transaction_id=order.transaction_id,
                virtual_account=order.virtual_account,
                updated_at=order.updated_at,
            )
            .returning(OrderModel.id)
        )
        if result.scalar_one_or_none() is None:
            raise NotFoundError(f"order's properties with id '{order.id}' is not found")
        return order

    @Logger.io
    async def find_by_id_for_update(self, *, order_id: str) -> Order:
        result = await self.session.execute(
            select(OrderModel).where(OrderModel.id == order_id).with_for_update()
        )
        db_order = result.scalar_one_or_none()
        if db_order is None:
            raise NotFoundError(f"order's properties with id '{order_id}' is not found")

        items_result = await self.session.execute(
            select(OrderItemModel)
            .where(OrderItemModel.order_id == order_id)
            .order_by(OrderItemModel.id)
        )
        items = [item_model_to_entity(db_item) for db_item in items_result.scalars().all()]
        return order_model_to_entity(db_order, items)
