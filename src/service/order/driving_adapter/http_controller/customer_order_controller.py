from typing import List

from fastapi import APIRouter, Depends, Query, status
from opentelemetry import trace

from src.platform.http.response_envelope import PaginationMeta, ResponseEnvelope
from src.platform.logging.loguru_io import Logger
from src.service.order.app.command.on_expire_order_use_case import OnExpireOrderUseCase
from src.service.order.app.command.on_payment_notification_use_case import (
    OnPaymentNotificationUseCase,
)
from src.service.order.app.command.place_order_use_case import PlaceOrderUseCase
from src.service.order.app.query.get_many_order_use_case import GetManyOrderUseCase
from src.service.order.domain.entity.account_entity import Account
from src.service.order.driving_adapter.http_controller.auth.role_auth import get_current_account
from src.service.order.driving_adapter.http_controller.schema.order_schema import (
    ExpireOrderRequest,
    ExpireOrderResponse,
    OrderResponse,
    PaymentNotificationRequest,
    PlaceOrderRequest,
)


router = APIRouter()
tracer = trace.get_tracer(__name__)


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def place_order(
    request: PlaceOrderRequest,
    current_account: Account = Depends(get_current_account),
    use_case: PlaceOrderUseCase = Depends(PlaceOrderUseCase.depends),
) -> ResponseEnvelope[OrderResponse]:
    with tracer.start_as_current_span('controller.place_order') as span:
        span.set_attribute('customer.id', current_account.id)
        span.set_attribute('event.id', request.event_id)

        order = await use_case.execute(
            account=current_account,
            payment_method=request.payment_method,
            event_id=request.event_id,
            show_id=request.show_id,
            ticket_stock_id=request.ticket_stock_id,
            quantity=request.quantity,
        )

        span.set_attribute('order.id', order.id)
        return ResponseEnvelope[OrderResponse](
            status='CREATED',
            message='order has been successfully placed',
            data=OrderResponse.from_entity(order),
        )


# 201 on a read is the established contract of this endpoint
@router.get('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def get_many_order(
    page: int = Query(1),
    size: int = Query(10),
    current_account: Account = Depends(get_current_account),
    use_case: GetManyOrderUseCase = Depends(GetManyOrderUseCase.depends),
) -> ResponseEnvelope[List[OrderResponse]]:
    orders, total = await use_case.execute(account=current_account, page=page, size=size)
    return ResponseEnvelope[List[OrderResponse]](
        status='CREATED',
        message='list of orders',
        data=[OrderResponse.from_entity(order) for order in orders],
        meta=PaginationMeta(page=page, size=size, total=total),
    )


@router.post('/on-expire', status_code=status.HTTP_200_OK)
@Logger.io
async def on_expire_order(
    request: ExpireOrderRequest,
    use_case: OnExpireOrderUseCase = Depends(OnExpireOrderUseCase.depends),
) -> ResponseEnvelope[ExpireOrderResponse]:
    order = await use_case.execute(order_id=request.id)
    return ResponseEnvelope[ExpireOrderResponse](
        status='OK',
        message='order has been successfully expired',
        data=ExpireOrderResponse(id=order.id, transaction_id=order.transaction_id),
    )


@router.post('/on-payment-notification', status_code=status.HTTP_200_OK)
@Logger.io
async def on_payment_notification(
    request: PaymentNotificationRequest,
    use_case: OnPaymentNotificationUseCase = Depends(OnPaymentNotificationUseCase.depends),
) -> ResponseEnvelope[None]:
    await use_case.execute(
        transaction_id=request.transaction_id,
        transaction_status=request.transaction_status,
        order_id=request.order_id,
    )
    return ResponseEnvelope[None](
        status='OK',
        message='order has been update by payment notification',
    )
