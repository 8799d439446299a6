from unittest.mock import AsyncMock

import pytest

from src.platform.exception.exceptions import NotFoundError
from src.service.order.app.command.on_payment_notification_use_case import (
    OnPaymentNotificationUseCase,
)
from src.service.order.domain.domain_event.order_domain_event import OrderPaidDomainEvent
from src.service.order.domain.entity.order_entity import OrderStatus
from test.service.order.unit.helpers import ORDER_ID, TRANSACTION_ID, FakeUnitOfWork, make_order


pytestmark = pytest.mark.unit


class TestOnPaymentNotification:
    @pytest.fixture
    def uow(self) -> FakeUnitOfWork:
        uow = FakeUnitOfWork()
        uow.order_command_repo.find_by_id_for_update = AsyncMock(return_value=make_order())
        uow.order_command_repo.update = AsyncMock(side_effect=lambda *, order: order)
        return uow

    @pytest.fixture
    def event_publisher(self) -> AsyncMock:
        return AsyncMock()

    @pytest.fixture
    def use_case(self, uow, event_publisher) -> OnPaymentNotificationUseCase:
        return OnPaymentNotificationUseCase(uow=uow, event_publisher=event_publisher)

    @pytest.mark.asyncio
    async def test_settlement_marks_order_paid_and_publishes(self, use_case, uow, event_publisher):
        # Act
        order = await use_case.execute(
            transaction_id=TRANSACTION_ID, transaction_status='settlement', order_id=ORDER_ID
        )

        # Assert
        assert order is not None
        assert order.status == OrderStatus.PAID
        updated = uow.order_command_repo.update.await_args.kwargs['order']
        assert updated.status == OrderStatus.PAID
        assert uow.committed is True

        event = event_publisher.publish_order_paid.await_args.kwargs['event']
        assert isinstance(event, OrderPaidDomainEvent)
        assert event.transaction_id == TRANSACTION_ID
        assert event.to_payload()['id'] == ORDER_ID

    @pytest.mark.asyncio
    @pytest.mark.parametrize('transaction_status', ['pending', 'expire', 'deny', 'cancel'])
    async def test_non_settlement_is_ignored(
        self, use_case, uow, event_publisher, transaction_status
    ):
        result = await use_case.execute(
            transaction_id=TRANSACTION_ID,
            transaction_status=transaction_status,
            order_id=ORDER_ID,
        )

        assert result is None
        uow.order_command_repo.find_by_id_for_update.assert_not_awaited()
        event_publisher.publish_order_paid.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize('status', [OrderStatus.PAID, OrderStatus.EXPIRED])
    async def test_duplicate_or_late_notification_is_noop(
        self, use_case, uow, event_publisher, status
    ):
        # Arrange
        uow.order_command_repo.find_by_id_for_update = AsyncMock(
            return_value=make_order(status=status)
        )

        # Act
        result = await use_case.execute(
            transaction_id=TRANSACTION_ID, transaction_status='settlement', order_id=ORDER_ID
        )

        # Assert
        assert result is None
        uow.order_command_repo.update.assert_not_awaited()
        assert uow.committed is False
        event_publisher.publish_order_paid.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_order_is_not_found(self, use_case, uow):
        uow.order_command_repo.find_by_id_for_update = AsyncMock(
            side_effect=NotFoundError(f"order's properties with id '{ORDER_ID}' is not found")
        )

        with pytest.raises(NotFoundError, match="order's properties with id"):
            await use_case.execute(
                transaction_id=TRANSACTION_ID, transaction_status='settlement', order_id=ORDER_ID
            )

    @pytest.mark.asyncio
    async def test_publish_failure_keeps_order_paid(self, use_case, uow, event_publisher):
        # Arrange
        event_publisher.publish_order_paid = AsyncMock(side_effect=RuntimeError('broker down'))

        # Act
        order = await use_case.execute(
            transaction_id=TRANSACTION_ID, transaction_status='settlement', order_id=ORDER_ID
        )

        # Assert
        assert order is not None
        assert order.status == OrderStatus.PAID
        assert uow.committed is True
