"""
Unit tests for the Kafka publisher

The AIOProducer is replaced by a mock; produce() hands back a delivery
future the publisher must await.
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from src.platform.message_queue import event_publisher


pytestmark = pytest.mark.unit


def _producer_with_delivery(delivery: asyncio.Future) -> MagicMock:
    producer = MagicMock()
    producer.produce = AsyncMock(return_value=delivery)
    return producer


class TestPublish:
    @pytest.mark.asyncio
    async def test_sends_key_value_and_headers(self):
        # Arrange
        delivery = asyncio.get_running_loop().create_future()
        delivery.set_result(None)
        producer = _producer_with_delivery(delivery)

        # Act
        with patch.object(
            event_publisher, '_get_global_producer', AsyncMock(return_value=producer)
        ):
            await event_publisher.publish(
                topic='order-paid',
                key='trx-1',
                value=b'{"id":"TO1"}',
                headers={'message_type': 'OrderPaidDomainEvent'},
            )

        # Assert
        kwargs = producer.produce.await_args.kwargs
        assert kwargs['topic'] == 'order-paid'
        assert kwargs['key'] == b'trx-1'
        assert kwargs['value'] == b'{"id":"TO1"}'
        assert ('message_type', 'OrderPaidDomainEvent') in kwargs['headers']

    @pytest.mark.asyncio
    async def test_delivery_failure_reaches_caller(self):
        # Arrange
        delivery = asyncio.get_running_loop().create_future()
        delivery.set_exception(RuntimeError('broker unreachable'))
        producer = _producer_with_delivery(delivery)

        # Act & Assert
        with patch.object(
            event_publisher, '_get_global_producer', AsyncMock(return_value=producer)
        ):
            with pytest.raises(RuntimeError, match='broker unreachable'):
                await event_publisher.publish(topic='order-paid', key='trx-1', value=b'{}')


class TestCloseProducer:
    @pytest.mark.asyncio
    async def test_flushes_and_forgets_global_producer(self):
        producer = MagicMock()
        producer.flush = AsyncMock()
        producer.close = AsyncMock()

        with patch.object(event_publisher, '_global_producer', producer):
            await event_publisher.close_producer()
            assert event_publisher._global_producer is None

        producer.flush.assert_awaited_once()
        producer.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_noop_without_producer(self):
        with patch.object(event_publisher, '_global_producer', None):
            await event_publisher.close_producer()
