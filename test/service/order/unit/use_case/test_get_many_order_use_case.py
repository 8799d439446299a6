from unittest.mock import AsyncMock

import attrs
import pytest

from src.platform.exception.exceptions import BadRequestError, InternalError
from src.service.order.app.query.get_many_order_use_case import GetManyOrderUseCase
from src.service.order.domain.entity.order_entity import Item
from test.service.order.unit.helpers import (
    EVENT_ID,
    ORDER_ID,
    SHOW_ID,
    TICKET_STOCK_ID,
    make_account,
    make_order,
)


pytestmark = pytest.mark.unit


def _item(order_id: str) -> Item:
    return Item(
        id=1,
        order_id=order_id,
        ticket_stock_id=TICKET_STOCK_ID,
        show_id=SHOW_ID,
        event_id=EVENT_ID,
        event_name='Coldplay',
        show_venue='Gelora Bung Karno',
        tier='GOLD',
        price=100000,
        quantity=1,
    )


class TestGetManyOrder:
    @pytest.fixture
    def order_query_repo(self) -> AsyncMock:
        second = attrs.evolve(make_order(), id='TO0000000000000000000000000000000001')
        repo = AsyncMock()
        repo.count = AsyncMock(return_value=5)
        repo.find_many = AsyncMock(return_value=[make_order(), second])
        repo.find_items_by_order_ids = AsyncMock(return_value={ORDER_ID: [_item(ORDER_ID)]})
        return repo

    @pytest.mark.asyncio
    async def test_page_offset_and_total(self, order_query_repo):
        # Arrange
        use_case = GetManyOrderUseCase(order_query_repo=order_query_repo)

        # Act
        orders, total = await use_case.execute(account=make_account(id=7), page=3, size=2)

        # Assert
        assert total == 5
        order_query_repo.count.assert_awaited_once_with(customer_id=7)
        order_query_repo.find_many.assert_awaited_once_with(customer_id=7, offset=4, limit=2)
        assert [order.id for order in orders] == [ORDER_ID, 'TO0000000000000000000000000000000001']

    @pytest.mark.asyncio
    async def test_items_are_hydrated_in_one_lookup(self, order_query_repo):
        use_case = GetManyOrderUseCase(order_query_repo=order_query_repo)

        orders, _ = await use_case.execute(account=make_account(), page=1, size=10)

        order_query_repo.find_items_by_order_ids.assert_awaited_once_with(
            order_ids=[ORDER_ID, 'TO0000000000000000000000000000000001']
        )
        assert len(orders[0].items) == 1
        assert orders[1].items == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize('page,size', [(0, 10), (1, 0), (-1, -1)])
    async def test_invalid_pagination_is_bad_request(self, order_query_repo, page, size):
        use_case = GetManyOrderUseCase(order_query_repo=order_query_repo)

        with pytest.raises(BadRequestError):
            await use_case.execute(account=make_account(), page=page, size=size)
        order_query_repo.count.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_count_failure_propagates(self, order_query_repo):
        # Arrange
        order_query_repo.count = AsyncMock(side_effect=InternalError('db down'))
        use_case = GetManyOrderUseCase(order_query_repo=order_query_repo)

        # Act & Assert
        with pytest.raises(InternalError, match='db down'):
            await use_case.execute(account=make_account(), page=1, size=10)
        order_query_repo.find_items_by_order_ids.assert_not_awaited()
