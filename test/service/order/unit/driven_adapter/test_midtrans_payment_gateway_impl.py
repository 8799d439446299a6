"""
Unit tests for MidtransPaymentGatewayImpl

HTTP is served by httpx.MockTransport, so request shape and every failure
branch can be checked without the network.
"""

import httpx
import orjson
import pytest

from src.platform.exception.exceptions import InternalError
from src.service.order.app.dto.payment_dto import ChargeRequest
from src.service.order.driven_adapter.payment.midtrans_payment_gateway_impl import (
    CHARGE_FAILED_MESSAGE,
    MidtransPaymentGatewayImpl,
)
from test.service.order.unit.helpers import ORDER_ID, TRANSACTION_ID


pytestmark = pytest.mark.unit

SUCCESS_BODY = {
    'status_code': '201',
    'status_message': 'Success, Bank Transfer transaction is created',
    'transaction_id': TRANSACTION_ID,
    'order_id': ORDER_ID,
    'gross_amount': '115000.00',
    'payment_type': 'bank_transfer',
    'transaction_time': '2026-10-19 10:00:00',
    'transaction_status': 'pending',
    'va_numbers': [{'bank': 'bca', 'va_number': '812785002530231'}],
    'fraud_status': 'accept',
}


def _gateway(handler) -> MidtransPaymentGatewayImpl:
    return MidtransPaymentGatewayImpl(
        base_url='https://midtrans.test',
        server_key='c2VydmVyLWtleTo=',
        timeout=1,
        transport=httpx.MockTransport(handler),
    )


def _request() -> ChargeRequest:
    return ChargeRequest(bank='bca', order_id=ORDER_ID, gross_amount=115000)


class TestMidtransCharge:
    @pytest.mark.asyncio
    async def test_posts_bank_transfer_charge(self):
        # Arrange
        captured: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(200, content=orjson.dumps(SUCCESS_BODY))

        # Act
        response = await _gateway(handler).charge(request=_request())

        # Assert: request
        sent = captured[0]
        assert sent.method == 'POST'
        assert sent.url == 'https://midtrans.test/v2/charge'
        assert sent.headers['Authorization'] == 'Basic c2VydmVyLWtleTo='
        assert orjson.loads(sent.content) == {
            'payment_type': 'bank_transfer',
            'bank_transfer': {'bank': 'bca'},
            'transaction_details': {'order_id': ORDER_ID, 'gross_amount': 115000},
        }

        # Assert: response
        assert response.transaction_id == TRANSACTION_ID
        assert response.transaction_status == 'pending'
        assert response.virtual_account == '812785002530231'

    @pytest.mark.asyncio
    async def test_http_error_status(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, text='boom')

        with pytest.raises(InternalError, match=CHARGE_FAILED_MESSAGE):
            await _gateway(handler).charge(request=_request())

    @pytest.mark.asyncio
    async def test_business_rejection_in_body(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200,
                content=orjson.dumps({'status_code': '406', 'status_message': 'duplicate order ID'}),
            )

        with pytest.raises(InternalError, match=CHARGE_FAILED_MESSAGE):
            await _gateway(handler).charge(request=_request())

    @pytest.mark.asyncio
    async def test_unreadable_body(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text='<html>gateway</html>')

        with pytest.raises(InternalError, match=CHARGE_FAILED_MESSAGE):
            await _gateway(handler).charge(request=_request())

    @pytest.mark.asyncio
    async def test_transport_failure(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError('connection refused', request=request)

        with pytest.raises(InternalError, match=CHARGE_FAILED_MESSAGE):
            await _gateway(handler).charge(request=_request())
