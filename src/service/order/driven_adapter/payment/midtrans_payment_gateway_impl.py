"""
Midtrans Payment Gateway

Single bank-transfer charge call (Core API `/v2/charge`). The result is a
virtual account the customer pays into; settlement arrives later through
the payment-notification webhook.
"""

import httpx
import orjson

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import InternalError
from src.platform.logging.loguru_io import Logger
from src.service.order.app.dto.payment_dto import ChargeRequest, ChargeResponse, VaNumber
from src.service.order.app.interface.i_payment_gateway import IPaymentGateway


CHARGE_FAILED_MESSAGE = 'an error occurred while charge payment through midtrans'


class MidtransPaymentGatewayImpl(IPaymentGateway):
    def __init__(
        self,
        *,
        base_url: str | None = None,
        server_key: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url or settings.MIDTRANS_BASE_URL
        self.server_key = server_key or settings.MIDTRANS_SERVER_KEY.get_secret_value()
        self.timeout = timeout or settings.MIDTRANS_TIMEOUT_SECONDS
        self.transport = transport

    def _headers(self) -> dict[str, str]:
        return {
            'Accept': 'application/json',
            'Content-Type': 'application/json',
            'Authorization': f'Basic {self.server_key}',
        }

    @staticmethod
    def _charge_body(request: ChargeRequest) -> dict:
        return {
            'payment_type': request.payment_type,
            'bank_transfer': {'bank': request.bank},
            'transaction_details': {
                'order_id': request.order_id,
                'gross_amount': request.gross_amount,
            },
        }

    @staticmethod
    def _to_response(body: dict) -> ChargeResponse:
        return ChargeResponse(
            transaction_id=body.get('transaction_id', ''),
            transaction_status=body.get('transaction_status', ''),
            order_id=body.get('order_id', ''),
            status_code=str(body.get('status_code', '')),
            status_message=body.get('status_message', ''),
            gross_amount=str(body.get('gross_amount', '')),
            payment_type=body.get('payment_type', ''),
            transaction_time=body.get('transaction_time', ''),
            expiry_time=body.get('expiry_time', ''),
            va_numbers=[
                VaNumber(bank=va.get('bank', ''), va_number=va.get('va_number', ''))
                for va in body.get('va_numbers') or []
            ],
        )

    @Logger.io
    async def charge(self, *, request: ChargeRequest) -> ChargeResponse:
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url, timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.post(
                    '/v2/charge',
                    content=orjson.dumps(self._charge_body(request)),
                    headers=self._headers(),
                )
        except httpx.HTTPError as e:
            Logger.base.error(f'💳 [MIDTRANS] charge transport failure: {e!r}')
            raise InternalError(CHARGE_FAILED_MESSAGE) from e

        if not response.is_success:
            Logger.base.error(f'💳 [MIDTRANS] charge answered HTTP {response.status_code}')
            raise InternalError(CHARGE_FAILED_MESSAGE)

        try:
            body = orjson.loads(response.content)
        except orjson.JSONDecodeError as e:
            Logger.base.error('💳 [MIDTRANS] charge answered an unreadable body')
            raise InternalError(CHARGE_FAILED_MESSAGE) from e

        if not isinstance(body, dict):
            raise InternalError(CHARGE_FAILED_MESSAGE)

        # Midtrans reports business failures with HTTP 200 and a non-2xx status_code in the body
        status_code = str(body.get('status_code', ''))
        if not status_code.startswith('2'):
            Logger.base.error(
                f'💳 [MIDTRANS] charge rejected: {status_code} {body.get("status_message", "")}'
            )
            raise InternalError(CHARGE_FAILED_MESSAGE)

        return self._to_response(body)
