"""Payment gateway request/response DTOs (bank-transfer charge)."""

from typing import List, Optional

import attrs


BANK_TRANSFER_PAYMENT_TYPE = 'bank_transfer'
SETTLEMENT_TRANSACTION_STATUS = 'settlement'


@attrs.define(frozen=True)
class ChargeRequest:
    bank: str
    order_id: str
    gross_amount: int
    payment_type: str = BANK_TRANSFER_PAYMENT_TYPE


@attrs.define(frozen=True)
class VaNumber:
    bank: str
    va_number: str


@attrs.define(frozen=True)
class ChargeResponse:
    transaction_id: str
    transaction_status: str
    order_id: str = ''
    status_code: str = ''
    status_message: str = ''
    gross_amount: str = ''
    payment_type: str = ''
    transaction_time: str = ''
    expiry_time: str = ''
    va_numbers: List[VaNumber] = attrs.field(factory=list)

    @property
    def virtual_account(self) -> Optional[str]:
        return self.va_numbers[0].va_number if self.va_numbers else None
