from enum import StrEnum

import attrs


class AccountRole(StrEnum):
    CUSTOMER = 'customer'
    ADMIN = 'admin'


@attrs.define(frozen=True)
class Account:
    """Authenticated caller as carried by the session token"""

    id: int
    name: str
    email: str
    role: AccountRole = AccountRole.CUSTOMER

    def is_admin(self) -> bool:
        return self.role == AccountRole.ADMIN
