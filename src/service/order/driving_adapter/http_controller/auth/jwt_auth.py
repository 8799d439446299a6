"""
Session token verification

Tokens are issued by the account service; this service only verifies them
and rebuilds the caller from the claims (no DB query).
"""

from typing import Dict, Optional

import jwt

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import UnauthenticatedError
from src.service.order.domain.entity.account_entity import Account, AccountRole


class JwtAuth:
    def __init__(self, *, secret: Optional[str] = None, algorithm: Optional[str] = None) -> None:
        self.secret = secret or settings.SECRET_KEY.get_secret_value()
        self.algorithm = algorithm or settings.ALGORITHM

    def decode_jwt_token(self, token: str) -> Dict:
        try:
            return jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.PyJWTError as e:
            raise UnauthenticatedError('invalid session') from e

    def get_current_account_from_jwt(self, token: Optional[str]) -> Account:
        if not token:
            raise UnauthenticatedError('not authenticated')

        payload = self.decode_jwt_token(token)

        account_id = payload.get('account_id') or payload.get('sub')
        name = payload.get('name')
        email = payload.get('email')
        role = payload.get('role', AccountRole.CUSTOMER)

        if not account_id or not name or not email:
            raise UnauthenticatedError('invalid session')

        try:
            return Account(id=int(account_id), name=name, email=email, role=AccountRole(role))
        except ValueError as e:
            raise UnauthenticatedError('invalid session') from e
