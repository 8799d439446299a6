from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.exception.exceptions import ForbiddenError
from src.service.order.domain.entity.account_entity import Account
from src.service.order.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


bearer_scheme = HTTPBearer(auto_error=False)


@inject
async def get_current_account(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> Account:
    token = credentials.credentials if credentials else None
    return jwt_auth.get_current_account_from_jwt(token)


async def require_admin(current_account: Account = Depends(get_current_account)) -> Account:
    tracer = trace.get_tracer(__name__)
    with tracer.start_as_current_span(
        'auth.require_admin',
        attributes={'account.id': current_account.id, 'account.role': current_account.role.value},
    ):
        if not current_account.is_admin():
            raise ForbiddenError('only admin can perform this action')
        return current_account
