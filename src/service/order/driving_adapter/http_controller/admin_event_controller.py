from fastapi import APIRouter, Depends, status

from src.platform.http.response_envelope import ResponseEnvelope
from src.platform.logging.loguru_io import Logger
from src.service.order.app.command.create_event_use_case import CreateEventUseCase
from src.service.order.domain.entity.account_entity import Account
from src.service.order.driving_adapter.http_controller.auth.role_auth import require_admin
from src.service.order.driving_adapter.http_controller.schema.event_schema import (
    CreateEventRequest,
    CreateEventResponse,
)


router = APIRouter()


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_event(
    request: CreateEventRequest,
    current_account: Account = Depends(require_admin),
    use_case: CreateEventUseCase = Depends(CreateEventUseCase.depends),
) -> ResponseEnvelope[CreateEventResponse]:
    event = await use_case.execute(account=current_account, request=request.to_input())
    return ResponseEnvelope[CreateEventResponse](
        status='CREATED',
        message='event has been successfully created',
        data=CreateEventResponse.from_entity(event),
    )
