from typing import Any, Callable, Coroutine

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from src.platform.exception.exceptions import CustomBaseError
from src.platform.http.response_envelope import ResponseEnvelope

# Type alias for exception handlers (compatible with Starlette's expected signature)
ExceptionHandler = Callable[[Request, Exception], Coroutine[Any, Any, Response]]

_HTTP_STATUS_CODES: dict[int, str] = {
    400: 'BAD_REQUEST',
    401: 'UNAUTHORIZED',
    403: 'FORBIDDEN',
    404: 'NOT_FOUND',
    405: 'METHOD_NOT_ALLOWED',
    422: 'UNPROCESSABLE_ENTITY',
    500: 'INTERNAL_SERVER_ERROR',
    504: 'GATEWAY_TIMEOUT',
}


def envelope_response(*, status_code: int, code: str, message: str) -> JSONResponse:
    body = ResponseEnvelope[None](status=code, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def custom_error_handler(request: Request, exc: Exception) -> JSONResponse:
    error = (
        exc
        if isinstance(exc, CustomBaseError)
        else CustomBaseError(str(exc), 500, 'INTERNAL_SERVER_ERROR')
    )
    return envelope_response(status_code=error.status_code, code=error.code, message=error.message)


async def validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    error = exc if isinstance(exc, RequestValidationError) else RequestValidationError([])
    errors = error.errors()

    # Body that is not JSON at all is unprocessable; JSON that breaks field rules is a bad request
    if any(err.get('type') == 'json_invalid' for err in errors):
        return envelope_response(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            code='UNPROCESSABLE_ENTITY',
            message='UNPROCESSABLE_ENTITY',
        )

    message = '; '.join(
        f'{".".join(str(part) for part in err.get("loc", ()) if part != "body")}: {err.get("msg")}'
        for err in errors
    )
    return envelope_response(
        status_code=status.HTTP_400_BAD_REQUEST,
        code='BAD_REQUEST',
        message=message or 'invalid request',
    )


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    error = exc if isinstance(exc, StarletteHTTPException) else StarletteHTTPException(500)
    return envelope_response(
        status_code=error.status_code,
        code=_HTTP_STATUS_CODES.get(error.status_code, 'ERROR'),
        message=str(error.detail),
    )


async def general_500_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    return envelope_response(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        code='INTERNAL_SERVER_ERROR',
        message='internal server error',
    )


# Exception handler mapping
EXCEPTION_HANDLERS: dict[type[Exception], ExceptionHandler] = {
    CustomBaseError: custom_error_handler,
    RequestValidationError: validation_error_handler,
    StarletteHTTPException: http_exception_handler,
    Exception: general_500_exception_handler,  # Catch-all for unhandled exceptions
}


def register_exception_handlers(app: FastAPI) -> None:
    for exception_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exception_class, handler)
