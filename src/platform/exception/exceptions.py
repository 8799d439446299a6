class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int, code: str) -> None:
        self.message = message
        self.status_code = status_code
        self.code = code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code, 'BAD_REQUEST')


class BadRequestError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 400, 'BAD_REQUEST')


class UnauthenticatedError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 401, 'UNAUTHORIZED')


class ForbiddenError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 403, 'FORBIDDEN')


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404, 'NOT_FOUND')


class InternalError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 500, 'INTERNAL_SERVER_ERROR')


class RequestTimeoutError(CustomBaseError):
    def __init__(self, message: str = 'request timed out') -> None:
        super().__init__(message, 504, 'GATEWAY_TIMEOUT')
