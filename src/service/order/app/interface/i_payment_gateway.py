from abc import ABC, abstractmethod

from src.service.order.app.dto.payment_dto import ChargeRequest, ChargeResponse


class IPaymentGateway(ABC):
    """Port for the synchronous charge call; called at most once per order attempt."""

    @abstractmethod
    async def charge(self, *, request: ChargeRequest) -> ChargeResponse:
        """
        Raises:
            InternalError: transport failure, non-2xx answer or unreadable body
        """
        pass
