from abc import ABC, abstractmethod

from src.service.order.app.dto.task_dto import ScheduledTask


class ITaskScheduler(ABC):
    """Port for deferred HTTP callbacks (fire-and-forget, best-effort delivery)."""

    @abstractmethod
    async def schedule(self, *, task: ScheduledTask) -> None:
        pass
