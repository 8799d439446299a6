"""
Cloud Tasks Scheduler

Creates HTTP-target tasks through the Cloud Tasks REST surface
(`projects.locations.queues.tasks.create`). Delivery is at-least-once, so
the callback endpoints must be idempotent.
"""

import base64
from datetime import timezone

import httpx

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import InternalError
from src.platform.logging.loguru_io import Logger
from src.service.order.app.dto.task_dto import ScheduledTask
from src.service.order.app.interface.i_task_scheduler import ITaskScheduler


class CloudTasksSchedulerImpl(ITaskScheduler):
    def __init__(
        self,
        *,
        base_url: str | None = None,
        project_id: str | None = None,
        location_id: str | None = None,
        access_token: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url or settings.CLOUD_TASKS_BASE_URL
        self.project_id = project_id or settings.CLOUD_TASKS_PROJECT_ID
        self.location_id = location_id or settings.CLOUD_TASKS_LOCATION_ID
        self.access_token = access_token or settings.CLOUD_TASKS_ACCESS_TOKEN.get_secret_value()
        self.timeout = timeout or settings.CLOUD_TASKS_TIMEOUT_SECONDS
        self.transport = transport

    def queue_path(self, queue: str) -> str:
        return f'projects/{self.project_id}/locations/{self.location_id}/queues/{queue}'

    @staticmethod
    def _task_body(task: ScheduledTask) -> dict:
        schedule_at = task.schedule_at.astimezone(timezone.utc)
        return {
            'task': {
                'scheduleTime': schedule_at.strftime('%Y-%m-%dT%H:%M:%S.%fZ'),
                'httpRequest': {
                    'url': task.request.url,
                    'httpMethod': task.request.method,
                    'headers': dict(task.request.headers),
                    'body': base64.b64encode(task.request.body).decode('ascii'),
                },
            }
        }

    @Logger.io
    async def schedule(self, *, task: ScheduledTask) -> None:
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url, timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.post(
                    f'/v2/{self.queue_path(task.queue)}/tasks',
                    json=self._task_body(task),
                    headers={'Authorization': f'Bearer {self.access_token}'},
                )
        except httpx.HTTPError as e:
            raise InternalError(f'failed to schedule task on queue {task.queue}') from e

        if not response.is_success:
            raise InternalError(
                f'failed to schedule task on queue {task.queue}: HTTP {response.status_code}'
            )

        Logger.base.info(
            f'⏰ [CLOUD_TASKS] Scheduled {task.request.method} {task.request.url} '
            f'on {task.queue} at {task.schedule_at.isoformat()}'
        )
