from datetime import datetime

import attrs


@attrs.define(frozen=True)
class ScheduledHttpRequest:
    """HTTP call a deferred task performs when it fires."""

    url: str
    body: bytes
    method: str = 'POST'
    headers: dict[str, str] = attrs.field(factory=lambda: {'Content-Type': 'application/json'})


@attrs.define(frozen=True)
class ScheduledTask:
    queue: str
    request: ScheduledHttpRequest
    schedule_at: datetime
