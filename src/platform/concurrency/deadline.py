from collections.abc import Iterator
from contextlib import contextmanager

import anyio

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import RequestTimeoutError


@contextmanager
def workflow_deadline(seconds: float | None = None) -> Iterator[None]:
    """
    Bound a workflow invocation by a fixed budget measured from entry.

    Anything awaited inside is cancelled once the budget is spent; the caller sees
    RequestTimeoutError. Units of work opened inside roll back on the way out.
    """
    budget = settings.APPLICATION_TIMEOUT_SECONDS if seconds is None else seconds
    try:
        with anyio.fail_after(budget):
            yield
    except TimeoutError as e:
        raise RequestTimeoutError() from e
