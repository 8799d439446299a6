"""
Service identification attached to every log line.
"""

import os
from functools import lru_cache


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'tm-order')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')

    # Cloud Run exposes the revision; fall back to the PID locally
    instance = os.getenv('K_REVISION') or str(os.getpid())

    return f'{service_name}@{deploy_env}:{instance}'
