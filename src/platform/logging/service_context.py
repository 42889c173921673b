"""
Service context for log lines.

Identifies which service, environment and process emitted a log record so
that logs collected from several containers can be told apart.
"""

import os
from functools import lru_cache


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'hotel-booking')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')

    # Container hostname in docker/k8s, PID locally
    instance = os.getenv('HOSTNAME', '')[:12] or str(os.getpid())

    return f'{service_name}@{deploy_env}:{instance}'
