"""
Service context for log lines.

Identifies which process emitted a line when several API workers share one
log stream.
"""

from functools import lru_cache
import os
import socket


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'event-ticketing')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')

    # Containers set HOSTNAME to the container id; fall back to the PID locally
    host = os.getenv('HOSTNAME') or socket.gethostname()
    instance = f'{host[:12]}:{os.getpid()}' if deploy_env != 'local_dev' else str(os.getpid())

    return f'{service_name}@{deploy_env}:{instance}'
