"""
Notification queue

Redis list per job type when Redis is connected, in-process deque otherwise.
Key format: {NOTIFICATION_QUEUE_PREFIX}{job_type}
"""

from collections import deque
from typing import Deque, Dict, List, Optional

import orjson
from redis.exceptions import RedisError

from event_ticketing.platform.config.core_setting import settings
from event_ticketing.platform.logging.loguru_io import Logger
from event_ticketing.platform.metrics.ticketing_metrics import metrics
from event_ticketing.platform.state.redis_client import RedisClient, redis_client
from event_ticketing.service.ticketing.app.interface.i_notification_queue import (
    INotificationQueue,
)
from event_ticketing.service.ticketing.domain.notification.notification import (
    Notification,
    NotificationJobType,
    notification_from_dict,
    notification_to_dict,
)


class NotificationQueueImpl(INotificationQueue):
    """
    At-most-once notification buffer.

    A notification is popped before it is rendered, so a crash between the
    two loses it. The in-memory buffer does not survive a restart.
    """

    def __init__(self, *, client: Optional[RedisClient] = None) -> None:
        self.client = client or redis_client
        self._memory: Dict[NotificationJobType, Deque[Notification]] = {
            job_type: deque() for job_type in NotificationJobType
        }

    @staticmethod
    def _key(job_type: NotificationJobType) -> str:
        return f'{settings.NOTIFICATION_QUEUE_PREFIX}{job_type.value}'

    def pending_in_memory(self, job_type: NotificationJobType) -> int:
        return len(self._memory[job_type])

    async def enqueue(self, notification: Notification) -> None:
        job_type = notification.job_type
        backend = 'memory'
        try:
            if self.client.is_available:
                await self.client.get_client().rpush(
                    self._key(job_type), orjson.dumps(notification_to_dict(notification))
                )
                backend = 'redis'
            else:
                self._memory[job_type].append(notification)
        except (RedisError, OSError) as e:
            Logger.base.warning(f'⚠️ [NOTIFY] Redis enqueue failed, buffering in memory | {e}')
            self._memory[job_type].append(notification)
        except Exception as e:
            Logger.base.error(f'❌ [NOTIFY] Dropped {job_type.value} notification | {e}')
            return

        metrics.record_notification_enqueued(job_type=job_type.value, backend=backend)
        pending = '' if backend == 'redis' else f', {self.pending_in_memory(job_type)} pending'
        Logger.base.info(f'📨 [NOTIFY] Queued {job_type.value} notification ({backend}{pending})')

    async def drain(self, *, job_type: NotificationJobType, limit: int) -> List[Notification]:
        drained: List[Notification] = []

        if self.client.is_available:
            try:
                client = self.client.get_client()
                while len(drained) < limit:
                    raw = await client.lpop(self._key(job_type))
                    if raw is None:
                        break
                    drained.append(notification_from_dict(orjson.loads(raw)))
            except (RedisError, OSError) as e:
                Logger.base.warning(f'⚠️ [NOTIFY] Redis drain failed | {e}')

        buffer = self._memory[job_type]
        while buffer and len(drained) < limit:
            drained.append(buffer.popleft())

        if drained:
            Logger.base.info(f'📤 [NOTIFY] Drained {len(drained)} {job_type.value} notification(s)')
        return drained
