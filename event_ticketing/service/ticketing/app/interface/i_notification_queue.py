from abc import ABC, abstractmethod
from typing import List

from event_ticketing.service.ticketing.domain.notification.notification import (
    Notification,
    NotificationJobType,
)


class INotificationQueue(ABC):
    """
    Fire-and-forget notification dispatcher.

    enqueue() never raises: a notification that cannot be stored anywhere is
    logged and dropped.
    """

    @abstractmethod
    async def enqueue(self, notification: Notification) -> None:
        pass

    @abstractmethod
    async def drain(self, *, job_type: NotificationJobType, limit: int) -> List[Notification]:
        """Remove and return up to `limit` pending notifications of one type"""
        pass
