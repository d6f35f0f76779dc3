from unittest.mock import AsyncMock, Mock, patch

import orjson
import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from event_ticketing.platform.config.core_setting import settings
from event_ticketing.service.ticketing.domain.notification.notification import (
    BookingConfirmationNotification,
    EventUpdateNotification,
    NotificationJobType,
    notification_to_dict,
)
from event_ticketing.service.ticketing.driven_adapter.notification.notification_queue_impl import (
    NotificationQueueImpl,
)


def _confirmation(reference: str = 'BK1') -> BookingConfirmationNotification:
    return BookingConfirmationNotification(
        booking_id='0190c3a0-0000-7000-8000-000000000001',
        booking_reference=reference,
        customer_id=2,
        event_id=1,
        event_title='Summer Jazz Night',
        event_date='2030-07-15T19:30:00+00:00',
        event_location='Riverside',
        quantity=3,
        total_price=150.0,
        status='confirmed',
    )


def _update() -> EventUpdateNotification:
    return EventUpdateNotification(
        event_id=1,
        event_title='Summer Jazz Night',
        organizer_id=9,
        organizer_name='Org',
        changes='Updated title',
    )


def _offline_client() -> Mock:
    return Mock(is_available=False)


@pytest.mark.unit
class TestNotificationQueueInMemory:
    async def test_enqueue_then_drain_in_order(self) -> None:
        queue = NotificationQueueImpl(client=_offline_client())

        await queue.enqueue(_confirmation('BK1'))
        await queue.enqueue(_confirmation('BK2'))

        drained = await queue.drain(job_type=NotificationJobType.BOOKING_CONFIRMATION, limit=10)

        assert [job.booking_reference for job in drained] == ['BK1', 'BK2']
        assert queue.pending_in_memory(NotificationJobType.BOOKING_CONFIRMATION) == 0

    async def test_drain_respects_limit(self) -> None:
        queue = NotificationQueueImpl(client=_offline_client())
        for i in range(5):
            await queue.enqueue(_confirmation(f'BK{i}'))

        drained = await queue.drain(job_type=NotificationJobType.BOOKING_CONFIRMATION, limit=3)

        assert len(drained) == 3
        assert queue.pending_in_memory(NotificationJobType.BOOKING_CONFIRMATION) == 2

    async def test_enqueue_log_reports_backlog(self) -> None:
        queue = NotificationQueueImpl(client=_offline_client())
        await queue.enqueue(_confirmation('BK1'))

        with patch(
            'event_ticketing.service.ticketing.driven_adapter.notification.notification_queue_impl.Logger'
        ) as logger:
            await queue.enqueue(_confirmation('BK2'))

        logger.base.info.assert_called_once_with(
            '📨 [NOTIFY] Queued booking-confirmation notification (memory, 2 pending)'
        )

    async def test_job_types_are_kept_apart(self) -> None:
        queue = NotificationQueueImpl(client=_offline_client())

        await queue.enqueue(_confirmation())
        await queue.enqueue(_update())

        drained = await queue.drain(job_type=NotificationJobType.EVENT_UPDATE, limit=10)

        assert len(drained) == 1
        assert isinstance(drained[0], EventUpdateNotification)


@pytest.mark.unit
class TestNotificationQueueRedis:
    async def test_enqueue_pushes_json_onto_job_type_list(self) -> None:
        redis = AsyncMock()
        client = Mock(is_available=True)
        client.get_client.return_value = redis
        queue = NotificationQueueImpl(client=client)
        notification = _confirmation()

        await queue.enqueue(notification)

        key, payload = redis.rpush.await_args.args
        assert key == f'{settings.NOTIFICATION_QUEUE_PREFIX}booking-confirmation'
        assert orjson.loads(payload) == notification_to_dict(notification)
        assert queue.pending_in_memory(NotificationJobType.BOOKING_CONFIRMATION) == 0

    async def test_redis_error_falls_back_to_memory(self) -> None:
        redis = AsyncMock()
        redis.rpush.side_effect = RedisConnectionError('down')
        client = Mock(is_available=True)
        client.get_client.return_value = redis
        queue = NotificationQueueImpl(client=client)

        await queue.enqueue(_update())

        assert queue.pending_in_memory(NotificationJobType.EVENT_UPDATE) == 1

    async def test_drain_pops_from_redis(self) -> None:
        notification = _update()
        redis = AsyncMock()
        redis.lpop.side_effect = [orjson.dumps(notification_to_dict(notification)), None]
        client = Mock(is_available=True)
        client.get_client.return_value = redis
        queue = NotificationQueueImpl(client=client)

        drained = await queue.drain(job_type=NotificationJobType.EVENT_UPDATE, limit=10)

        assert drained == [notification]
