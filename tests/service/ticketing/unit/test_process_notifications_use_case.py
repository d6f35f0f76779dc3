from unittest.mock import AsyncMock

import pytest

from event_ticketing.service.ticketing.app.command.process_notifications_use_case import (
    ProcessNotificationsUseCase,
)
from event_ticketing.service.ticketing.domain.entity.booking_entity import (
    ACTIVE_BOOKING_STATUSES,
)
from event_ticketing.service.ticketing.domain.entity.user_entity import UserEntity
from event_ticketing.service.ticketing.domain.notification.notification import (
    BookingConfirmationNotification,
    EventUpdateNotification,
    NotificationJobType,
)


def _confirmation(customer_id: int = 2) -> BookingConfirmationNotification:
    return BookingConfirmationNotification(
        booking_id='0190c3a0-0000-7000-8000-000000000001',
        booking_reference='BK1',
        customer_id=customer_id,
        event_id=1,
        event_title='Summer Jazz Night',
        event_date='2030-07-15T19:30:00+00:00',
        event_location='Riverside',
        quantity=3,
        total_price=150.0,
        status='confirmed',
    )


@pytest.fixture
def queue() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def user_query_repo() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def booking_query_repo() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def use_case(
    queue: AsyncMock, user_query_repo: AsyncMock, booking_query_repo: AsyncMock
) -> ProcessNotificationsUseCase:
    return ProcessNotificationsUseCase(
        notification_queue=queue,
        user_query_repo=user_query_repo,
        booking_query_repo=booking_query_repo,
        batch_size=10,
    )


@pytest.mark.unit
class TestProcessNotificationsUseCase:
    async def test_booking_confirmation_is_sent(
        self, use_case: ProcessNotificationsUseCase, queue: AsyncMock, user_query_repo: AsyncMock
    ) -> None:
        queue.drain.return_value = [_confirmation()]
        user_query_repo.get_by_id.return_value = UserEntity(id=2, email='c@test.com', name='C')

        results = await use_case.process(job_type=NotificationJobType.BOOKING_CONFIRMATION)

        assert results == [{'success': True, 'message': 'Booking confirmation sent'}]
        queue.drain.assert_awaited_once_with(
            job_type=NotificationJobType.BOOKING_CONFIRMATION, limit=10
        )

    async def test_unknown_customer_is_reported_not_raised(
        self, use_case: ProcessNotificationsUseCase, queue: AsyncMock, user_query_repo: AsyncMock
    ) -> None:
        queue.drain.return_value = [_confirmation(customer_id=404)]
        user_query_repo.get_by_id.return_value = None

        results = await use_case.process(job_type=NotificationJobType.BOOKING_CONFIRMATION)

        assert results[0]['success'] is False

    async def test_event_update_counts_active_bookings(
        self,
        use_case: ProcessNotificationsUseCase,
        queue: AsyncMock,
        booking_query_repo: AsyncMock,
    ) -> None:
        queue.drain.return_value = [
            EventUpdateNotification(
                event_id=1,
                event_title='Summer Jazz Night',
                organizer_id=9,
                organizer_name='Org',
                changes='Updated date',
            )
        ]
        booking_query_repo.list_by_event.return_value = [
            {'booking_reference': 'BK1', 'quantity': 2, 'customer': {'email': 'a@test.com'}},
            {'booking_reference': 'BK2', 'quantity': 1, 'customer': {'email': 'b@test.com'}},
        ]

        results = await use_case.process(job_type=NotificationJobType.EVENT_UPDATE)

        assert results == [
            {'success': True, 'message': 'Event update notifications sent to 2 customers'}
        ]
        booking_query_repo.list_by_event.assert_awaited_once_with(
            event_id=1, statuses=ACTIVE_BOOKING_STATUSES
        )

    async def test_repo_failure_marks_job_failed(
        self,
        use_case: ProcessNotificationsUseCase,
        queue: AsyncMock,
        user_query_repo: AsyncMock,
    ) -> None:
        queue.drain.return_value = [_confirmation(), _confirmation()]
        user_query_repo.get_by_id.side_effect = [
            RuntimeError('db down'),
            UserEntity(id=2, email='c@test.com', name='C'),
        ]

        results = await use_case.process(job_type=NotificationJobType.BOOKING_CONFIRMATION)

        assert [result['success'] for result in results] == [False, True]

    async def test_empty_queue(self, use_case: ProcessNotificationsUseCase, queue: AsyncMock) -> None:
        queue.drain.return_value = []

        assert await use_case.process(job_type=NotificationJobType.EVENT_UPDATE) == []
