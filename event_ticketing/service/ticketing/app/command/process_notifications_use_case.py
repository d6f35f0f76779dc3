"""
Notification processing

Drains queued notifications and renders each one as a simulated email
through the service log. Nothing is retried: a job that fails to render is
reported in the results and dropped.
"""

from typing import Any, Dict, List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from event_ticketing.platform.config.core_setting import settings
from event_ticketing.platform.config.di import Container
from event_ticketing.platform.logging.loguru_io import Logger
from event_ticketing.platform.metrics.ticketing_metrics import metrics
from event_ticketing.service.ticketing.app.interface.i_booking_query_repo import IBookingQueryRepo
from event_ticketing.service.ticketing.app.interface.i_notification_queue import (
    INotificationQueue,
)
from event_ticketing.service.ticketing.app.interface.i_user_query_repo import IUserQueryRepo
from event_ticketing.service.ticketing.domain.entity.booking_entity import ACTIVE_BOOKING_STATUSES
from event_ticketing.service.ticketing.domain.notification.notification import (
    BookingConfirmationNotification,
    EventUpdateNotification,
    Notification,
    NotificationJobType,
)


class ProcessNotificationsUseCase:
    def __init__(
        self,
        *,
        notification_queue: INotificationQueue,
        user_query_repo: IUserQueryRepo,
        booking_query_repo: IBookingQueryRepo,
        batch_size: int = settings.NOTIFICATION_BATCH_SIZE,
    ) -> None:
        self.notification_queue = notification_queue
        self.user_query_repo = user_query_repo
        self.booking_query_repo = booking_query_repo
        self.batch_size = batch_size

    @classmethod
    @inject
    def depends(
        cls,
        notification_queue: INotificationQueue = Depends(
            Provide[Container.notification_queue]
        ),
        user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
        booking_query_repo: IBookingQueryRepo = Depends(Provide[Container.booking_query_repo]),
    ) -> Self:
        return cls(
            notification_queue=notification_queue,
            user_query_repo=user_query_repo,
            booking_query_repo=booking_query_repo,
        )

    @Logger.io
    async def process(self, *, job_type: NotificationJobType) -> List[Dict[str, Any]]:
        jobs = await self.notification_queue.drain(job_type=job_type, limit=self.batch_size)

        results: List[Dict[str, Any]] = []
        for job in jobs:
            try:
                result = await self._render(job)
            except Exception as e:
                Logger.base.error(f'❌ [NOTIFY] Failed to process {job_type.value} job | {e}')
                result = {'success': False, 'message': str(e)}
            metrics.record_notification_processed(
                job_type=job_type.value, success=result['success']
            )
            results.append(result)

        Logger.base.info(f'📬 [NOTIFY] Processed {len(results)} {job_type.value} job(s)')
        return results

    async def _render(self, job: Notification) -> Dict[str, Any]:
        if isinstance(job, BookingConfirmationNotification):
            return await self._send_booking_confirmation(job)
        return await self._send_event_update(job)

    async def _send_booking_confirmation(
        self, job: BookingConfirmationNotification
    ) -> Dict[str, Any]:
        customer = await self.user_query_repo.get_by_id(job.customer_id)
        if customer is None:
            return {'success': False, 'message': f'Customer {job.customer_id} not found'}

        lines = [
            '=== EMAIL NOTIFICATION ===',
            '✓ BOOKING CONFIRMATION EMAIL SENT',
            f'  To: {customer.email}',
            f'  Subject: Booking Confirmation - {job.event_title}',
            f'  Booking Reference: {job.booking_reference}',
            f'  Customer: {customer.name}',
            f'  Event: {job.event_title}',
            f'  Date: {job.event_date}',
            f'  Location: {job.event_location}',
            f'  Quantity: {job.quantity} tickets',
            f'  Total Price: ${job.total_price}',
            f'  Booking Status: {job.status}',
            '  Message: Your booking has been confirmed! Please check your email for details.',
            '===========================',
        ]
        Logger.base.info('\n' + '\n'.join(lines))
        return {'success': True, 'message': 'Booking confirmation sent'}

    async def _send_event_update(self, job: EventUpdateNotification) -> Dict[str, Any]:
        bookings = await self.booking_query_repo.list_by_event(
            event_id=job.event_id, statuses=ACTIVE_BOOKING_STATUSES
        )

        lines = [
            '=== EVENT UPDATE NOTIFICATIONS ===',
            '✓ EVENT UPDATED BY ORGANIZER',
            f'  Event: {job.event_title}',
            f'  Organizer: {job.organizer_name}',
            f'  Changes: {job.changes}',
            f'  Notifying {len(bookings)} customers...',
        ]
        for index, booking in enumerate(bookings, start=1):
            email = booking['customer']['email'] if booking['customer'] else 'unknown'
            lines += [
                f'  [{index}/{len(bookings)}] Notification sent to {email}',
                f'    - Booking Reference: {booking["booking_reference"]}',
                f'    - Quantity: {booking["quantity"]} tickets',
                f'    - Message: Event "{job.event_title}" has been updated. '
                'Please check for details.',
            ]
        lines.append('==================================')
        Logger.base.info('\n' + '\n'.join(lines))

        return {
            'success': True,
            'message': f'Event update notifications sent to {len(bookings)} customers',
        }
