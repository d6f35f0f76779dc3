from unittest.mock import Mock
import uuid

import pytest

from event_ticketing.platform.exception.exceptions import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
)
from event_ticketing.platform.state.keyed_lock import KeyedLock
from event_ticketing.service.ticketing.app.command.cancel_booking_use_case import (
    CancelBookingUseCase,
)
from event_ticketing.service.ticketing.domain.entity.booking_entity import Booking, BookingStatus


@pytest.fixture
def use_case(mock_uow: Mock) -> CancelBookingUseCase:
    return CancelBookingUseCase(uow=mock_uow, event_lock=KeyedLock(name='test'))


@pytest.fixture
def booking() -> Booking:
    return Booking.create(customer_id=2, event_id=1, quantity=3, ticket_price=50.0)


@pytest.mark.unit
class TestCancelBookingUseCase:
    async def test_cancel_restores_quantity(
        self, use_case: CancelBookingUseCase, mock_uow: Mock, booking: Booking
    ) -> None:
        mock_uow.booking_command_repo.get_by_id.return_value = booking
        mock_uow.booking_command_repo.mark_cancelled.return_value = True
        mock_uow.event_command_repo.release_tickets.return_value = True

        cancelled = await use_case.cancel_booking(booking_id=booking.id, customer_id=2)

        assert cancelled.status == BookingStatus.CANCELLED
        mock_uow.event_command_repo.release_tickets.assert_awaited_once_with(
            event_id=1, quantity=3
        )
        mock_uow.commit.assert_awaited_once()

    async def test_missing_booking(self, use_case: CancelBookingUseCase, mock_uow: Mock) -> None:
        mock_uow.booking_command_repo.get_by_id.return_value = None

        with pytest.raises(NotFoundError):
            await use_case.cancel_booking(booking_id=uuid.uuid4(), customer_id=2)

    async def test_other_customer_cannot_cancel(
        self, use_case: CancelBookingUseCase, mock_uow: Mock, booking: Booking
    ) -> None:
        mock_uow.booking_command_repo.get_by_id.return_value = booking

        with pytest.raises(AuthorizationError) as exc_info:
            await use_case.cancel_booking(booking_id=booking.id, customer_id=3)

        assert exc_info.value.message == 'Not authorized to cancel this booking'
        mock_uow.booking_command_repo.mark_cancelled.assert_not_awaited()

    async def test_already_cancelled(
        self, use_case: CancelBookingUseCase, mock_uow: Mock, booking: Booking
    ) -> None:
        mock_uow.booking_command_repo.get_by_id.return_value = booking.cancel()

        with pytest.raises(ConflictError) as exc_info:
            await use_case.cancel_booking(booking_id=booking.id, customer_id=2)

        assert exc_info.value.status_code == 400
        mock_uow.event_command_repo.release_tickets.assert_not_awaited()

    async def test_lost_race_does_not_restore_twice(
        self, use_case: CancelBookingUseCase, mock_uow: Mock, booking: Booking
    ) -> None:
        mock_uow.booking_command_repo.get_by_id.return_value = booking
        mock_uow.booking_command_repo.mark_cancelled.return_value = False

        with pytest.raises(ConflictError):
            await use_case.cancel_booking(booking_id=booking.id, customer_id=2)

        mock_uow.event_command_repo.release_tickets.assert_not_awaited()
        mock_uow.commit.assert_not_awaited()

    async def test_deleted_event_still_cancels(
        self, use_case: CancelBookingUseCase, mock_uow: Mock, booking: Booking
    ) -> None:
        mock_uow.booking_command_repo.get_by_id.return_value = booking
        mock_uow.booking_command_repo.mark_cancelled.return_value = True
        mock_uow.event_command_repo.release_tickets.return_value = False

        cancelled = await use_case.cancel_booking(booking_id=booking.id, customer_id=2)

        assert cancelled.is_cancelled
        mock_uow.commit.assert_awaited_once()
