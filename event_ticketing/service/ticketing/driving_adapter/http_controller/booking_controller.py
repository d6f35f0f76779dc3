from typing import Any, List
from uuid import UUID

from fastapi import APIRouter, Depends, status
from opentelemetry import trace

from event_ticketing.platform.logging.loguru_io import Logger
from event_ticketing.service.ticketing.app.command.cancel_booking_use_case import (
    CancelBookingUseCase,
)
from event_ticketing.service.ticketing.app.command.create_booking_use_case import (
    CreateBookingUseCase,
)
from event_ticketing.service.ticketing.app.query.get_booking_use_case import GetBookingUseCase
from event_ticketing.service.ticketing.app.query.list_bookings_use_case import ListBookingsUseCase
from event_ticketing.service.ticketing.domain.entity.user_entity import UserEntity
from event_ticketing.service.ticketing.driving_adapter.http_controller.auth.role_auth import (
    get_current_user,
    require_customer,
    require_organizer,
)
from event_ticketing.service.ticketing.driving_adapter.http_controller.schema.booking_schema import (
    BookingCreateRequest,
    BookingEnvelopeResponse,
    BookingResponse,
)


router = APIRouter()
tracer = trace.get_tracer(__name__)


@router.post('', response_model=BookingEnvelopeResponse, status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_booking(
    request: BookingCreateRequest,
    current_user: UserEntity = Depends(require_customer),
    use_case: CreateBookingUseCase = Depends(CreateBookingUseCase.depends),
) -> BookingEnvelopeResponse:
    with tracer.start_as_current_span('controller.create_booking') as span:
        span.set_attribute('event_id', request.event_id)
        span.set_attribute('customer_id', current_user.id or 0)

        booking = await use_case.create_booking(
            customer_id=current_user.id or 0,
            event_id=request.event_id,
            quantity=request.quantity,
        )
        span.set_attribute('booking.id', str(booking.id))

        return BookingEnvelopeResponse(
            message='Booking created successfully',
            booking=BookingResponse.model_validate(booking),
        )


@router.get('', response_model=List[BookingResponse])
@Logger.io
async def list_my_bookings(
    current_user: UserEntity = Depends(require_customer),
    use_case: ListBookingsUseCase = Depends(ListBookingsUseCase.depends),
) -> list[dict[str, Any]]:
    return await use_case.list_customer_bookings(customer_id=current_user.id or 0)


@router.get('/event/{event_id}/bookings', response_model=List[BookingResponse])
@Logger.io
async def list_event_bookings(
    event_id: int,
    current_user: UserEntity = Depends(require_organizer),
    use_case: ListBookingsUseCase = Depends(ListBookingsUseCase.depends),
) -> list[dict[str, Any]]:
    return await use_case.list_event_bookings(
        event_id=event_id, organizer_id=current_user.id or 0
    )


@router.get('/{booking_id}', response_model=BookingResponse)
@Logger.io
async def get_booking(
    booking_id: UUID,
    current_user: UserEntity = Depends(get_current_user),
    use_case: GetBookingUseCase = Depends(GetBookingUseCase.depends),
) -> dict[str, Any]:
    return await use_case.get_booking_with_details(booking_id=booking_id, viewer=current_user)


@router.put('/{booking_id}/cancel', response_model=BookingEnvelopeResponse)
@Logger.io
async def cancel_booking(
    booking_id: UUID,
    current_user: UserEntity = Depends(require_customer),
    use_case: CancelBookingUseCase = Depends(CancelBookingUseCase.depends),
) -> BookingEnvelopeResponse:
    booking = await use_case.cancel_booking(
        booking_id=booking_id, customer_id=current_user.id or 0
    )
    return BookingEnvelopeResponse(
        message='Booking cancelled successfully',
        booking=BookingResponse.model_validate(booking),
    )
