from typing import Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from event_ticketing.platform.config.di import Container
from event_ticketing.platform.exception.exceptions import AuthorizationError, NotFoundError
from event_ticketing.platform.logging.loguru_io import Logger
from event_ticketing.service.ticketing.app.interface.i_booking_query_repo import IBookingQueryRepo
from event_ticketing.service.ticketing.domain.entity.user_entity import UserEntity


class GetBookingUseCase:
    def __init__(self, booking_query_repo: IBookingQueryRepo):
        self.booking_query_repo = booking_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        booking_query_repo: IBookingQueryRepo = Depends(Provide[Container.booking_query_repo]),
    ) -> Self:
        return cls(booking_query_repo=booking_query_repo)

    @Logger.io
    async def get_booking_with_details(self, *, booking_id: UUID, viewer: UserEntity) -> dict:
        """
        Booking with its event and customer summaries.

        Readable by the customer who made it and by the organizer of its event.
        """
        booking = await self.booking_query_repo.get_by_id_with_details(booking_id=booking_id)

        if not booking:
            raise NotFoundError('Booking not found')

        is_customer = viewer.is_customer and booking['customer_id'] == viewer.id
        is_organizer = (
            viewer.is_organizer
            and booking['event'] is not None
            and booking['event']['organizer_id'] == viewer.id
        )
        if not (is_customer or is_organizer):
            raise AuthorizationError('Not authorized to view this booking')

        return booking
