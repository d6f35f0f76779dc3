from typing import Any, Dict, List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from event_ticketing.platform.config.di import Container
from event_ticketing.platform.exception.exceptions import NotFoundError
from event_ticketing.platform.logging.loguru_io import Logger
from event_ticketing.service.ticketing.app.interface.i_booking_query_repo import IBookingQueryRepo
from event_ticketing.service.ticketing.app.interface.i_event_query_repo import IEventQueryRepo


class ListBookingsUseCase:
    def __init__(self, booking_query_repo: IBookingQueryRepo, event_query_repo: IEventQueryRepo):
        self.booking_query_repo = booking_query_repo
        self.event_query_repo = event_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        booking_query_repo: IBookingQueryRepo = Depends(Provide[Container.booking_query_repo]),
        event_query_repo: IEventQueryRepo = Depends(Provide[Container.event_query_repo]),
    ) -> Self:
        return cls(booking_query_repo=booking_query_repo, event_query_repo=event_query_repo)

    @Logger.io
    async def list_customer_bookings(self, *, customer_id: int) -> List[Dict[str, Any]]:
        return await self.booking_query_repo.list_by_customer(customer_id=customer_id)

    @Logger.io
    async def list_event_bookings(
        self, *, event_id: int, organizer_id: int
    ) -> List[Dict[str, Any]]:
        event = await self.event_query_repo.get_by_id(event_id=event_id)
        if event is None:
            raise NotFoundError('Event not found')

        event.validate_owner(organizer_id, action='view bookings for')
        return await self.booking_query_repo.list_by_event(event_id=event_id)
