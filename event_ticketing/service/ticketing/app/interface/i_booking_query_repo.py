from abc import ABC, abstractmethod
from typing import List, Optional, Sequence
from uuid import UUID

from event_ticketing.service.ticketing.domain.entity.booking_entity import BookingStatus


class IBookingQueryRepo(ABC):
    """
    Booking read side.

    The *_with_details methods return plain dicts with `event` and `customer`
    summaries embedded, ready for the HTTP response schemas.
    """

    @abstractmethod
    async def get_by_id_with_details(self, *, booking_id: UUID) -> Optional[dict]:
        pass

    @abstractmethod
    async def list_by_customer(self, *, customer_id: int) -> List[dict]:
        pass

    @abstractmethod
    async def list_by_event(
        self, *, event_id: int, statuses: Optional[Sequence[BookingStatus]] = None
    ) -> List[dict]:
        pass
