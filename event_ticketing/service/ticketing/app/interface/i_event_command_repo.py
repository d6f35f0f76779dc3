from abc import ABC, abstractmethod
from typing import Optional

from event_ticketing.service.ticketing.domain.entity.event_entity import EventEntity


class IEventCommandRepo(ABC):
    """Event Command Repository - writes, including the ticket inventory counters"""

    @abstractmethod
    async def create(self, *, event: EventEntity) -> EventEntity:
        pass

    @abstractmethod
    async def get_for_update(self, *, event_id: int) -> Optional[EventEntity]:
        """Load an event and lock its row until the surrounding transaction ends"""
        pass

    @abstractmethod
    async def update(self, *, event: EventEntity) -> EventEntity:
        pass

    @abstractmethod
    async def delete(self, *, event_id: int) -> bool:
        pass

    @abstractmethod
    async def try_reserve_tickets(self, *, event_id: int, quantity: int) -> bool:
        """
        Atomically take `quantity` tickets from a published event.

        Returns False (and changes nothing) when the event is missing, not
        published, or has fewer than `quantity` tickets left.
        """
        pass

    @abstractmethod
    async def release_tickets(self, *, event_id: int, quantity: int) -> bool:
        """
        Atomically return `quantity` tickets to an event.

        Returns False when the event is missing or the release would push
        available tickets above the total.
        """
        pass
