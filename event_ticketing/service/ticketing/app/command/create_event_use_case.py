from datetime import datetime
from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from event_ticketing.platform.config.di import Container
from event_ticketing.platform.logging.loguru_io import Logger
from event_ticketing.service.ticketing.app.interface.i_event_command_repo import (
    IEventCommandRepo,
)
from event_ticketing.service.ticketing.domain.entity.event_entity import EventEntity


class CreateEventUseCase:
    """Organizer creates a draft event; all tickets start available."""

    def __init__(self, *, event_command_repo: IEventCommandRepo) -> None:
        self.event_command_repo = event_command_repo

    @classmethod
    @inject
    def depends(
        cls,
        event_command_repo: IEventCommandRepo = Depends(Provide[Container.event_command_repo]),
    ) -> Self:
        return cls(event_command_repo=event_command_repo)

    @Logger.io
    async def create_event(
        self,
        *,
        organizer_id: int,
        title: str,
        description: str,
        date: datetime,
        location: str,
        total_tickets: int,
        ticket_price: float,
        category: Optional[str] = None,
    ) -> EventEntity:
        event = EventEntity.create(
            title=title,
            description=description,
            organizer_id=organizer_id,
            date=date,
            location=location,
            total_tickets=total_tickets,
            ticket_price=ticket_price,
            category=category,
        )

        saved = await self.event_command_repo.create(event=event)
        Logger.base.info(
            f'🎫 [CREATE_EVENT] Event {saved.id} created by organizer {organizer_id} '
            f'with {saved.total_tickets} tickets'
        )
        return saved
