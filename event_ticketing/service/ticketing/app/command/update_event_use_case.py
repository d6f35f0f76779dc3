from typing import Any, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from event_ticketing.platform.config.di import Container
from event_ticketing.platform.database.unit_of_work import AbstractUnitOfWork
from event_ticketing.platform.exception.exceptions import NotFoundError
from event_ticketing.platform.logging.loguru_io import Logger
from event_ticketing.platform.state.keyed_lock import KeyedLock
from event_ticketing.service.ticketing.app.interface.i_notification_queue import (
    INotificationQueue,
)
from event_ticketing.service.ticketing.domain.entity.event_entity import EventEntity
from event_ticketing.service.ticketing.domain.entity.user_entity import UserEntity
from event_ticketing.service.ticketing.domain.notification.notification import (
    EventUpdateNotification,
)


class UpdateEventUseCase:
    """
    Organizer edits an owned event.

    Runs under the event's lock with the row loaded FOR UPDATE, so a resize
    never interleaves with a booking or a cancellation of the same event.
    Customers holding active bookings are notified afterwards.
    """

    def __init__(
        self,
        *,
        uow: AbstractUnitOfWork,
        event_lock: KeyedLock,
        notification_queue: INotificationQueue,
    ) -> None:
        self.uow = uow
        self.event_lock = event_lock
        self.notification_queue = notification_queue

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work]),
        event_lock: KeyedLock = Depends(Provide[Container.event_lock]),
        notification_queue: INotificationQueue = Depends(
            Provide[Container.notification_queue]
        ),
    ) -> Self:
        return cls(uow=uow, event_lock=event_lock, notification_queue=notification_queue)

    @Logger.io
    async def update_event(
        self, *, event_id: int, organizer: UserEntity, changes: dict[str, Any]
    ) -> EventEntity:
        async with self.event_lock.hold(event_id):
            async with self.uow:
                event = await self.uow.event_command_repo.get_for_update(event_id=event_id)
                if event is None:
                    raise NotFoundError('Event not found')

                event.validate_owner(organizer.id, action='update')
                updated = await self.uow.event_command_repo.update(
                    event=event.apply_changes(changes)
                )
                await self.uow.commit()

        summary = EventEntity.describe_changes(changes)
        Logger.base.info(f'✏️ [UPDATE_EVENT] Event {event_id}: {summary}')

        await self.notification_queue.enqueue(
            EventUpdateNotification.from_event(
                updated, organizer_name=organizer.name, changes=summary
            )
        )
        return updated
