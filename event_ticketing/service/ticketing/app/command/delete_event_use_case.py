from typing import Self

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
from event_ticketing.service.ticketing.domain.entity.user_entity import UserEntity
from event_ticketing.service.ticketing.domain.notification.notification import (
    EventUpdateNotification,
)


class DeleteEventUseCase:
    """
    Organizer removes an owned event.

    Bookings are kept as history; cancelling one later skips the inventory
    restore because the event row is gone.
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
    async def delete_event(self, *, event_id: int, organizer: UserEntity) -> None:
        async with self.event_lock.hold(event_id):
            async with self.uow:
                event = await self.uow.event_command_repo.get_for_update(event_id=event_id)
                if event is None:
                    raise NotFoundError('Event not found')

                event.validate_owner(organizer.id, action='delete')
                await self.uow.event_command_repo.delete(event_id=event_id)
                await self.uow.commit()

        Logger.base.info(f'🗑️ [DELETE_EVENT] Event {event_id} deleted by organizer {organizer.id}')
        await self.notification_queue.enqueue(
            EventUpdateNotification.from_event(
                event, organizer_name=organizer.name, changes='Event cancelled by organizer'
            )
        )
