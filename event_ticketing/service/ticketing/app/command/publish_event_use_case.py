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
from event_ticketing.service.ticketing.domain.entity.event_entity import EventEntity
from event_ticketing.service.ticketing.domain.entity.user_entity import UserEntity
from event_ticketing.service.ticketing.domain.notification.notification import (
    EventUpdateNotification,
)


class PublishEventUseCase:
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
    async def publish_event(self, *, event_id: int, organizer: UserEntity) -> EventEntity:
        async with self.event_lock.hold(event_id):
            async with self.uow:
                event = await self.uow.event_command_repo.get_for_update(event_id=event_id)
                if event is None:
                    raise NotFoundError('Event not found')

                event.validate_owner(organizer.id, action='publish')
                published = await self.uow.event_command_repo.update(event=event.publish())
                await self.uow.commit()

        Logger.base.info(f'📣 [PUBLISH_EVENT] Event {event_id} is now published')
        await self.notification_queue.enqueue(
            EventUpdateNotification.from_event(
                published, organizer_name=organizer.name, changes='Event published'
            )
        )
        return published
