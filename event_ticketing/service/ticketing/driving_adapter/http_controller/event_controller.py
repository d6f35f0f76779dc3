from typing import List, Optional

from fastapi import APIRouter, Depends, status

from event_ticketing.platform.logging.loguru_io import Logger
from event_ticketing.service.ticketing.app.command.create_event_use_case import (
    CreateEventUseCase,
)
from event_ticketing.service.ticketing.app.command.delete_event_use_case import (
    DeleteEventUseCase,
)
from event_ticketing.service.ticketing.app.command.publish_event_use_case import (
    PublishEventUseCase,
)
from event_ticketing.service.ticketing.app.command.update_event_use_case import (
    UpdateEventUseCase,
)
from event_ticketing.service.ticketing.app.query.get_event_use_case import GetEventUseCase
from event_ticketing.service.ticketing.app.query.list_events_use_case import ListEventsUseCase
from event_ticketing.service.ticketing.domain.entity.user_entity import UserEntity
from event_ticketing.service.ticketing.domain.enum.event_status import EventStatus
from event_ticketing.service.ticketing.driving_adapter.http_controller.auth.role_auth import (
    require_organizer,
)
from event_ticketing.service.ticketing.driving_adapter.http_controller.schema.base_schema import (
    MessageResponse,
)
from event_ticketing.service.ticketing.driving_adapter.http_controller.schema.event_schema import (
    EventCreateRequest,
    EventEnvelopeResponse,
    EventResponse,
    EventUpdateRequest,
)


router = APIRouter()


@router.get('', response_model=List[EventResponse])
@Logger.io
async def list_events(
    status: EventStatus = EventStatus.PUBLISHED,
    category: Optional[str] = None,
    use_case: ListEventsUseCase = Depends(ListEventsUseCase.depends),
) -> List[EventResponse]:
    events = await use_case.list_events(status=status, category=category)
    return [EventResponse.model_validate(event) for event in events]


@router.get('/{event_id}', response_model=EventResponse)
@Logger.io
async def get_event(
    event_id: int,
    use_case: GetEventUseCase = Depends(GetEventUseCase.depends),
) -> EventResponse:
    event = await use_case.get_by_id(event_id=event_id)
    return EventResponse.model_validate(event)


@router.post('', response_model=EventEnvelopeResponse, status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_event(
    request: EventCreateRequest,
    current_user: UserEntity = Depends(require_organizer),
    use_case: CreateEventUseCase = Depends(CreateEventUseCase.depends),
) -> EventEnvelopeResponse:
    event = await use_case.create_event(
        organizer_id=current_user.id or 0,
        title=request.title,
        description=request.description,
        date=request.date,
        location=request.location,
        total_tickets=request.total_tickets,
        ticket_price=request.ticket_price,
        category=request.category,
    )
    return EventEnvelopeResponse(
        message='Event created successfully', event=EventResponse.model_validate(event)
    )


@router.put('/{event_id}', response_model=EventEnvelopeResponse)
@Logger.io
async def update_event(
    event_id: int,
    request: EventUpdateRequest,
    current_user: UserEntity = Depends(require_organizer),
    use_case: UpdateEventUseCase = Depends(UpdateEventUseCase.depends),
) -> EventEnvelopeResponse:
    event = await use_case.update_event(
        event_id=event_id, organizer=current_user, changes=request.changes()
    )
    return EventEnvelopeResponse(
        message='Event updated successfully', event=EventResponse.model_validate(event)
    )


@router.delete('/{event_id}', response_model=MessageResponse)
@Logger.io
async def delete_event(
    event_id: int,
    current_user: UserEntity = Depends(require_organizer),
    use_case: DeleteEventUseCase = Depends(DeleteEventUseCase.depends),
) -> MessageResponse:
    await use_case.delete_event(event_id=event_id, organizer=current_user)
    return MessageResponse(message='Event deleted successfully')


@router.post('/{event_id}/publish', response_model=EventEnvelopeResponse)
@Logger.io
async def publish_event(
    event_id: int,
    current_user: UserEntity = Depends(require_organizer),
    use_case: PublishEventUseCase = Depends(PublishEventUseCase.depends),
) -> EventEnvelopeResponse:
    event = await use_case.publish_event(event_id=event_id, organizer=current_user)
    return EventEnvelopeResponse(
        message='Event published successfully', event=EventResponse.model_validate(event)
    )
