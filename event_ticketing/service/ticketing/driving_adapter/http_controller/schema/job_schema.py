from typing import List

from pydantic import ConfigDict

from event_ticketing.service.ticketing.domain.notification.notification import (
    NotificationJobType,
)
from event_ticketing.service.ticketing.driving_adapter.http_controller.schema.base_schema import (
    CamelModel,
)


# Public job names accepted by /process-jobs
JOB_TYPES: dict[str, NotificationJobType] = {
    'booking-confirmations': NotificationJobType.BOOKING_CONFIRMATION,
    'event-notifications': NotificationJobType.EVENT_UPDATE,
}

PROCESSED_MESSAGES: dict[NotificationJobType, str] = {
    NotificationJobType.BOOKING_CONFIRMATION: 'Booking confirmations processed',
    NotificationJobType.EVENT_UPDATE: 'Event notifications processed',
}


class ProcessJobsRequest(CamelModel):
    model_config = ConfigDict(json_schema_extra={'example': {'jobType': 'booking-confirmations'}})

    job_type: str


class JobResult(CamelModel):
    success: bool
    message: str


class ProcessJobsResponse(CamelModel):
    message: str
    processed: int
    results: List[JobResult]
