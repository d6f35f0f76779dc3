"""
Notification job processing (demo trigger)

Renders queued notifications on demand instead of a background worker.
"""

from fastapi import APIRouter, Depends

from event_ticketing.platform.exception.exceptions import ValidationError
from event_ticketing.platform.logging.loguru_io import Logger
from event_ticketing.service.ticketing.app.command.process_notifications_use_case import (
    ProcessNotificationsUseCase,
)
from event_ticketing.service.ticketing.driving_adapter.http_controller.schema.job_schema import (
    JOB_TYPES,
    PROCESSED_MESSAGES,
    JobResult,
    ProcessJobsRequest,
    ProcessJobsResponse,
)


router = APIRouter()


@router.post('/process-jobs', response_model=ProcessJobsResponse)
@Logger.io
async def process_jobs(
    request: ProcessJobsRequest,
    use_case: ProcessNotificationsUseCase = Depends(ProcessNotificationsUseCase.depends),
) -> ProcessJobsResponse:
    job_type = JOB_TYPES.get(request.job_type)
    if job_type is None:
        raise ValidationError('Invalid job type', field='jobType')

    results = await use_case.process(job_type=job_type)
    return ProcessJobsResponse(
        message=PROCESSED_MESSAGES[job_type],
        processed=len(results),
        results=[JobResult(**result) for result in results],
    )
