"""Job endpoints used by job seekers."""

from uuid import UUID
from fastapi import APIRouter, Depends, status

from application.use_cases import ApplicationLifecycleService
from domain.entities import Actor
from presentation.api.v1.dependencies import get_current_actor, get_lifecycle_service
from presentation.schemas import ErrorResponse, JobApplicationResponse

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.post(
    "/{job_id}/applications",
    response_model=JobApplicationResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse, "description": "Already applied"},
    },
)
async def apply_to_job(
    job_id: UUID,
    actor: Actor = Depends(get_current_actor),
    service: ApplicationLifecycleService = Depends(get_lifecycle_service),
) -> JobApplicationResponse:
    """Apply to a job as the signed-in job seeker."""
    application = await service.apply(job_id, actor)
    return JobApplicationResponse.from_entity(application)
