"""Job application endpoints: view, accept, reject, process and list."""

from typing import Optional
from uuid import UUID
from fastapi import APIRouter, Body, Depends, HTTPException, Query, Response, status

from application.use_cases import ApplicationLifecycleService, OperationResult
from domain.entities import Actor
from presentation.api.v1.dependencies import get_current_actor, get_lifecycle_service
from presentation.schemas import (
    ApplicationListResponse,
    ApplicationOutcomeResponse,
    ErrorResponse,
    JobApplicationResponse,
    RejectApplicationRequest,
)

router = APIRouter(prefix="/applications", tags=["job applications"])

JOB_SEEKER_LIST_TYPE = "job_seeker-default"

ERROR_RESPONSES = {
    401: {"model": ErrorResponse, "description": "Sign-in required"},
    403: {"model": ErrorResponse, "description": "Not allowed to manage this application"},
    404: {"model": ErrorResponse, "description": "Application not found"},
}

TRANSITION_RESPONSES = {
    **ERROR_RESPONSES,
    409: {
        "model": ApplicationOutcomeResponse,
        "description": "Application is no longer active; nothing was changed",
    },
}


def _outcome_response(result: OperationResult, response: Response) -> ApplicationOutcomeResponse:
    if not result.succeeded:
        response.status_code = status.HTTP_409_CONFLICT
    return ApplicationOutcomeResponse.from_outcome(result.application, result.outcome)


@router.get("/list", response_model=ApplicationListResponse)
async def list_applications(
    list_type: str = Query(..., alias="type", description="Listing flavour, e.g. job_seeker-default"),
    entity_id: UUID = Query(..., description="Job seeker whose applications to list"),
    service: ApplicationLifecycleService = Depends(get_lifecycle_service),
) -> ApplicationListResponse:
    """
    List every application a job seeker has made.

    Meant for a job seeker's own "my applications" page, but no sign-in is
    required and nothing ties `entity_id` to the caller: anyone who knows a
    job seeker's id can read that seeker's applications. Only statuses,
    jobs and rejection reasons are exposed.
    """
    if list_type != JOB_SEEKER_LIST_TYPE:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unsupported list type: {list_type}",
        )
    
    applications = await service.list_for_job_seeker(entity_id)
    return ApplicationListResponse(
        job_seeker_id=entity_id,
        applications=[JobApplicationResponse.from_entity(app) for app in applications],
    )


@router.get(
    "/{application_id}",
    response_model=JobApplicationResponse,
    responses=ERROR_RESPONSES,
)
async def show_application(
    application_id: UUID,
    actor: Actor = Depends(get_current_actor),
    service: ApplicationLifecycleService = Depends(get_lifecycle_service),
) -> JobApplicationResponse:
    """Show a job application to staff of the company that posted the job."""
    application = await service.view(application_id, actor)
    return JobApplicationResponse.from_entity(application)


@router.patch(
    "/{application_id}/accept",
    response_model=ApplicationOutcomeResponse,
    responses=TRANSITION_RESPONSES,
)
async def accept_application(
    application_id: UUID,
    response: Response,
    actor: Actor = Depends(get_current_actor),
    service: ApplicationLifecycleService = Depends(get_lifecycle_service),
) -> ApplicationOutcomeResponse:
    """Accept an active job application."""
    result = await service.accept(application_id, actor)
    return _outcome_response(result, response)


@router.patch(
    "/{application_id}/reject",
    response_model=ApplicationOutcomeResponse,
    responses=TRANSITION_RESPONSES,
)
async def reject_application(
    application_id: UUID,
    response: Response,
    payload: Optional[RejectApplicationRequest] = Body(None),
    actor: Actor = Depends(get_current_actor),
    service: ApplicationLifecycleService = Depends(get_lifecycle_service),
) -> ApplicationOutcomeResponse:
    """Reject an active job application, optionally recording why."""
    reason = payload.reason_for_rejection if payload else None
    result = await service.reject(application_id, actor, reason)
    return _outcome_response(result, response)


@router.patch(
    "/{application_id}/process",
    response_model=ApplicationOutcomeResponse,
    responses=TRANSITION_RESPONSES,
)
async def process_application(
    application_id: UUID,
    response: Response,
    actor: Actor = Depends(get_current_actor),
    service: ApplicationLifecycleService = Depends(get_lifecycle_service),
) -> ApplicationOutcomeResponse:
    """Start processing an active job application."""
    result = await service.process(application_id, actor)
    return _outcome_response(result, response)
