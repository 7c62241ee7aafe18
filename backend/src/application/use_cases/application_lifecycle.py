"""Job application lifecycle: viewing, transitioning and listing applications."""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from domain.access_policy import authorize
from domain.entities import Actor, JobApplication
from domain.enums import ApplicationAction, FlashCategory
from domain.exceptions import (
    ApplicationNotFoundError,
    DuplicateApplicationError,
    InvalidTransitionError,
    JobNotFoundError,
)
from domain.repositories import IJobApplicationRepository, IJobRepository
from domain.value_objects import Outcome, RedirectTarget
from infrastructure.config import get_logger


ACCEPTED_MESSAGE = "Job application accepted."
REJECTED_MESSAGE = "Job application rejected."
PROCESSING_MESSAGE = "Job application processing."
INACTIVE_MESSAGE = "Invalid action on inactive job application."
CANNOT_REJECT_MESSAGE = "Cannot reject an inactive job application."

SUCCESS_FLASH = {
    ApplicationAction.ACCEPT: (FlashCategory.INFO, ACCEPTED_MESSAGE),
    ApplicationAction.REJECT: (FlashCategory.NOTICE, REJECTED_MESSAGE),
    ApplicationAction.PROCESS: (FlashCategory.INFO, PROCESSING_MESSAGE),
}

FAILURE_MESSAGES = {
    ApplicationAction.ACCEPT: INACTIVE_MESSAGE,
    ApplicationAction.REJECT: CANNOT_REJECT_MESSAGE,
    ApplicationAction.PROCESS: INACTIVE_MESSAGE,
}


@dataclass(frozen=True)
class OperationResult:
    """Application state after a transition attempt, plus what to show the caller."""

    application: JobApplication
    outcome: Outcome

    @property
    def succeeded(self) -> bool:
        return self.outcome.succeeded


class ApplicationLifecycleService:
    """
    Owns the job application state machine and the policy gating it.

    Every operation takes the acting user explicitly. Lookups happen first
    (NotFound), then the access policy (Forbidden), then the status
    precondition (InvalidState). NotFound and Forbidden propagate as domain
    exceptions; an invalid state is reported through the returned outcome.
    """
    
    def __init__(
        self,
        application_repository: IJobApplicationRepository,
        job_repository: IJobRepository,
    ):
        self.application_repo = application_repository
        self.job_repo = job_repository
        self.logger = get_logger(self.__class__.__name__)
    
    async def view(self, application_id: UUID, actor: Actor) -> JobApplication:
        """
        Fetch an application for display.
        
        Raises:
            ApplicationNotFoundError: If the id does not resolve
            AccessDeniedError: If the actor may not view it
        """
        application = await self._load(application_id)
        authorize(actor, application.job, ApplicationAction.VIEW)
        return application
    
    async def accept(self, application_id: UUID, actor: Actor) -> OperationResult:
        """Accept an active application."""
        return await self._transition(application_id, actor, ApplicationAction.ACCEPT)
    
    async def reject(
        self,
        application_id: UUID,
        actor: Actor,
        reason_for_rejection: Optional[str] = None,
    ) -> OperationResult:
        """
        Reject an active application.
        
        Args:
            application_id: Application to reject
            actor: Acting user
            reason_for_rejection: Free-text reason, stored verbatim (may be empty or None)
        """
        return await self._transition(
            application_id,
            actor,
            ApplicationAction.REJECT,
            reason_for_rejection=reason_for_rejection,
        )
    
    async def process(self, application_id: UUID, actor: Actor) -> OperationResult:
        """Move an active application into processing."""
        return await self._transition(application_id, actor, ApplicationAction.PROCESS)
    
    async def list_for_job_seeker(self, job_seeker_id: UUID) -> list[JobApplication]:
        """Return every application made by a job seeker, across all jobs."""
        applications = await self.application_repo.list_by_job_seeker(job_seeker_id)
        self.logger.info(
            f"Listed {len(applications)} applications for job seeker {job_seeker_id}"
        )
        return applications
    
    async def apply(self, job_id: UUID, actor: Actor) -> JobApplication:
        """
        Create an active application from a job seeker to a job.
        
        Raises:
            JobNotFoundError: If the job does not exist
            AccessDeniedError: If the actor is not a job seeker
            DuplicateApplicationError: If the job seeker already applied
        """
        job = await self.job_repo.get_by_id(job_id)
        if job is None:
            raise JobNotFoundError(job_id)
        
        authorize(actor, job, ApplicationAction.APPLY)
        
        if await self.application_repo.exists_for_job_seeker(job.id, actor.id):
            raise DuplicateApplicationError(job.id, actor.id)
        
        application = await self.application_repo.create(
            JobApplication(job=job, job_seeker_id=actor.id)
        )
        self.logger.info(f"✅ Job seeker {actor.id} applied to job {job.id}")
        return application
    
    async def _load(self, application_id: UUID) -> JobApplication:
        application = await self.application_repo.get_by_id(application_id)
        if application is None:
            self.logger.warning(f"⚠️ Job application not found: {application_id}")
            raise ApplicationNotFoundError(application_id)
        return application
    
    async def _transition(
        self,
        application_id: UUID,
        actor: Actor,
        action: ApplicationAction,
        reason_for_rejection: Optional[str] = None,
    ) -> OperationResult:
        application = await self._load(application_id)
        authorize(actor, application.job, action)
        
        expected_status = application.status
        log_context = {
            "actor_id": actor.id,
            "application_id": application.id,
            "action": action.value,
        }
        self.logger.info(
            f"🔄 Attempting {action.value} on {application} ({expected_status.value})",
            extra=log_context,
        )
        
        try:
            if action == ApplicationAction.ACCEPT:
                application.accept()
            elif action == ApplicationAction.REJECT:
                application.reject(reason_for_rejection)
            else:
                application.process()
        except InvalidTransitionError as e:
            self.logger.warning(f"⚠️ {e.message}", extra=log_context)
            return self._failure(application, action)
        
        if not await self.application_repo.transition_status(application, expected_status):
            # Another request moved it out of the expected status first.
            current = await self._load(application_id)
            self.logger.warning(
                f"⚠️ Concurrent update: {current} is no longer {expected_status.value}",
                extra=log_context,
            )
            return self._failure(current, action)
        
        self.logger.info(f"✅ {application} after {action.value}", extra=log_context)
        category, message = SUCCESS_FLASH[action]
        return OperationResult(
            application=application,
            outcome=Outcome(
                succeeded=True,
                category=category,
                message=message,
                redirect=RedirectTarget.job(application.job_id),
            ),
        )
    
    def _failure(self, application: JobApplication, action: ApplicationAction) -> OperationResult:
        if action == ApplicationAction.REJECT:
            redirect = RedirectTarget.application(application.id)
        else:
            redirect = RedirectTarget.job(application.job_id)
        
        return OperationResult(
            application=application,
            outcome=Outcome(
                succeeded=False,
                category=FlashCategory.ALERT,
                message=FAILURE_MESSAGES[action],
                redirect=redirect,
            ),
        )
