"""Domain exceptions raised by the job application workflow.

Each error carries a machine-readable ``code`` and a human-readable
``message`` so the presentation layer can map it to a response without
inspecting exception types one by one.
"""

from typing import Optional
from uuid import UUID

from domain.enums import ApplicationAction, ApplicationStatus


class DomainError(Exception):
    """Base class for job application workflow errors."""

    def __init__(self, code: str, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(message)


class ApplicationNotFoundError(DomainError):
    """Raised when an application id does not resolve."""

    def __init__(self, application_id: UUID) -> None:
        self.application_id = application_id
        super().__init__(
            code="APPLICATION_NOT_FOUND",
            message=f"Job application {application_id} not found",
        )


class JobNotFoundError(DomainError):
    """Raised when a job id does not resolve."""

    def __init__(self, job_id: UUID) -> None:
        self.job_id = job_id
        super().__init__(code="JOB_NOT_FOUND", message=f"Job {job_id} not found")


class AccessDeniedError(DomainError):
    """Raised when an actor is not allowed to perform an action."""

    def __init__(
        self,
        action: ApplicationAction,
        actor_id: Optional[UUID] = None,
        message: str = "You are not authorized to perform this action.",
    ) -> None:
        self.action = action
        self.actor_id = actor_id
        super().__init__(code="FORBIDDEN", message=message)


class InvalidTransitionError(DomainError):
    """Raised when a transition is attempted on an inactive application."""

    def __init__(
        self,
        current_status: ApplicationStatus,
        action: ApplicationAction,
    ) -> None:
        self.current_status = current_status
        self.action = action
        super().__init__(
            code="INVALID_STATE",
            message=f"Cannot {action.value} a job application that is {current_status.value}",
        )


class DuplicateApplicationError(DomainError):
    """Raised when a job seeker applies twice to the same job."""

    def __init__(self, job_id: UUID, job_seeker_id: UUID) -> None:
        self.job_id = job_id
        self.job_seeker_id = job_seeker_id
        super().__init__(
            code="DUPLICATE_APPLICATION",
            message="You have already applied to this job.",
        )
