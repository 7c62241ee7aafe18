"""Job application entity: a job seeker's application to a job."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from domain.entities.job import Job
from domain.enums import ApplicationAction, ApplicationStatus
from domain.state_machine import next_status


@dataclass
class JobApplication:
    """
    Entity representing a job seeker's application to a job.

    This is a mutable entity with identity (id). Its status only moves
    through accept(), reject() and process(), each of which is valid only
    while the application is active.
    """

    job: Job
    job_seeker_id: UUID
    id: UUID = field(default_factory=uuid4)
    status: ApplicationStatus = ApplicationStatus.ACTIVE
    reason_for_rejection: Optional[str] = None
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        """Validate the rejection reason only accompanies a rejection."""
        if self.reason_for_rejection is not None and self.status != ApplicationStatus.REJECTED:
            raise ValueError("Only rejected applications can carry a rejection reason")

    @property
    def job_id(self) -> UUID:
        return self.job.id

    @property
    def company_id(self) -> UUID:
        return self.job.company_id

    def is_active(self) -> bool:
        """Check if the application can still be transitioned."""
        return self.status == ApplicationStatus.ACTIVE

    def accept(self) -> None:
        """Accept the application."""
        self.status = next_status(self.status, ApplicationAction.ACCEPT)
        self._mark_updated()

    def reject(self, reason_for_rejection: Optional[str] = None) -> None:
        """
        Reject the application.

        Args:
            reason_for_rejection: Free-text reason, stored verbatim
        """
        self.status = next_status(self.status, ApplicationAction.REJECT)
        self.reason_for_rejection = reason_for_rejection
        self._mark_updated()

    def process(self) -> None:
        """Start processing the application."""
        self.status = next_status(self.status, ApplicationAction.PROCESS)
        self._mark_updated()

    def _mark_updated(self) -> None:
        """Mark the entity as updated."""
        self.updated_at = datetime.utcnow()

    def __str__(self) -> str:
        return f"JobApplication(id={self.id}, status={self.status.value})"
