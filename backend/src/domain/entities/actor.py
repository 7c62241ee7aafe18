"""Actor entity: the signed-in user an operation runs on behalf of."""

from dataclasses import dataclass, field
from typing import Optional
from uuid import UUID, uuid4

from domain.enums import ActorRole


@dataclass
class Actor:
    """
    Entity representing a user acting on the job board.

    Company roles are affiliated with a company, agency roles with an agency.
    Job seekers carry no affiliation.
    """

    role: ActorRole
    id: UUID = field(default_factory=uuid4)
    company_id: Optional[UUID] = None
    agency_id: Optional[UUID] = None
    email: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate role and affiliation agree."""
        if self.role.is_company_role and self.company_id is None:
            raise ValueError(f"{self.role.value} must belong to a company")
        if self.role.is_agency_role and self.agency_id is None:
            raise ValueError(f"{self.role.value} must belong to an agency")

    def belongs_to_company(self, company_id: UUID) -> bool:
        """Check if the actor is staff of the given company."""
        return self.role.is_company_role and self.company_id == company_id

    def is_job_seeker(self) -> bool:
        return self.role == ActorRole.JOB_SEEKER

    def __str__(self) -> str:
        return f"Actor(id={self.id}, role={self.role.value})"
