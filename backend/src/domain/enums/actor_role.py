"""Roles a signed-in user can hold on the job board."""

from enum import Enum


class ActorRole(str, Enum):
    """Role of an actor, grouped by the kind of organisation it belongs to."""

    # Job seekers
    JOB_SEEKER = "job_seeker"

    # Company staff
    COMPANY_CONTACT = "company_contact"
    COMPANY_ADMIN = "company_admin"

    # Agency staff
    AGENCY_ADMIN = "agency_admin"
    JOB_DEVELOPER = "job_developer"
    CASE_MANAGER = "case_manager"

    @property
    def is_company_role(self) -> bool:
        return self in (ActorRole.COMPANY_CONTACT, ActorRole.COMPANY_ADMIN)

    @property
    def is_agency_role(self) -> bool:
        return self in (
            ActorRole.AGENCY_ADMIN,
            ActorRole.JOB_DEVELOPER,
            ActorRole.CASE_MANAGER,
        )

    def __str__(self) -> str:
        return self.value
