"""Access policy for managing job applications.

Who may act on an application is decided by a declarative table: each role
maps to the affiliation it must share with the job's company and the actions
it may take. Roles absent from the table are denied everything.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

from domain.entities import Actor, Job
from domain.enums import ActorRole, ApplicationAction
from domain.exceptions import AccessDeniedError


class Affiliation(str, Enum):
    """Relationship an actor must have with the job's owner."""

    ANY = "any"
    OWNING_COMPANY = "owning_company"


@dataclass(frozen=True)
class PolicyRule:
    """Actions a role may take, given the required affiliation."""

    affiliation: Affiliation
    actions: frozenset[ApplicationAction]


MANAGE_ACTIONS = frozenset(
    {
        ApplicationAction.VIEW,
        ApplicationAction.ACCEPT,
        ApplicationAction.REJECT,
        ApplicationAction.PROCESS,
    }
)

POLICY: Mapping[ActorRole, PolicyRule] = MappingProxyType(
    {
        ActorRole.COMPANY_ADMIN: PolicyRule(Affiliation.OWNING_COMPANY, MANAGE_ACTIONS),
        ActorRole.COMPANY_CONTACT: PolicyRule(Affiliation.OWNING_COMPANY, MANAGE_ACTIONS),
        ActorRole.JOB_SEEKER: PolicyRule(
            Affiliation.ANY, frozenset({ApplicationAction.APPLY})
        ),
    }
)


def _affiliation_matches(actor: Actor, job: Job, affiliation: Affiliation) -> bool:
    if affiliation == Affiliation.ANY:
        return True
    if affiliation == Affiliation.OWNING_COMPANY:
        return actor.belongs_to_company(job.company_id)
    return False


def is_permitted(actor: Optional[Actor], job: Job, action: ApplicationAction) -> bool:
    """
    Check whether an actor may take an action on an application for a job.

    Args:
        actor: The signed-in actor, or None when unauthenticated
        job: Job the application belongs to
        action: Action being attempted

    Returns:
        True if the policy table allows it, False otherwise
    """
    if actor is None:
        return False

    rule = POLICY.get(actor.role)
    if rule is None or action not in rule.actions:
        return False

    return _affiliation_matches(actor, job, rule.affiliation)


def authorize(actor: Optional[Actor], job: Job, action: ApplicationAction) -> None:
    """
    Enforce the access policy.

    Raises:
        AccessDeniedError: If the actor may not take the action
    """
    if not is_permitted(actor, job, action):
        raise AccessDeniedError(action, actor.id if actor else None)
