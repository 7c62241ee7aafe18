"""Job application state machine.

Transitions are one-way out of ``active``:

- active -> accepted   (accept)
- active -> rejected   (reject)
- active -> processing (process)

Every other (status, action) pair is invalid, so accepted, rejected and
processing applications are terminal.
"""

from types import MappingProxyType
from typing import Mapping

from domain.enums import ApplicationAction, ApplicationStatus
from domain.exceptions import InvalidTransitionError


TRANSITIONS: Mapping[tuple[ApplicationStatus, ApplicationAction], ApplicationStatus] = (
    MappingProxyType(
        {
            (ApplicationStatus.ACTIVE, ApplicationAction.ACCEPT): ApplicationStatus.ACCEPTED,
            (ApplicationStatus.ACTIVE, ApplicationAction.REJECT): ApplicationStatus.REJECTED,
            (ApplicationStatus.ACTIVE, ApplicationAction.PROCESS): ApplicationStatus.PROCESSING,
        }
    )
)


def next_status(
    current: ApplicationStatus, action: ApplicationAction
) -> ApplicationStatus:
    """
    Resolve the status an action moves an application to.

    Args:
        current: Status the application is in now
        action: Transition being attempted

    Returns:
        The status after the transition

    Raises:
        InvalidTransitionError: If the pair is not in the transition table
    """
    try:
        return TRANSITIONS[(current, action)]
    except KeyError:
        raise InvalidTransitionError(current, action) from None


def allowed_actions(current: ApplicationStatus) -> list[ApplicationAction]:
    """List the transitions available from a status."""
    return [action for (status, action) in TRANSITIONS if status == current]


def is_terminal(status: ApplicationStatus) -> bool:
    """Check whether no transition leaves a status."""
    return not allowed_actions(status)
