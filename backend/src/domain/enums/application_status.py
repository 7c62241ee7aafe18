"""Job application statuses and the actions that move between them."""

from enum import Enum


class ApplicationStatus(str, Enum):
    """Lifecycle status of a job application."""

    ACTIVE = "active"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    PROCESSING = "processing"

    def __str__(self) -> str:
        return self.value


class ApplicationAction(str, Enum):
    """Operations an actor can perform on a job application."""

    VIEW = "view"
    ACCEPT = "accept"
    REJECT = "reject"
    PROCESS = "process"
    APPLY = "apply"

    def __str__(self) -> str:
        return self.value
