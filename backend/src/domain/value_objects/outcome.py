"""Outcome of a lifecycle operation: a flash message and where to go next."""

from dataclasses import dataclass
from enum import Enum
from uuid import UUID

from domain.enums import FlashCategory


class RedirectKind(str, Enum):
    """Pages an operation can send the caller to."""

    JOB = "job"
    APPLICATION = "application"
    LOGIN = "login"


@dataclass(frozen=True)
class RedirectTarget:
    """
    Immutable value object naming the page to redirect to.

    Attributes:
        kind: Which page family the target belongs to
        resource_id: Job or application id (None for the login page)
    """

    kind: RedirectKind
    resource_id: UUID | None = None

    def __post_init__(self) -> None:
        """Validate that resource pages carry an id."""
        if self.kind != RedirectKind.LOGIN and self.resource_id is None:
            raise ValueError(f"Redirect to {self.kind.value} page requires an id")

    @classmethod
    def job(cls, job_id: UUID) -> "RedirectTarget":
        return cls(kind=RedirectKind.JOB, resource_id=job_id)

    @classmethod
    def application(cls, application_id: UUID) -> "RedirectTarget":
        return cls(kind=RedirectKind.APPLICATION, resource_id=application_id)

    @classmethod
    def login(cls) -> "RedirectTarget":
        return cls(kind=RedirectKind.LOGIN)

    def to_path(self, login_url: str = "/login") -> str:
        """Render the target as an application path."""
        if self.kind == RedirectKind.JOB:
            return f"/jobs/{self.resource_id}"
        if self.kind == RedirectKind.APPLICATION:
            return f"/applications/{self.resource_id}"
        return login_url


@dataclass(frozen=True)
class Outcome:
    """
    Immutable value object describing what the caller should show next.

    Attributes:
        succeeded: Whether the operation changed the application
        category: Flash message category
        message: Flash message text
        redirect: Page to send the caller to
    """

    succeeded: bool
    category: FlashCategory
    message: str
    redirect: RedirectTarget

    def __post_init__(self) -> None:
        if not self.message or not self.message.strip():
            raise ValueError("Outcome message cannot be empty")

    def __str__(self) -> str:
        return f"[{self.category.value}] {self.message}"
