"""Job entity representing a posting owned by a company."""

from dataclasses import dataclass, field
from uuid import UUID, uuid4


@dataclass
class Job:
    """Entity representing a job posted by a company."""

    company_id: UUID
    title: str = ""
    id: UUID = field(default_factory=uuid4)

    def __str__(self) -> str:
        return f"Job(id={self.id}, title={self.title!r})"
