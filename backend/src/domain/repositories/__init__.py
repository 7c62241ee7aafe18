"""Domain Repository Interfaces - Abstract definitions."""

from .job_application_repository import IJobApplicationRepository
from .job_repository import IJobRepository
from .actor_repository import IActorRepository

__all__ = ["IJobApplicationRepository", "IJobRepository", "IActorRepository"]
