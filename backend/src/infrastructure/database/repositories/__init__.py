"""Repository implementations."""

from .sqlalchemy_job_application_repository import SQLAlchemyJobApplicationRepository
from .sqlalchemy_job_repository import SQLAlchemyJobRepository
from .sqlalchemy_actor_repository import SQLAlchemyActorRepository

__all__ = [
    "SQLAlchemyJobApplicationRepository",
    "SQLAlchemyJobRepository",
    "SQLAlchemyActorRepository",
]
