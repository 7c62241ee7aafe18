"""Domain Entities - Objects with identity."""

from .actor import Actor
from .job import Job
from .job_application import JobApplication

__all__ = ["Actor", "Job", "JobApplication"]
