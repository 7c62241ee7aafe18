"""SQLAlchemy ORM models."""

from .organization_model import CompanyModel, AgencyModel
from .user_model import UserModel
from .job_model import JobModel, JobApplicationModel

__all__ = [
    "CompanyModel",
    "AgencyModel",
    "UserModel",
    "JobModel",
    "JobApplicationModel",
]
