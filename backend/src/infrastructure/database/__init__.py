"""Database infrastructure module."""

from .session import get_session, init_db, close_db
from .models import (
    CompanyModel,
    AgencyModel,
    UserModel,
    JobModel,
    JobApplicationModel,
)

__all__ = [
    "get_session",
    "init_db",
    "close_db",
    "CompanyModel",
    "AgencyModel",
    "UserModel",
    "JobModel",
    "JobApplicationModel",
]
