"""Pydantic schemas for request/response validation."""

from .job_application_schemas import (
    RejectApplicationRequest,
    JobApplicationResponse,
    FlashMessage,
    ApplicationOutcomeResponse,
    ApplicationListResponse,
    ErrorResponse,
)
from .health_schemas import HealthResponse

__all__ = [
    "RejectApplicationRequest",
    "JobApplicationResponse",
    "FlashMessage",
    "ApplicationOutcomeResponse",
    "ApplicationListResponse",
    "ErrorResponse",
    "HealthResponse",
]
