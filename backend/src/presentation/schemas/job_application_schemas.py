"""Job application Pydantic schemas."""

from datetime import datetime
from typing import Optional
from uuid import UUID
from pydantic import BaseModel, Field

from domain.entities import JobApplication
from domain.enums import ApplicationStatus, FlashCategory
from domain.value_objects import Outcome


class RejectApplicationRequest(BaseModel):
    """Request body for rejecting an application."""
    
    reason_for_rejection: Optional[str] = Field(
        None,
        description="Free-text reason shown to the applicant's case workers",
        max_length=5000
    )
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {"reason_for_rejection": "Skills did not match"}
            ]
        }
    }


class JobApplicationResponse(BaseModel):
    """A job application as shown to company staff."""
    
    id: UUID
    job_id: UUID
    job_title: str
    company_id: UUID
    job_seeker_id: UUID
    status: ApplicationStatus
    reason_for_rejection: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    
    @classmethod
    def from_entity(cls, application: JobApplication) -> "JobApplicationResponse":
        return cls(
            id=application.id,
            job_id=application.job_id,
            job_title=application.job.title,
            company_id=application.company_id,
            job_seeker_id=application.job_seeker_id,
            status=application.status,
            reason_for_rejection=application.reason_for_rejection,
            created_at=application.created_at,
            updated_at=application.updated_at,
        )


class FlashMessage(BaseModel):
    """One-line message to show after an operation."""
    
    category: FlashCategory = Field(..., description="info, notice or alert")
    message: str


class ApplicationOutcomeResponse(BaseModel):
    """Response schema for accept, reject and process."""
    
    application: JobApplicationResponse
    flash: FlashMessage
    redirect_to: str = Field(..., description="Path the client should navigate to")
    
    @classmethod
    def from_outcome(
        cls,
        application: JobApplication,
        outcome: Outcome,
    ) -> "ApplicationOutcomeResponse":
        return cls(
            application=JobApplicationResponse.from_entity(application),
            flash=FlashMessage(category=outcome.category, message=outcome.message),
            redirect_to=outcome.redirect.to_path(),
        )
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "application": {
                        "id": "0b8f6c1e-9d6a-4d8e-a0b4-1b2d3c4e5f60",
                        "job_id": "5a1e2f3b-4c5d-6e7f-8091-a2b3c4d5e6f7",
                        "job_title": "Warehouse Associate",
                        "company_id": "9f8e7d6c-5b4a-3928-1706-f5e4d3c2b1a0",
                        "job_seeker_id": "1a2b3c4d-5e6f-7081-92a3-b4c5d6e7f809",
                        "status": "accepted",
                        "reason_for_rejection": None,
                        "created_at": "2024-01-01T12:00:00",
                        "updated_at": "2024-01-02T09:30:00"
                    },
                    "flash": {"category": "info", "message": "Job application accepted."},
                    "redirect_to": "/jobs/5a1e2f3b-4c5d-6e7f-8091-a2b3c4d5e6f7"
                }
            ]
        }
    }


class ApplicationListResponse(BaseModel):
    """Applications made by one job seeker."""
    
    job_seeker_id: UUID
    applications: list[JobApplicationResponse]


class ErrorResponse(BaseModel):
    """Error body for denied or failed requests."""
    
    code: str
    detail: str
    redirect_to: Optional[str] = None
