"""Job and job application SQLAlchemy models."""

from datetime import datetime
from uuid import uuid4
from sqlalchemy import String, DateTime, Text, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from infrastructure.database.session import Base


class JobModel(Base):
    """SQLAlchemy model for jobs posted by companies."""
    
    __tablename__ = "jobs"
    
    id: Mapped[UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid4
    )
    
    # Owning company
    company_id: Mapped[UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("companies.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    
    title: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow,
        nullable=False
    )
    
    applications: Mapped[list["JobApplicationModel"]] = relationship(
        "JobApplicationModel",
        back_populates="job",
        order_by="JobApplicationModel.created_at"
    )
    
    def __repr__(self) -> str:
        return f"<JobModel(id={self.id}, company_id={self.company_id})>"


class JobApplicationModel(Base):
    """SQLAlchemy model for a job seeker's application to a job."""
    
    __tablename__ = "job_applications"
    __table_args__ = (
        UniqueConstraint("job_id", "job_seeker_id", name="uq_job_applications_job_seeker"),
    )
    
    id: Mapped[UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid4
    )
    
    job_id: Mapped[UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("jobs.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    job_seeker_id: Mapped[UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    
    # Lifecycle
    status: Mapped[str] = mapped_column(
        String(20),
        default="active",
        nullable=False,
        index=True
    )
    reason_for_rejection: Mapped[str | None] = mapped_column(Text, nullable=True)
    
    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow,
        nullable=False,
        index=True
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
        nullable=False
    )
    
    job: Mapped["JobModel"] = relationship(
        "JobModel",
        back_populates="applications"
    )
    
    def __repr__(self) -> str:
        return f"<JobApplicationModel(id={self.id}, status={self.status})>"
