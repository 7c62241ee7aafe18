"""SQLAlchemy implementation of job application repository."""

from typing import Optional
from uuid import UUID
from sqlalchemy import select, update, exists
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from domain.entities import Job, JobApplication
from domain.enums import ApplicationStatus
from domain.exceptions import DuplicateApplicationError
from domain.repositories import IJobApplicationRepository
from infrastructure.database.models import JobApplicationModel


class SQLAlchemyJobApplicationRepository(IJobApplicationRepository):
    """Concrete implementation of IJobApplicationRepository using SQLAlchemy."""
    
    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session
    
    async def create(self, application: JobApplication) -> JobApplication:
        """
        Create a new job application in the database.

        Raises:
            DuplicateApplicationError: If a concurrent request already
                inserted an application for the same job and job seeker
        """
        model = self._entity_to_model(application)
        self.session.add(model)
        try:
            await self.session.flush()
        except IntegrityError as e:
            raise DuplicateApplicationError(application.job_id, application.job_seeker_id) from e
        await self.session.refresh(model, ["job"])
        return self._model_to_entity(model)
    
    async def get_by_id(self, application_id: UUID) -> Optional[JobApplication]:
        """
        Retrieve a job application and its job by ID.
        
        Always reads the stored row, even if this session already holds a
        copy that a conditional update has since bypassed.
        """
        stmt = (
            select(JobApplicationModel)
            .where(JobApplicationModel.id == application_id)
            .options(selectinload(JobApplicationModel.job))
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        
        if model is None:
            return None
        
        return self._model_to_entity(model)
    
    async def list_by_job_seeker(self, job_seeker_id: UUID) -> list[JobApplication]:
        """Retrieve all applications of a job seeker in creation order."""
        stmt = (
            select(JobApplicationModel)
            .where(JobApplicationModel.job_seeker_id == job_seeker_id)
            .options(selectinload(JobApplicationModel.job))
            .execution_options(populate_existing=True)
            .order_by(JobApplicationModel.created_at, JobApplicationModel.id)
        )
        result = await self.session.execute(stmt)
        return [self._model_to_entity(model) for model in result.scalars().all()]
    
    async def exists_for_job_seeker(self, job_id: UUID, job_seeker_id: UUID) -> bool:
        """Check whether the job seeker already applied to the job."""
        stmt = select(
            exists().where(
                JobApplicationModel.job_id == job_id,
                JobApplicationModel.job_seeker_id == job_seeker_id,
            )
        )
        result = await self.session.execute(stmt)
        return bool(result.scalar())
    
    async def transition_status(
        self,
        application: JobApplication,
        expected_status: ApplicationStatus,
    ) -> bool:
        """Write the new status with a single conditional UPDATE."""
        stmt = (
            update(JobApplicationModel)
            .where(
                JobApplicationModel.id == application.id,
                JobApplicationModel.status == expected_status.value,
            )
            .values(
                status=application.status.value,
                reason_for_rejection=application.reason_for_rejection,
                updated_at=application.updated_at,
            )
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1
    
    def _entity_to_model(self, entity: JobApplication) -> JobApplicationModel:
        """Convert domain entity to ORM model."""
        return JobApplicationModel(
            id=entity.id,
            job_id=entity.job_id,
            job_seeker_id=entity.job_seeker_id,
            status=entity.status.value,
            reason_for_rejection=entity.reason_for_rejection,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
    
    def _model_to_entity(self, model: JobApplicationModel) -> JobApplication:
        """Convert ORM model to domain entity."""
        job = Job(
            id=model.job.id,
            company_id=model.job.company_id,
            title=model.job.title,
        )
        
        return JobApplication(
            id=model.id,
            job=job,
            job_seeker_id=model.job_seeker_id,
            status=ApplicationStatus(model.status),
            reason_for_rejection=model.reason_for_rejection,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
