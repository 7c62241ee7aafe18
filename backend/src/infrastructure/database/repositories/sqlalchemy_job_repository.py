"""SQLAlchemy implementation of job repository."""

from typing import Optional
from uuid import UUID
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities import Job
from domain.repositories import IJobRepository
from infrastructure.database.models import JobModel


class SQLAlchemyJobRepository(IJobRepository):
    """Concrete implementation of IJobRepository using SQLAlchemy."""
    
    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session
    
    async def get_by_id(self, job_id: UUID) -> Optional[Job]:
        """Retrieve a job by ID."""
        stmt = select(JobModel).where(JobModel.id == job_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        
        if model is None:
            return None
        
        return Job(id=model.id, company_id=model.company_id, title=model.title)
