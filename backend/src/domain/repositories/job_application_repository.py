"""Job application repository interface - Abstract definition."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from domain.entities import JobApplication
from domain.enums import ApplicationStatus


class IJobApplicationRepository(ABC):
    """
    Abstract repository interface for JobApplication entity.
    
    This interface defines the contract for job application persistence.
    Concrete implementations will be in the infrastructure layer.
    """
    
    @abstractmethod
    async def create(self, application: JobApplication) -> JobApplication:
        """
        Create a new job application.
        
        Args:
            application: JobApplication entity to create
            
        Returns:
            Created JobApplication
        """
        pass
    
    @abstractmethod
    async def get_by_id(self, application_id: UUID) -> Optional[JobApplication]:
        """
        Retrieve a job application by ID, together with its job.
        
        Args:
            application_id: Job application UUID
            
        Returns:
            JobApplication if found, None otherwise
        """
        pass
    
    @abstractmethod
    async def list_by_job_seeker(self, job_seeker_id: UUID) -> list[JobApplication]:
        """
        Retrieve every application a job seeker has made, oldest first.
        
        Args:
            job_seeker_id: Applicant UUID
            
        Returns:
            List of JobApplication, possibly empty
        """
        pass
    
    @abstractmethod
    async def exists_for_job_seeker(self, job_id: UUID, job_seeker_id: UUID) -> bool:
        """
        Check whether a job seeker has already applied to a job.
        
        Args:
            job_id: Job UUID
            job_seeker_id: Applicant UUID
            
        Returns:
            True if an application exists
        """
        pass
    
    @abstractmethod
    async def transition_status(
        self,
        application: JobApplication,
        expected_status: ApplicationStatus,
    ) -> bool:
        """
        Persist a status change only if the stored status is still the expected one.
        
        The check and the write happen atomically, so two concurrent
        transitions from the same status cannot both succeed.
        
        Args:
            application: Entity carrying the new status and rejection reason
            expected_status: Status the stored row must still have
            
        Returns:
            True if the row was updated, False if its status had changed
        """
        pass
