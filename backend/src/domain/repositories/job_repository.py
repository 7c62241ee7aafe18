"""Job repository interface - Abstract definition."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from domain.entities import Job


class IJobRepository(ABC):
    """Abstract repository interface for Job entity."""
    
    @abstractmethod
    async def get_by_id(self, job_id: UUID) -> Optional[Job]:
        """
        Retrieve a job by ID.
        
        Args:
            job_id: Job UUID
            
        Returns:
            Job if found, None otherwise
        """
        pass
