"""Actor repository interface - Abstract definition."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from domain.entities import Actor


class IActorRepository(ABC):
    """
    Abstract repository interface for resolving signed-in users to actors.
    
    Used by the authentication layer; the lifecycle service itself only
    receives Actor instances.
    """
    
    @abstractmethod
    async def get_by_id(self, actor_id: UUID) -> Optional[Actor]:
        """
        Retrieve an actor by user ID.
        
        Args:
            actor_id: User UUID
            
        Returns:
            Actor if found, None otherwise
        """
        pass
