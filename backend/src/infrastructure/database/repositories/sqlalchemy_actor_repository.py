"""SQLAlchemy implementation of actor repository."""

from typing import Optional
from uuid import UUID
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities import Actor
from domain.enums import ActorRole
from domain.repositories import IActorRepository
from infrastructure.config import get_logger
from infrastructure.database.models import UserModel


class SQLAlchemyActorRepository(IActorRepository):
    """Resolves rows of the users table to Actor entities."""
    
    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session
        self.logger = get_logger(self.__class__.__name__)
    
    async def get_by_id(self, actor_id: UUID) -> Optional[Actor]:
        """
        Retrieve an actor by user ID.
        
        A row that does not describe a valid actor (unknown role, or a staff
        role without its company or agency) resolves to None.
        """
        stmt = select(UserModel).where(UserModel.id == actor_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        
        if model is None:
            return None
        
        try:
            return self._model_to_entity(model)
        except ValueError as e:
            self.logger.error(f"❌ User {actor_id} cannot act on the job board: {e}")
            return None
    
    def _model_to_entity(self, model: UserModel) -> Actor:
        """Convert ORM model to domain entity."""
        return Actor(
            id=model.id,
            role=ActorRole(model.role),
            company_id=model.company_id,
            agency_id=model.agency_id,
            email=model.email,
        )
