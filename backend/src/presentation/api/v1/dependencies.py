"""FastAPI dependency injection setup."""

from typing import AsyncGenerator, Optional
from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from application.use_cases import ApplicationLifecycleService
from domain.entities import Actor
from domain.repositories import IActorRepository
from infrastructure.config import get_logger, get_settings
from infrastructure.database import get_session
from infrastructure.database.repositories import (
    SQLAlchemyActorRepository,
    SQLAlchemyJobApplicationRepository,
    SQLAlchemyJobRepository,
)
from infrastructure.security import InvalidTokenError, decode_access_token
from presentation.api.v1.errors import AuthenticationRequiredError

logger = get_logger(__name__)


# Database session dependency
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session dependency."""
    async for session in get_session():
        yield session


# Repository dependencies
def get_actor_repository(
    session: AsyncSession = Depends(get_db_session),
) -> IActorRepository:
    """Get actor repository dependency."""
    return SQLAlchemyActorRepository(session)


# Use case dependency
def get_lifecycle_service(
    session: AsyncSession = Depends(get_db_session),
) -> ApplicationLifecycleService:
    """Get job application lifecycle service dependency."""
    return ApplicationLifecycleService(
        application_repository=SQLAlchemyJobApplicationRepository(session),
        job_repository=SQLAlchemyJobRepository(session),
    )


# Authentication dependencies
def _extract_token(request: Request) -> Optional[str]:
    """Read the access token from the Authorization header or the session cookie."""
    authorization = request.headers.get("Authorization")
    if authorization:
        scheme, _, token = authorization.partition(" ")
        if scheme.lower() == "bearer" and token:
            return token.strip()
    return request.cookies.get(get_settings().access_token_cookie)


async def get_optional_actor(
    request: Request,
    actor_repository: IActorRepository = Depends(get_actor_repository),
) -> Optional[Actor]:
    """Resolve the signed-in actor, or None when the request is anonymous."""
    token = _extract_token(request)
    if not token:
        return None
    
    try:
        user_id = decode_access_token(token)
    except InvalidTokenError as e:
        logger.info(f"Rejected access token: {e}")
        return None
    
    actor = await actor_repository.get_by_id(user_id)
    if actor is None:
        logger.info(f"Access token refers to unknown user {user_id}")
    return actor


async def get_current_actor(
    actor: Optional[Actor] = Depends(get_optional_actor),
) -> Actor:
    """Require a signed-in actor."""
    if actor is None:
        raise AuthenticationRequiredError()
    return actor
