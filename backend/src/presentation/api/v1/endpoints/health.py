"""Health check endpoint."""

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from presentation.api.v1.dependencies import get_db_session
from presentation.schemas import HealthResponse
from infrastructure.config import get_settings, get_logger

router = APIRouter(tags=["health"])
logger = get_logger(__name__)


@router.get("/health", response_model=HealthResponse)
async def health_check(session: AsyncSession = Depends(get_db_session)) -> HealthResponse:
    """
    Health check endpoint.
    
    Reports "degraded" when the database cannot be reached.
    """
    settings = get_settings()
    
    try:
        await session.execute(text("SELECT 1"))
        database = "ok"
    except (SQLAlchemyError, OSError) as e:
        # asyncpg raises connect failures (ConnectionRefusedError etc.) unwrapped
        logger.error(f"Database health check failed: {e!r}")
        await session.rollback()
        database = "unreachable"
    
    return HealthResponse(
        status="healthy" if database == "ok" else "degraded",
        version=settings.app_version,
        environment=settings.environment,
        database=database,
    )
