"""Health check schema."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Health check response schema."""
    
    status: str = Field(..., description="healthy or degraded")
    version: str = Field(..., description="API version")
    environment: str = Field(..., description="Deployment environment")
    database: str = Field(..., description="ok or unreachable")
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "status": "healthy",
                    "version": "1.0.0",
                    "environment": "production",
                    "database": "ok"
                }
            ]
        }
    }
