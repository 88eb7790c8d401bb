"""Liveness probe."""

from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

from agora.config import API_VERSION

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    version: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Report that the process is up. Does not touch the database."""
    return HealthResponse(
        status="healthy", timestamp=datetime.now(timezone.utc), version=API_VERSION
    )
