"""Service-level routes."""
from fastapi import APIRouter

from schemas.health import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse()


@router.get("/")
def root() -> dict:
    """Service info."""
    return {"service": "parking-lot-service", "docs": "/docs", "health": "/health"}
