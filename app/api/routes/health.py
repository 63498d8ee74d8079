"""Health check route."""

from fastapi import APIRouter

router = APIRouter()


@router.get("/health")
def health_check():
    """Liveness check. Returns 200 if the process is up."""
    return {"status": "healthy", "service": "apartments"}
