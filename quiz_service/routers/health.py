"""Health check endpoint."""

from fastapi import APIRouter, Depends

from ..config import Settings, get_settings

router = APIRouter(tags=["Health"])


@router.get("/health")
def health_check(settings: Settings = Depends(get_settings)):
    """
    Liveness check.

    Reports the service name and whether the Supabase backend is configured.
    """
    return {
        "status": "healthy",
        "service": settings.APP_NAME,
        "supabase_configured": settings.supabase_configured,
    }
