"""Health check endpoint."""

from fastapi import APIRouter, Depends

from watch_quotes import __version__

from ..config import Settings, get_settings

router = APIRouter()


@router.get("/health")
def health(settings: Settings = Depends(get_settings)):
    """Report service liveness and version."""
    return {"status": "ok", "service": settings.SERVICE_NAME, "version": __version__}
