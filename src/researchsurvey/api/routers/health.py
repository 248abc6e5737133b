"""Health check endpoint."""

from fastapi import APIRouter

from researchsurvey.core.config import get_settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health():
    settings = get_settings()
    return {"status": "ok", "version": settings.app_version}
