"""Health check endpoint."""

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
async def health(request: Request):
    """Report liveness and whether the provider credential is configured."""
    settings = request.app.state.dispatcher.settings
    return {"status": "ok", "email_configured": settings.email_configured}
