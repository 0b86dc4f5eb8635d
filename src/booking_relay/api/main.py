"""FastAPI application for the booking relay server."""

from contextlib import asynccontextmanager

import structlog
import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI

from booking_relay.clients.resend_client import ResendClient
from booking_relay.config import get_settings
from booking_relay.dispatcher import SubmissionDispatcher
from booking_relay.logging import configure_logging

from .cors import CORSHeadersMiddleware
from .routes.email import router as email_router
from .routes.health import router as health_router

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the Resend client and dispatcher at startup, close at shutdown."""
    settings = get_settings()

    logger.info(
        "lifespan.startup",
        api_key_present=settings.email_configured,
        from_email=settings.FROM_EMAIL,
        to_email=settings.TO_EMAIL,
        environment=settings.ENVIRONMENT,
    )

    # Resend: an absent credential leaves the dispatcher unconfigured
    resend: ResendClient | None = None
    if settings.email_configured:
        resend = ResendClient(
            api_key=settings.RESEND_API_KEY,
            base_url=settings.RESEND_BASE_URL,
            timeout=settings.HTTP_TIMEOUT_SECONDS,
        )
    else:
        logger.warning("lifespan.resend_not_configured")

    app.state.resend = resend
    app.state.dispatcher = SubmissionDispatcher(client=resend, settings=settings)

    logger.info("lifespan.ready")
    yield

    logger.info("lifespan.shutdown")
    if resend is not None:
        await resend.close()


app = FastAPI(
    title="booking-relay",
    description="Relays car booking, corporate enquiry and contact form submissions to email",
    lifespan=lifespan,
)

app.add_middleware(CORSHeadersMiddleware)
app.include_router(health_router)
app.include_router(email_router)


def serve() -> None:
    """Console entry point: load .env, configure logging, run uvicorn."""
    load_dotenv()
    get_settings.cache_clear()
    settings = get_settings()
    configure_logging(json_output=settings.LOG_JSON, log_level=settings.LOG_LEVEL)
    logger.info("server.starting", host=settings.HOST, port=settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())
