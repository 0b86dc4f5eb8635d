"""Lambda entry points: API Gateway proxy event → dispatcher → proxy response.

One function per endpoint, mirroring the server routes:
- send_booking_email_handler  ->  /api/send-booking-email
- send_test_email_handler     ->  /api/test-email

Uses AWS Lambda Powertools for structured logging and tracing.
"""

import asyncio

from aws_lambda_powertools import Logger, Tracer
from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEvent, event_source

from ..clients.resend_client import ResendClient
from ..config import Settings, get_settings
from ..dispatcher import RelayRequest, RelayResponse, SubmissionDispatcher
from ..logging import configure_logging
from .events import to_proxy_response, to_relay_request

# Module-level singletons survive across warm Lambda invocations
logger = Logger(service="booking-relay", log_uncaught_exceptions=True)
tracer = Tracer(service="booking-relay")

configure_logging(json_output=True, log_level=get_settings().LOG_LEVEL)


def _build_client(settings: Settings) -> ResendClient | None:
    """A fresh Resend client per invocation, or None without a credential."""
    if not settings.email_configured:
        return None
    return ResendClient(
        api_key=settings.RESEND_API_KEY,
        base_url=settings.RESEND_BASE_URL,
        timeout=settings.HTTP_TIMEOUT_SECONDS,
    )


async def _run(operation: str, request: RelayRequest) -> RelayResponse:
    settings = get_settings()
    client = _build_client(settings)
    dispatcher = SubmissionDispatcher(client=client, settings=settings)
    try:
        return await getattr(dispatcher, operation)(request)
    finally:
        if client is not None:
            await client.close()


@tracer.capture_method
def handle(operation: str, event: APIGatewayProxyEvent) -> dict:
    """Run one dispatcher operation for a proxy event."""
    request = to_relay_request(event)
    logger.info(
        "request.received",
        extra={"operation": operation, "method": request.method, "path": event.path},
    )

    response = asyncio.run(_run(operation, request))

    logger.info(
        "request.complete",
        extra={"operation": operation, "status_code": response.status_code},
    )
    return to_proxy_response(response)


@logger.inject_lambda_context(log_event=False)
@tracer.capture_lambda_handler
@event_source(data_class=APIGatewayProxyEvent)
def send_booking_email_handler(event: APIGatewayProxyEvent, context) -> dict:
    """Lambda entry point for form submissions."""
    return handle("dispatch", event)


@logger.inject_lambda_context(log_event=False)
@tracer.capture_lambda_handler
@event_source(data_class=APIGatewayProxyEvent)
def send_test_email_handler(event: APIGatewayProxyEvent, context) -> dict:
    """Lambda entry point for the diagnostic email."""
    return handle("send_test_email", event)
