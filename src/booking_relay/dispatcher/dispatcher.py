"""
Submission dispatcher shared by both deployment shapes.

Takes a transport-neutral RelayRequest, validates it, renders the template
for its submission kind, makes exactly one provider call, and maps the
outcome to a RelayResponse. The HTTP server and the Lambda handlers are
thin adapters around this class.

Flow (one pass, no retries):
    Received -> Validated -> TemplateRendered -> Sent -> Succeeded | Failed
"""

import base64
import binascii
import json
import time
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Protocol

import structlog

from ..config import Settings
from ..errors import (
    InvalidPayload,
    MethodNotAllowed,
    RelayError,
    ServiceMisconfigured,
    UnsupportedSubmissionKind,
    classify_delivery_error,
    GENERIC_DELIVERY_MESSAGE,
)
from ..logging import logging_context
from ..models.delivery import DeliveryRequest, DeliveryResult
from ..models.submission import SubmissionRequest
from ..templates import DIAGNOSTIC_SUBJECT, render_diagnostic_body, select_template

logger = structlog.get_logger(__name__)

CORS_HEADERS: dict[str, str] = {
    'Access-Control-Allow-Credentials': 'true',
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Methods': 'GET,OPTIONS,PATCH,DELETE,POST,PUT',
    'Access-Control-Allow-Headers': (
        'X-CSRF-Token, X-Requested-With, Accept, Accept-Version, Content-Length, '
        'Content-MD5, Content-Type, Date, X-Api-Version'
    ),
}

MISCONFIGURED_MESSAGE = 'Email service not configured. Please contact administrator.'
TEST_MISCONFIGURED_MESSAGE = 'RESEND_API_KEY is not configured'


# =============================================================================
# Request / Response
# =============================================================================


@dataclass(frozen=True)
class RelayRequest:
    """Minimal view of an inbound HTTP request."""

    method: str
    body: str | bytes | None = None
    base64_encoded: bool = False


@dataclass
class RelayResponse:
    """Status, JSON body (None for an empty body) and headers."""

    status_code: int
    body: dict[str, Any] | None = None
    headers: dict[str, str] = field(default_factory=lambda: dict(CORS_HEADERS))

    def body_text(self) -> str:
        """Serialized body; empty string for an empty body."""
        if self.body is None:
            return ''
        return json.dumps(self.body)


class DeliveryClient(Protocol):
    """The one operation the dispatcher needs from an email provider."""

    async def send(self, request: DeliveryRequest) -> DeliveryResult: ...


# =============================================================================
# SubmissionDispatcher
# =============================================================================


class SubmissionDispatcher:
    """
    Validates, renders and delivers form submissions.

    The delivery client is injected; None means the provider credential is
    not configured and every send is refused with a configuration error.
    """

    SUBMIT_METHOD = 'POST'
    TEST_METHOD = 'GET'

    def __init__(self, client: DeliveryClient | None, settings: Settings):
        """
        Initialize with a delivery client and settings.

        Args:
            client: Email provider client, or None when unconfigured
            settings: Relay settings (addresses, deployment mode)
        """
        self.client = client
        self.settings = settings

    # -------------------------------------------------------------------------
    # Entry points
    # -------------------------------------------------------------------------

    async def dispatch(self, request: RelayRequest) -> RelayResponse:
        """Handle one form submission."""
        return await self._run(request, self.SUBMIT_METHOD, self._dispatch_submission)

    async def send_test_email(self, request: RelayRequest) -> RelayResponse:
        """Send the fixed diagnostic email."""
        return await self._run(request, self.TEST_METHOD, self._dispatch_test_email)

    async def _run(self, request: RelayRequest, allowed: str, handler) -> RelayResponse:
        method = request.method.upper()
        if method == 'OPTIONS':
            return RelayResponse(status_code=200)

        with logging_context(request_id=uuid.uuid4().hex):
            logger.info('dispatch.received', method=method, operation=handler.__name__)
            try:
                if method != allowed:
                    raise MethodNotAllowed(method, allowed)
                return await handler(request)
            except RelayError as e:
                return self._error_response(e)
            except Exception as e:
                logger.error(
                    'dispatch.unexpected_error',
                    error=str(e),
                    error_type=type(e).__name__,
                    exc_info=True,
                )
                return self._failure_response(GENERIC_DELIVERY_MESSAGE, str(e))

    # -------------------------------------------------------------------------
    # Handlers
    # -------------------------------------------------------------------------

    async def _dispatch_submission(self, request: RelayRequest) -> RelayResponse:
        self._require_client(MISCONFIGURED_MESSAGE)

        submission = SubmissionRequest.from_body(_decode_body(request.body, request.base64_encoded))
        payload = submission.payload

        with logging_context(submission_kind=submission.kind):
            log = logger.bind(email=payload.email)
            log.info('dispatch.parsed')

            missing = payload.missing_required_fields()
            if missing:
                log.warning('dispatch.missing_fields', missing_fields=missing)
                raise InvalidPayload(
                    f"Missing required fields: {', '.join(missing)}",
                    missing_fields=missing,
                )

            template = select_template(submission.kind)
            if template is None:
                log.warning('dispatch.unsupported_kind', kind=submission.kind)
                raise UnsupportedSubmissionKind(submission.kind)

            delivery = self._build_delivery(
                subject=template.render_subject(payload),
                html=template.render_body(payload),
            )
            result = await self._deliver(delivery)

        return RelayResponse(
            status_code=200,
            body={'success': True, 'data': result.to_dict()},
        )

    async def _dispatch_test_email(self, request: RelayRequest) -> RelayResponse:
        logger.info(
            'test_email.received',
            api_key_present=self.settings.email_configured,
            from_email=self.settings.FROM_EMAIL,
            to_email=self.settings.TO_EMAIL,
        )
        self._require_client(TEST_MISCONFIGURED_MESSAGE)

        sent_at = datetime.now(timezone.utc)
        delivery = self._build_delivery(
            subject=DIAGNOSTIC_SUBJECT,
            html=render_diagnostic_body(sent_at),
        )
        result = await self._deliver(delivery)
        return RelayResponse(
            status_code=200,
            body={
                'success': True,
                'message': 'Test email sent successfully',
                'data': result.to_dict(),
                'timestamp': sent_at.isoformat(),
            },
        )

    # -------------------------------------------------------------------------
    # Steps
    # -------------------------------------------------------------------------

    def _require_client(self, message: str) -> None:
        if self.client is None or not self.settings.email_configured:
            logger.error('dispatch.missing_config', setting='RESEND_API_KEY')
            raise ServiceMisconfigured(message)

    def _build_delivery(self, subject: str, html: str) -> DeliveryRequest:
        return DeliveryRequest(
            sender=self.settings.FROM_EMAIL,
            recipients=(self.settings.TO_EMAIL,),
            subject=subject,
            html=html,
        )

    async def _deliver(self, delivery: DeliveryRequest) -> DeliveryResult:
        log = logger.bind(
            sender=delivery.sender,
            recipients=list(delivery.recipients),
            subject=delivery.subject,
        )
        log.info('dispatch.sending')

        t0 = time.monotonic()
        try:
            result = await self.client.send(delivery)
        except Exception as e:
            error = classify_delivery_error(e)
            log.error(
                'dispatch.failed',
                error=error.message,
                error_type=type(error).__name__,
                context=error.context,
            )
            raise error from e

        if not result.success:
            error = classify_delivery_error(
                RuntimeError(result.error or GENERIC_DELIVERY_MESSAGE)
            )
            log.error('dispatch.failed', error=error.message, error_type=type(error).__name__)
            raise error

        log.info(
            'dispatch.sent',
            provider_id=result.provider_id,
            send_time_ms=int((time.monotonic() - t0) * 1000),
        )
        return result

    # -------------------------------------------------------------------------
    # Responses
    # -------------------------------------------------------------------------

    def _error_response(self, error: RelayError) -> RelayResponse:
        if isinstance(error, MethodNotAllowed):
            logger.info('dispatch.method_not_allowed', method=error.method)
            return RelayResponse(
                status_code=405,
                body={'success': False, 'error': error.message},
            )

        if isinstance(error, InvalidPayload):
            body: dict[str, Any] = {'success': False, 'error': error.message}
            if error.missing_fields:
                body['missing_fields'] = error.missing_fields
            return RelayResponse(status_code=error.status_code, body=body)

        user_message = getattr(error, 'user_message', error.message)
        if isinstance(error, ServiceMisconfigured):
            return RelayResponse(
                status_code=error.status_code,
                body={'success': False, 'error': user_message},
            )
        return self._failure_response(user_message, error.message)

    def _failure_response(self, user_message: str, detail: str) -> RelayResponse:
        body: dict[str, Any] = {'success': False, 'error': user_message}
        if self.settings.is_development:
            body['details'] = detail
        return RelayResponse(status_code=500, body=body)


def _decode_body(body: str | bytes | None, base64_encoded: bool = False) -> Any:
    if body is None or (isinstance(body, (str, bytes)) and not body.strip()):
        return {}
    try:
        if base64_encoded:
            body = base64.b64decode(body, validate=True)
        return json.loads(body)
    except (binascii.Error, ValueError) as e:
        raise InvalidPayload(
            'Request body is not valid JSON',
            context={'error': str(e)},
        ) from e
