"""
Booking Relay

Receives car booking, corporate enquiry and contact form submissions over
HTTP, renders each into an HTML email and forwards it through Resend.
"""

__version__ = '0.1.0'

from .config import Settings, get_settings
from .dispatcher import RelayRequest, RelayResponse, SubmissionDispatcher
from .errors import (
    RelayError,
    MethodNotAllowed,
    ServiceMisconfigured,
    InvalidPayload,
    UnsupportedSubmissionKind,
    DeliveryFailed,
    ResendAPIError,
)
from .logging import configure_logging, get_logger, logging_context
from .models import (
    SubmissionKind,
    SubmissionPayload,
    SubmissionRequest,
    DeliveryRequest,
    DeliveryResult,
)

__all__ = [
    # Version
    '__version__',
    # Config
    'Settings',
    'get_settings',
    # Dispatcher
    'SubmissionDispatcher',
    'RelayRequest',
    'RelayResponse',
    # Models
    'SubmissionKind',
    'SubmissionPayload',
    'SubmissionRequest',
    'DeliveryRequest',
    'DeliveryResult',
    # Logging
    'configure_logging',
    'get_logger',
    'logging_context',
    # Errors
    'RelayError',
    'MethodNotAllowed',
    'ServiceMisconfigured',
    'InvalidPayload',
    'UnsupportedSubmissionKind',
    'DeliveryFailed',
    'ResendAPIError',
]
