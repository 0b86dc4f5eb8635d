"""
Submission dispatcher shared by the HTTP server and the Lambda handlers.
"""

from .dispatcher import (
    CORS_HEADERS,
    DeliveryClient,
    RelayRequest,
    RelayResponse,
    SubmissionDispatcher,
)

__all__ = [
    'CORS_HEADERS',
    'DeliveryClient',
    'RelayRequest',
    'RelayResponse',
    'SubmissionDispatcher',
]
