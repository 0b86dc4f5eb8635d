"""
Data models for the booking relay.

Nothing here is persisted; every model lives for one request.
"""

from .submission import SubmissionKind, SubmissionPayload, SubmissionRequest
from .delivery import DeliveryRequest, DeliveryResult

__all__ = [
    'SubmissionKind',
    'SubmissionPayload',
    'SubmissionRequest',
    'DeliveryRequest',
    'DeliveryResult',
]
