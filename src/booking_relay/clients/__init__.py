"""
External service clients for the booking relay.
"""

from .resend_client import ResendClient

__all__ = [
    'ResendClient',
]
