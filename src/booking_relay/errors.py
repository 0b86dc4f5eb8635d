"""
Custom exceptions and error handling for the booking relay.

Provides:
- Typed exception hierarchy, one class per terminal outcome of a request
- HTTP status and user-facing message carried by each error
- Classification of provider failures into delivery error categories
"""

from typing import Any

GENERIC_DELIVERY_MESSAGE = 'Failed to send email notification'
AUTH_DELIVERY_MESSAGE = 'Email service configuration error. Please contact administrator.'
RATE_LIMIT_DELIVERY_MESSAGE = 'Email service temporarily unavailable. Please try again later.'
DOMAIN_DELIVERY_MESSAGE = 'Email domain configuration error. Please contact administrator.'


class RelayError(Exception):
    """Base exception for all booking relay errors."""

    status_code: int = 500

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            return f"{self.message} | context={self.context}"
        return self.message


# =============================================================================
# Request Errors
# =============================================================================


class MethodNotAllowed(RelayError):
    """The endpoint was called with a method it does not accept."""

    status_code = 405

    def __init__(self, method: str, allowed: str):
        super().__init__(
            'Method not allowed',
            context={'method': method, 'allowed': allowed},
        )
        self.method = method
        self.allowed = allowed


class ServiceMisconfigured(RelayError):
    """The provider credential is missing."""

    status_code = 500


class InvalidPayload(RelayError):
    """The submission body is malformed or lacks required fields."""

    status_code = 400

    def __init__(
        self,
        message: str,
        missing_fields: list[str] | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message, context=context)
        self.missing_fields = missing_fields or []


class UnsupportedSubmissionKind(InvalidPayload):
    """The submission `type` is not one the relay has a template for."""

    def __init__(self, kind: Any):
        super().__init__(
            f'Unsupported submission type: {kind}',
            context={'kind': kind},
        )
        self.kind = kind


# =============================================================================
# Client Errors
# =============================================================================


class ResendAPIError(RelayError):
    """Error returned by, or raised while calling, the Resend API."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        provider_status: int | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message, context=context)
        self.code = code
        self.provider_status = provider_status


# =============================================================================
# Delivery Errors
# =============================================================================


class DeliveryFailed(RelayError):
    """The provider call failed; `user_message` is safe to show callers."""

    status_code = 500
    user_message = GENERIC_DELIVERY_MESSAGE


class DeliveryAuthError(DeliveryFailed):
    """Provider rejected the credential."""

    user_message = AUTH_DELIVERY_MESSAGE


class DeliveryRateLimitError(DeliveryFailed):
    """Provider rate limit or quota exceeded."""

    user_message = RATE_LIMIT_DELIVERY_MESSAGE


class DeliveryDomainError(DeliveryFailed):
    """Sender domain is not verified or otherwise misconfigured."""

    user_message = DOMAIN_DELIVERY_MESSAGE


# =============================================================================
# Error Classification
# =============================================================================

_AUTH_CODES = frozenset({'invalid_api_key', 'missing_api_key', 'restricted_api_key'})
_RATE_LIMIT_CODES = frozenset(
    {'rate_limit_exceeded', 'daily_quota_exceeded', 'monthly_quota_exceeded'}
)
_DOMAIN_CODES = frozenset({'invalid_from_address', 'invalid_domain', 'domain_not_verified'})


def _category_from_code(
    code: str | None,
    provider_status: int | None,
) -> type[DeliveryFailed] | None:
    if code in _AUTH_CODES:
        return DeliveryAuthError
    if code in _RATE_LIMIT_CODES:
        return DeliveryRateLimitError
    if code in _DOMAIN_CODES:
        return DeliveryDomainError
    # Resend answers 403 for both bad keys and unverified domains
    if provider_status == 401:
        return DeliveryAuthError
    if provider_status == 429:
        return DeliveryRateLimitError
    return None


def _category_from_message(message: str) -> type[DeliveryFailed]:
    # Used when neither code nor status maps to a category
    if 'Invalid API key' in message:
        return DeliveryAuthError
    if 'rate limit' in message:
        return DeliveryRateLimitError
    if 'domain' in message:
        return DeliveryDomainError
    return DeliveryFailed


def classify_delivery_error(
    exc: Exception,
    context: dict[str, Any] | None = None,
) -> DeliveryFailed:
    """
    Wrap a provider exception in our typed delivery error hierarchy.

    Structured fields (`code`, `provider_status`) on the exception are
    consulted first; message substrings are only used when neither maps
    to a category.

    Args:
        exc: The original exception
        context: Additional context for debugging

    Returns:
        Typed DeliveryFailed subclass
    """
    if isinstance(exc, DeliveryFailed):
        return exc

    message = getattr(exc, 'message', None) or str(exc)
    code = getattr(exc, 'code', None)
    provider_status = getattr(exc, 'provider_status', None)

    ctx = context or {}
    ctx['original_error'] = message
    ctx['error_type'] = type(exc).__name__
    if code:
        ctx['code'] = code
    if provider_status is not None:
        ctx['provider_status'] = provider_status

    category = _category_from_code(code, provider_status) or _category_from_message(message)
    return category(message, context=ctx)
