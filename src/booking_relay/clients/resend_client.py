"""
Resend API client for the booking relay.

Handles:
- Sending one rendered email per call (POST /emails)
- Mapping provider error bodies to ResendAPIError with the provider's
  error `name` as a structured code

No retries: a failed send is reported straight back to the caller.
"""

from typing import Any

import httpx

from ..errors import ResendAPIError
from ..models.delivery import DeliveryRequest, DeliveryResult


class ResendClient:
    """
    Async Resend client.

    The underlying httpx.AsyncClient is created lazily and reused across
    sends until close() is called.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = 'https://api.resend.com',
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the Resend client.

        Args:
            api_key: Resend API key
            base_url: API root, overridable for testing
            timeout: Per-request timeout in seconds
            transport: Optional httpx transport (e.g. httpx.MockTransport)
        """
        if not api_key:
            raise ValueError('RESEND_API_KEY is required')

        self.api_key = api_key
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
                headers={
                    'Authorization': f'Bearer {self.api_key}',
                    'Content-Type': 'application/json',
                },
            )
        return self._client

    async def send(self, request: DeliveryRequest) -> DeliveryResult:
        """
        Send one email.

        Args:
            request: The rendered email

        Returns:
            DeliveryResult carrying the provider-assigned id

        Raises:
            ResendAPIError: On a non-2xx response or transport failure
        """
        try:
            response = await self._get_client().post(
                '/emails', json=request.to_provider_json()
            )
        except httpx.HTTPError as e:
            raise ResendAPIError(
                f'{type(e).__name__}: {e}',
                context={'url': f'{self.base_url}/emails'},
            ) from e

        body = _json_or_empty(response)

        if response.is_error:
            raise ResendAPIError(
                str(body.get('message') or f'HTTP {response.status_code}'),
                code=body.get('name'),
                provider_status=response.status_code,
            )

        return DeliveryResult(success=True, provider_id=body.get('id'), raw=body)

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> 'ResendClient':
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()


def _json_or_empty(response: httpx.Response) -> dict[str, Any]:
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}
