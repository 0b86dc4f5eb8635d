"""
Outbound delivery models exchanged with the email provider client.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class DeliveryRequest:
    """One rendered email, built once per submission and sent exactly once."""

    sender: str
    recipients: tuple[str, ...]
    subject: str
    html: str

    def __post_init__(self):
        if len(self.recipients) != 1:
            raise ValueError(
                f'DeliveryRequest takes exactly one recipient, got {len(self.recipients)}'
            )

    def to_provider_json(self) -> dict[str, Any]:
        """Body for the provider's send operation."""
        return {
            'from': self.sender,
            'to': list(self.recipients),
            'subject': self.subject,
            'html': self.html,
        }


@dataclass
class DeliveryResult:
    """Outcome of one provider call."""

    success: bool
    provider_id: str | None = None
    error: str | None = None
    raw: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for the `data` field of API responses."""
        if not self.success:
            return {'error': self.error}
        data = dict(self.raw)
        data['id'] = self.provider_id
        return data
