"""
Inbound submission models.

A submission arrives as `{"type": ..., "data": {...}}`. The `data` record
uses the website's camelCase field names; every field except `name` and
`email` is optional.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from ..errors import InvalidPayload

# Scalar values a form field may carry on the wire
FieldValue = str | int | float | None

REQUIRED_FIELDS = ('email', 'name')


class SubmissionKind(str, Enum):
    """Form that produced the submission."""

    BOOKING = 'booking'
    CORPORATE = 'corporate'
    CONTACT = 'contact'


class SubmissionPayload(BaseModel):
    """Form fields shared by all submission kinds."""

    model_config = ConfigDict(populate_by_name=True, extra='ignore', frozen=True)

    # Required for every kind
    name: FieldValue = None
    email: FieldValue = None

    # Shared contact details
    phone: FieldValue = None
    cnic: FieldValue = Field(default=None, description='Identity document number')

    # Booking
    car_name: FieldValue = Field(default=None, alias='carName')
    pickup_location: FieldValue = Field(default=None, alias='pickupLocation')
    dropoff_location: FieldValue = Field(default=None, alias='dropoffLocation')
    pickup_date: FieldValue = Field(default=None, alias='pickupDate')
    pickup_time: FieldValue = Field(default=None, alias='pickupTime')
    return_date: FieldValue = Field(default=None, alias='returnDate')
    return_time: FieldValue = Field(default=None, alias='returnTime')
    total_days: FieldValue = Field(default=None, alias='totalDays')
    total_price: FieldValue = Field(default=None, alias='totalPrice')

    # Corporate
    location: FieldValue = None
    num_cars: FieldValue = Field(default=None, alias='numCars')
    num_days: FieldValue = Field(default=None, alias='numDays')
    purpose: FieldValue = None
    details: FieldValue = None

    # Contact
    subject: FieldValue = None
    message: FieldValue = None

    def missing_required_fields(self) -> list[str]:
        """Names of required fields that are absent, blank or not text."""
        return [name for name in REQUIRED_FIELDS if not _present(getattr(self, name))]


class SubmissionRequest(BaseModel):
    """
    One form submission.

    `kind` stays a raw string so that unknown kinds can be reported back
    to the caller instead of failing model validation.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    kind: str | None = Field(default=None, alias='type')
    payload: SubmissionPayload = Field(default_factory=SubmissionPayload, alias='data')

    @property
    def submission_kind(self) -> SubmissionKind | None:
        """The known kind, or None when `kind` is not supported."""
        try:
            return SubmissionKind(self.kind)
        except ValueError:
            return None

    @classmethod
    def from_body(cls, body: Any) -> 'SubmissionRequest':
        """
        Build a request from a decoded JSON body.

        Raises:
            InvalidPayload: If the body or its `data` member is not an object,
                or a field holds a non-scalar value.
        """
        if not isinstance(body, dict):
            raise InvalidPayload(
                'Request body must be a JSON object',
                context={'body_type': type(body).__name__},
            )
        if not isinstance(body.get('data'), dict):
            raise InvalidPayload(
                'Missing required fields: ' + ', '.join(REQUIRED_FIELDS),
                missing_fields=list(REQUIRED_FIELDS),
            )
        try:
            return cls.model_validate(body)
        except PydanticValidationError as e:
            raise InvalidPayload(
                'Invalid submission fields',
                context={'errors': [err['loc'] for err in e.errors()]},
            ) from e


def _present(value: FieldValue) -> bool:
    # Required fields are text; a bare number counts as missing
    return isinstance(value, str) and bool(value.strip())
