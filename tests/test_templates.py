"""
Tests for email template selection and rendering.

Rendering is pure, so these tests need no client or settings.
"""

import re
from datetime import datetime, timezone

import pytest

from booking_relay.models import SubmissionPayload
from booking_relay.templates import (
    DIAGNOSTIC_SUBJECT,
    NOT_PROVIDED,
    render_diagnostic_body,
    select_template,
)

# A `{name}` left behind by str.format
PLACEHOLDER = re.compile(r"\{[a-z_]+\}")


def _payload(data: dict) -> SubmissionPayload:
    return SubmissionPayload.model_validate(data)


class TestSelectTemplate:
    @pytest.mark.parametrize("kind", ["booking", "corporate", "contact"])
    def test_known_kinds(self, kind):
        assert select_template(kind).name == kind

    @pytest.mark.parametrize("kind", ["quote", "", None, "BOOKING"])
    def test_unknown_kinds(self, kind):
        assert select_template(kind) is None


class TestBookingTemplate:
    def test_subject(self, booking_data):
        template = select_template("booking")
        assert template.render_subject(_payload(booking_data)) == (
            "New Car Booking Request - Toyota Corolla"
        )

    def test_body_contains_fields(self, booking_data):
        body = select_template("booking").render_body(_payload(booking_data))

        for value in [
            "Ayesha Khan",
            "ayesha@example.com",
            "+92 300 1234567",
            "35202-1234567-1",
            "Toyota Corolla",
            "Lahore Airport",
            "Gulberg III",
            "2026-11-02 at 10:00",
            "2026-11-05 at 18:30",
            "3 days",
            "Rs 27,000",
        ]:
            assert value in body

    @pytest.mark.parametrize("total_days", [1, "1", 1.0])
    def test_single_day(self, booking_data, total_days):
        booking_data["totalDays"] = total_days
        body = select_template("booking").render_body(_payload(booking_data))

        assert f"{total_days} day<" in body
        assert "days" not in body

    def test_missing_optional_fields_use_fallback(self):
        payload = _payload({"name": "A", "email": "a@example.com"})
        template = select_template("booking")

        assert template.render_subject(payload) == f"New Car Booking Request - {NOT_PROVIDED}"
        body = template.render_body(payload)
        assert "undefined" not in body
        assert "None" not in body
        assert NOT_PROVIDED in body


class TestCorporateTemplate:
    def test_subject(self, corporate_data):
        template = select_template("corporate")
        assert template.render_subject(_payload(corporate_data)) == (
            "New Corporate Enquiry - Conference Transport"
        )

    def test_body_contains_fields(self, corporate_data):
        body = select_template("corporate").render_body(_payload(corporate_data))

        for value in corporate_data.values():
            assert value in body


class TestContactTemplate:
    def test_subject(self, contact_data):
        template = select_template("contact")
        assert template.render_subject(_payload(contact_data)) == (
            "New Contact Form Submission - Long-term rental"
        )

    def test_subject_fallback(self):
        payload = _payload({"name": "A", "email": "a@example.com"})
        template = select_template("contact")

        assert template.render_subject(payload) == (
            "New Contact Form Submission - General Inquiry"
        )
        body = template.render_body(payload)
        assert "General Inquiry" in body
        assert NOT_PROVIDED in body

    def test_body_contains_fields(self, contact_data):
        body = select_template("contact").render_body(_payload(contact_data))

        for value in contact_data.values():
            assert value in body


class TestRendering:
    @pytest.mark.parametrize("kind", ["booking", "corporate", "contact"])
    def test_no_placeholders_left(self, kind, booking_data, corporate_data, contact_data):
        data = {"booking": booking_data, "corporate": corporate_data, "contact": contact_data}[kind]
        body = select_template(kind).render_body(_payload(data))

        assert body.startswith("<!DOCTYPE html>")
        assert not PLACEHOLDER.search(body)
        assert "{{" not in body

    def test_values_are_html_escaped(self):
        payload = _payload(
            {
                "name": "<script>alert(1)</script>",
                "email": "a@example.com",
                "message": "5 > 3 & {name}",
            }
        )
        body = select_template("contact").render_body(payload)

        assert "<script>" not in body
        assert "&lt;script&gt;" in body
        assert "5 &gt; 3 &amp; {name}" in body

    def test_diagnostic_body(self):
        sent_at = datetime(2026, 10, 19, 12, 30, tzinfo=timezone.utc)
        body = render_diagnostic_body(sent_at)

        assert DIAGNOSTIC_SUBJECT == "Test Email - Car Rental System"
        assert "2026-10-19 12:30:00 UTC" in body
        assert not PLACEHOLDER.search(body)
