"""
Pytest configuration and shared fixtures.

Key fixtures:
- settings: Settings with a test credential, isolated from the environment
- unconfigured_settings: Settings without a credential
- fake_client: AsyncMock delivery client that always succeeds
- booking_body / corporate_body / contact_body: wire-format submissions

No test talks to Resend; the provider is always faked.
"""

import json
import sys
from pathlib import Path
from unittest.mock import AsyncMock

import pytest

# Add src to path for imports
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))

from booking_relay.config import Settings
from booking_relay.models.delivery import DeliveryResult


def make_settings(**overrides) -> Settings:
    """Settings built from explicit values only."""
    values = {
        'RESEND_API_KEY': 're_test_key',
        'FROM_EMAIL': 'Car Rental <onboarding@resend.dev>',
        'TO_EMAIL': 'owner@example.com',
        'ENVIRONMENT': 'production',
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def unconfigured_settings() -> Settings:
    return make_settings(RESEND_API_KEY=None)


@pytest.fixture
def fake_client() -> AsyncMock:
    """Delivery client whose send() succeeds with a fixed provider id."""
    client = AsyncMock()
    client.send.return_value = DeliveryResult(
        success=True,
        provider_id='49a3999c-0ce1-4ea6-ab68-afcd6dc2e794',
        raw={'id': '49a3999c-0ce1-4ea6-ab68-afcd6dc2e794'},
    )
    return client


@pytest.fixture
def booking_data() -> dict:
    return {
        'name': 'Ayesha Khan',
        'email': 'ayesha@example.com',
        'phone': '+92 300 1234567',
        'cnic': '35202-1234567-1',
        'carName': 'Toyota Corolla',
        'pickupLocation': 'Lahore Airport',
        'dropoffLocation': 'Gulberg III',
        'pickupDate': '2026-11-02',
        'pickupTime': '10:00',
        'returnDate': '2026-11-05',
        'returnTime': '18:30',
        'totalDays': 3,
        'totalPrice': '27,000',
    }


@pytest.fixture
def corporate_data() -> dict:
    return {
        'name': 'Bilal Ahmed',
        'email': 'bilal@acme.example',
        'phone': '+92 321 7654321',
        'location': 'Karachi',
        'numCars': '5',
        'numDays': '14',
        'purpose': 'Conference Transport',
        'details': 'Need five sedans with drivers for a two-week conference.',
    }


@pytest.fixture
def contact_data() -> dict:
    return {
        'name': 'Sara Malik',
        'email': 'sara@example.com',
        'phone': '+92 333 0000000',
        'subject': 'Long-term rental',
        'message': 'Do you offer monthly rates?',
    }


@pytest.fixture
def booking_body(booking_data) -> str:
    return json.dumps({'type': 'booking', 'data': booking_data})


@pytest.fixture
def corporate_body(corporate_data) -> str:
    return json.dumps({'type': 'corporate', 'data': corporate_data})


@pytest.fixture
def contact_body(contact_data) -> str:
    return json.dumps({'type': 'contact', 'data': contact_data})
