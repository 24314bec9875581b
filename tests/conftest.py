"""
Pytest configuration and fixtures
"""
from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient

from app.api.routes import get_booking_service
from app.config import Settings
from app.main import app
from app.models import BookingForm
from app.services.appointment_store import InMemoryAppointmentStore
from app.services.booking_service import BookingService
from app.services.sms_service import LookupResult, ProviderError, ScheduleResult


class FakeMessagingProvider:
    """Messaging provider that records calls and returns canned results"""

    def __init__(self, lookup_result=None, schedule_result=None):
        self.lookup_result = lookup_result
        self.schedule_result = schedule_result or ScheduleResult(
            status="success", message_ids=["SM123"]
        )
        self.lookup_calls = []
        self.schedule_calls = []

    def lookup(self, phone_number, country_code):
        self.lookup_calls.append((phone_number, country_code))
        if self.lookup_result is not None:
            return self.lookup_result
        return LookupResult(status="success", phone_number=phone_number)

    def schedule_message(self, sender_id, recipients, body, scheduled_at):
        self.schedule_calls.append((sender_id, recipients, body, scheduled_at))
        return self.schedule_result


@pytest.fixture
def test_settings():
    """Settings independent of the local environment"""
    return Settings(
        twilio_account_sid="",
        twilio_auth_token="",
        sender_id="BeautyBird",
        country_code="NL",
    )


@pytest.fixture
def store():
    """Fresh in-memory appointment store"""
    return InMemoryAppointmentStore()


@pytest.fixture
def make_provider():
    """Factory for providers with custom canned results"""
    return FakeMessagingProvider


@pytest.fixture
def provider():
    """Provider that accepts every number and message"""
    return FakeMessagingProvider()


@pytest.fixture
def invalid_number_provider():
    """Provider that cannot parse the phone number"""
    return FakeMessagingProvider(
        lookup_result=LookupResult(
            status="invalid_format",
            errors=[ProviderError(code="validation", description="TOO_SHORT")],
        )
    )


@pytest.fixture
def failing_schedule_provider():
    """Provider whose message scheduling fails with two errors"""
    return FakeMessagingProvider(
        schedule_result=ScheduleResult(
            status="error",
            errors=[
                ProviderError(code="21", description="bad sender"),
                ProviderError(code="9", description="limit"),
            ],
        )
    )


@pytest.fixture
def now():
    """Fixed current time"""
    return datetime(2026, 10, 19, 9, 0)


@pytest.fixture
def valid_form():
    """Complete booking for tomorrow at 10:00"""
    tomorrow = datetime.now() + timedelta(days=1)
    return BookingForm(
        name="Jane",
        treatment="Manicure",
        number="+31612345678",
        date=tomorrow.strftime("%Y-%m-%d"),
        time="10:00",
    )


@pytest.fixture
def client(provider, store, test_settings):
    """Test client wired to the fake provider and a fresh store"""
    app.dependency_overrides[get_booking_service] = lambda: BookingService(
        provider, store, test_settings
    )
    yield TestClient(app)
    app.dependency_overrides.clear()


# Test markers
def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
