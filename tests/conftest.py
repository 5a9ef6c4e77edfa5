import pytest
from datetime import date, timedelta
from fastapi.testclient import TestClient

from app.core.rate_limiter import booking_rate_limiter
from app.main import app


@pytest.fixture(autouse=True)
def reset_rate_limiter():
    booking_rate_limiter.reset()
    yield
    booking_rate_limiter.reset()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def future_date():
    return (date.today() + timedelta(days=7)).isoformat()


@pytest.fixture
def booking_payload(future_date):
    return {
        "name": "Maria Santos",
        "email": "maria@example.com",
        "phone": "+63 912 345 6789",
        "serviceType": "Virtual Assistant",
        "preferredDate": future_date,
        "preferredTime": "10:30 AM",
        "message": "Looking for two assistants starting next month."
    }
