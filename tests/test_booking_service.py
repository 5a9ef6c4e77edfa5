import pytest
from unittest.mock import AsyncMock, patch

from app.models.booking_models import BookingRequest, DispatchResult
from app.services.booking_service import BookingService, to_24h


@pytest.mark.parametrize("value,expected", [
    ("9:00 AM", "09:00:00"),
    ("12:30 PM", "12:30:00"),
    ("12:00 AM", "00:00:00"),
    ("5:00 PM", "17:00:00"),
    ("14:00", "14:00"),
    ("whenever", "whenever"),
    ("12:00 am", "00:00:00"),
    ("9:75 AM", "9:75 AM"),
    ("13:00 PM", "13:00 PM"),
    ("0:30 AM", "0:30 AM"),
    ("9:30 XM", "9:30 XM"),
])
def test_to_24h(value, expected):
    assert to_24h(value) == expected


@pytest.mark.asyncio
async def test_record_is_stored_before_dispatch(booking_payload):
    calls = []

    async def fake_create(row):
        calls.append("store")
        return {"id": "b-9"}

    async def fake_dispatch(data):
        calls.append("dispatch")
        return DispatchResult(email_id="e", confirmation_id="c")

    with patch("app.services.booking_service.db_service.create_booking", side_effect=fake_create), \
         patch("app.services.booking_service.dispatch_booking_notifications", side_effect=fake_dispatch):
        outcome = await BookingService().submit_booking(BookingRequest.model_validate(booking_payload))

    assert calls == ["store", "dispatch"]
    assert outcome["notified"] is True
    assert outcome["bookingId"] == "b-9"


def test_build_record_drops_empty_message(booking_payload):
    booking_payload["message"] = ""
    record = BookingService().build_record(BookingRequest.model_validate(booking_payload))
    assert record.message is None
    assert record.status.value == "pending"
