from typing import Any, Dict

from app.core.errors import BookingDispatchError
from app.core.logger import logger
from app.models.booking_models import BookingRecord, BookingRequest, BookingStatus
from app.services.booking_notifier import dispatch_booking_notifications
from app.services.db_service import db_service

DEGRADED_MESSAGE = "Your booking has been saved, but there was an issue sending the notification email. We'll contact you soon!"
CONFIRMED_MESSAGE = "Thank you for your booking request. We'll contact you within 24 hours to confirm your appointment."


def to_24h(time_12h: str) -> str:
    """
    '9:30 AM' -> '09:30:00', '12:00 PM' -> '12:00:00'.
    Anything that is not in 12h form is returned unchanged.
    """
    # Parsed by hand: strptime's %p only matches the current locale's AM/PM
    try:
        clock, modifier = time_12h.strip().split(" ")
        hours, minutes = (int(part) for part in clock.split(":"))
    except ValueError:
        return time_12h

    modifier = modifier.upper()
    if modifier not in ("AM", "PM") or not 1 <= hours <= 12 or not 0 <= minutes <= 59:
        return time_12h

    hours = hours % 12 + (12 if modifier == "PM" else 0)
    return f"{hours:02d}:{minutes:02d}:00"


class BookingService:
    """
    Full booking submission: store the row first, then notify.

    A store failure aborts before anything is sent. A notification failure
    after a successful insert is a degraded success: the row stays and is not
    rolled back.
    """

    def build_record(self, data: BookingRequest) -> BookingRecord:
        return BookingRecord(
            name=data.name,
            email=data.email,
            phone=data.phone,
            service_type=data.serviceType,
            preferred_date=data.preferredDate,
            preferred_time=to_24h(data.preferredTime),
            message=data.message or None,
            status=BookingStatus.PENDING,
        )

    async def submit_booking(self, data: BookingRequest) -> Dict[str, Any]:
        """
        Raises: BookingStoreError if the row cannot be written (nothing is sent then).
        """
        record = self.build_record(data)
        logger.info(f"📥 Booking Request - Service: {record.service_type}, Date: {record.preferred_date} {record.preferred_time}")

        row = await db_service.create_booking(record.model_dump(mode="json", exclude_none=True, exclude={"id", "created_at"}))
        booking_id = row.get("id")

        try:
            result = await dispatch_booking_notifications(data)
        except BookingDispatchError as e:
            logger.warning(f"⚠️ Booking {booking_id} saved, but notification failed: {e}")
            return {
                "success": True,
                "saved": True,
                "notified": False,
                "bookingId": booking_id,
                "message": DEGRADED_MESSAGE,
            }

        return {
            "success": True,
            "saved": True,
            "notified": True,
            "bookingId": booking_id,
            "emailId": result.email_id,
            "confirmationId": result.confirmation_id,
            "message": CONFIRMED_MESSAGE,
        }
