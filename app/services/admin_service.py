from typing import Dict, List, Optional

from app.core.logger import logger
from app.models.booking_models import BookingStatus
from app.services.db_service import db_service


class AdminService:
    """Booking triage shared by the admin API and the Streamlit dashboard."""

    async def list_bookings(self) -> List[dict]:
        return await db_service.list_bookings()

    async def set_status(self, booking_id: str, status: BookingStatus, changed_by: Optional[str] = None) -> Optional[dict]:
        booking = await db_service.update_booking_status(booking_id, BookingStatus(status).value)
        if booking is not None:
            logger.info(f"🗂️ Booking {booking_id} marked {BookingStatus(status).value} by {changed_by or 'dashboard'}")
        return booking

    @staticmethod
    def summarize(bookings: List[dict]) -> Dict[str, int]:
        summary = {"total": len(bookings)}
        for status in BookingStatus:
            summary[status.value] = sum(1 for b in bookings if b.get("status") == status.value)
        return summary

    @staticmethod
    def allowed_transitions(status: str) -> List[BookingStatus]:
        """Actions offered for a booking in the given status."""
        if status == BookingStatus.PENDING.value:
            return [BookingStatus.CONFIRMED, BookingStatus.CANCELLED]
        if status == BookingStatus.CONFIRMED.value:
            return [BookingStatus.CANCELLED]
        if status == BookingStatus.CANCELLED.value:
            return [BookingStatus.CONFIRMED]
        return []

admin_service = AdminService()
