from fastapi import APIRouter, Depends, HTTPException, Response
from typing import Any, Dict

from app.core.errors import BookingStoreError
from app.core.security import require_admin
from app.models.booking_models import BookingStatusUpdate
from app.services.admin_service import admin_service

router = APIRouter()


@router.options("/admin/bookings")
@router.options("/admin/bookings/{booking_id}")
async def admin_preflight():
    return Response(status_code=200)


@router.get("/admin/bookings")
async def list_bookings(user_id: str = Depends(require_admin)) -> Dict[str, Any]:
    try:
        bookings = await admin_service.list_bookings()
    except BookingStoreError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return {"bookings": bookings, "summary": admin_service.summarize(bookings)}


@router.patch("/admin/bookings/{booking_id}")
async def update_booking_status(
    booking_id: str,
    update: BookingStatusUpdate,
    user_id: str = Depends(require_admin),
) -> Dict[str, Any]:
    try:
        booking = await admin_service.set_status(booking_id, update.status, changed_by=user_id)
    except BookingStoreError as e:
        raise HTTPException(status_code=502, detail=str(e))

    if booking is None:
        raise HTTPException(status_code=404, detail="Booking not found")
    return {"success": True, "booking": booking, "message": f"Booking {update.status.value} successfully"}
