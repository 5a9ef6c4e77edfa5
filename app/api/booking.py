from fastapi import APIRouter, Request, Response
from fastapi.responses import JSONResponse

from app.core.errors import BookingDispatchError, BookingStoreError, BookingValidationError, QuotaExceededError
from app.core.logger import logger
from app.services.admission import admit_request, check_booking, get_client_address
from app.services.booking_notifier import dispatch_booking_notifications
from app.services.booking_service import BookingService

router = APIRouter()
booking_service = BookingService()

QUOTA_MESSAGE = "Too many booking requests. Please try again later."
DISPATCH_DETAILS = "Failed to send booking emails"
UNEXPECTED_MESSAGE = "An unexpected error occurred. Please try again later."


def _quota_response(exc: QuotaExceededError) -> JSONResponse:
    return JSONResponse(
        status_code=429,
        content={"error": QUOTA_MESSAGE},
        headers={"X-RateLimit-Remaining": "0", "Retry-After": str(exc.retry_after)},
    )


def _validation_response(exc: BookingValidationError, remaining: int) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"error": "Validation failed", "details": exc.errors},
        headers={"X-RateLimit-Remaining": str(remaining)},
    )


@router.options("/send-booking-email")
@router.options("/bookings")
async def booking_preflight():
    return Response(status_code=200)


@router.post("/send-booking-email")
async def send_booking_email(request: Request):
    """
    Admission gate + dual email dispatch. Does not persist anything.
    """
    client_address = get_client_address(request.headers, request.client.host if request.client else None)

    try:
        decision = admit_request(client_address)
    except QuotaExceededError as e:
        return _quota_response(e)

    try:
        payload = await request.json()
        data = check_booking(payload)
        result = await dispatch_booking_notifications(data)
    except BookingValidationError as e:
        return _validation_response(e, decision.remaining)
    except BookingDispatchError as e:
        return JSONResponse(status_code=500, content={"error": str(e), "details": DISPATCH_DETAILS})
    except Exception:
        logger.exception("❌ Error in send-booking-email")
        return JSONResponse(status_code=500, content={"error": UNEXPECTED_MESSAGE, "details": DISPATCH_DETAILS})

    return JSONResponse(
        status_code=200,
        content={
            "success": True,
            "message": "Booking emails sent successfully",
            "emailId": result.email_id,
            "confirmationId": result.confirmation_id,
        },
        headers={"X-RateLimit-Remaining": str(decision.remaining)},
    )


@router.post("/bookings")
async def create_booking(request: Request):
    """
    Saves the booking, then notifies. A failed notification after a
    successful save is reported as a degraded success.
    """
    client_address = get_client_address(request.headers, request.client.host if request.client else None)

    try:
        decision = admit_request(client_address)
    except QuotaExceededError as e:
        return _quota_response(e)

    try:
        payload = await request.json()
        data = check_booking(payload)
        outcome = await booking_service.submit_booking(data)
    except BookingValidationError as e:
        return _validation_response(e, decision.remaining)
    except BookingStoreError as e:
        logger.error(f"❌ Booking not saved: {e}")
        return JSONResponse(status_code=500, content={"error": "Failed to save booking"})
    except Exception:
        logger.exception("❌ Error in booking submission")
        return JSONResponse(status_code=500, content={"error": UNEXPECTED_MESSAGE})

    return JSONResponse(
        status_code=200,
        content=outcome,
        headers={"X-RateLimit-Remaining": str(decision.remaining)},
    )
