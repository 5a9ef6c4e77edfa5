from fastapi import APIRouter, Request, Response
from fastapi.responses import JSONResponse

from app.core.logger import logger
from app.models.booking_models import ContactRequest
from app.services.contact_service import send_contact_emails
from app.services.validation import validate_contact

router = APIRouter()

SEND_FAILED_MESSAGE = "Failed to send email. Please try again later."


@router.options("/contact")
@router.options("/send-contact-email")
async def contact_preflight():
    return Response(status_code=200)


@router.post("/contact")
@router.post("/send-contact-email")
async def contact(request: Request):
    """Contact form: no rate limit, no persistence, two emails."""
    try:
        payload = await request.json()
        data = ContactRequest.model_validate(payload if isinstance(payload, dict) else {})

        result = validate_contact(data)
        if not result.is_valid:
            return JSONResponse(status_code=400, content={"error": result.errors[0]})

        await send_contact_emails(data)
    except Exception:
        logger.exception("❌ Error sending contact form emails")
        return JSONResponse(status_code=500, content={"error": SEND_FAILED_MESSAGE})

    return {"success": True}
