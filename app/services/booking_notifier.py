"""
Booking notification dispatch.

A booking produces two independent sends: the business notification and
the customer confirmation. Both are always attempted. The pair succeeds only
if both legs succeed; a leg that already went out is not retracted and the
missing one is not retried. Resubmitting a booking sends a second pair.
"""
import asyncio
from app.core.config import settings
from app.core.errors import BookingDispatchError
from app.core.logger import logger
from app.models.booking_models import BookingRequest, DispatchResult
from app.services import email_templates
from app.services.email_service import send_email
from app.services.validation import format_long_date, sanitize_input

BUSINESS_LEG = "business_notification"
CONFIRMATION_LEG = "customer_confirmation"


async def dispatch_booking_notifications(data: BookingRequest) -> DispatchResult:
    """
    Sends the business notification and the customer confirmation for a
    booking that already passed admission and validation.
    Raises: BookingDispatchError if the date cannot be formatted or either send fails.
    """
    name = sanitize_input(data.name)
    email = sanitize_input(data.email)
    phone = sanitize_input(data.phone)
    service_type = sanitize_input(data.serviceType)
    message = sanitize_input(data.message) or None

    try:
        formatted_date = format_long_date(data.preferredDate or "")
    except ValueError as e:
        logger.error(f"❌ Cannot format validated booking date {data.preferredDate!r}: {e}")
        raise BookingDispatchError("Invalid preferred date") from e

    business_subject, business_html = email_templates.booking_notification(
        name, email, phone, service_type, formatted_date, data.preferredTime, message
    )
    confirmation_subject, confirmation_html = email_templates.booking_confirmation(
        name, service_type, formatted_date, data.preferredTime
    )

    legs = [BUSINESS_LEG, CONFIRMATION_LEG]
    results = await asyncio.gather(
        asyncio.to_thread(send_email, settings.BOOKING_NOTIFICATION_RECIPIENTS, business_subject, business_html),
        asyncio.to_thread(send_email, [email], confirmation_subject, confirmation_html),
        return_exceptions=True,
    )

    failures = [(leg, result) for leg, result in zip(legs, results) if isinstance(result, Exception)]
    if failures:
        for leg, exc in failures:
            logger.error(f"❌ Booking email leg '{leg}' failed: {exc}")
        sent = [leg for leg in legs if leg not in dict(failures)]
        if sent:
            logger.warning(f"⚠️ Partial dispatch, already sent: {', '.join(sent)}")
        raise BookingDispatchError(str(failures[0][1]), failed_legs=[leg for leg, _ in failures])

    email_id, confirmation_id = results
    logger.info(f"✅ Booking emails sent (notification {email_id}, confirmation {confirmation_id})")
    return DispatchResult(email_id=email_id, confirmation_id=confirmation_id)
