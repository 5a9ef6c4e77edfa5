import asyncio
from app.core.config import settings
from app.core.logger import logger
from app.models.booking_models import ContactRequest
from app.services import email_templates
from app.services.email_service import send_email
from app.services.validation import sanitize_input


async def send_contact_emails(data: ContactRequest) -> None:
    """
    Sends the contact inquiry to the team, then a thank-you to the sender.
    Raises: EmailDeliveryError from the first send that fails.
    """
    name = sanitize_input(data.name)
    email = sanitize_input(data.email)

    subject, html = email_templates.contact_notification(
        name,
        sanitize_input(data.company),
        email,
        sanitize_input(data.phone),
        sanitize_input(data.message),
    )
    await asyncio.to_thread(send_email, settings.CONTACT_NOTIFICATION_RECIPIENTS, subject, html)

    subject, html = email_templates.contact_confirmation(name)
    await asyncio.to_thread(send_email, [email], subject, html)

    logger.info("✅ Contact form emails sent")
