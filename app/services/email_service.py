import requests
from typing import List, Union
from app.core.config import settings
from app.core.errors import EmailDeliveryError
from app.core.logger import logger


def _recipients(to: Union[str, List[str]]) -> List[str]:
    if isinstance(to, str):
        return [to]
    return list(to)


def send_email(to: Union[str, List[str]], subject: str, html: str) -> str:
    """
    Sends an HTML email through the Resend API.
    Returns: the delivery id assigned by Resend.
    Raises: EmailDeliveryError if the message was not accepted.
    """
    recipients = _recipients(to)
    if not recipients:
        raise EmailDeliveryError("No recipient email address provided")

    if not settings.RESEND_API_KEY:
        logger.error("❌ RESEND_API_KEY is missing in .env.")
        raise EmailDeliveryError("Email provider is not configured")

    headers = {
        "Authorization": f"Bearer {settings.RESEND_API_KEY}",
        "Content-Type": "application/json"
    }
    payload = {
        "from": settings.EMAIL_FROM,
        "to": recipients,
        "subject": subject,
        "html": html
    }

    try:
        logger.info(f"📤 Sending email '{subject}' to {len(recipients)} recipient(s)...")
        response = requests.post(
            settings.RESEND_API_URL,
            json=payload,
            headers=headers,
            timeout=settings.EMAIL_TIMEOUT_SECONDS
        )
    except requests.RequestException as e:
        logger.error(f"❌ Exception sending email via Resend: {e}")
        raise EmailDeliveryError(f"Email provider unreachable: {e}") from e

    if response.status_code not in (200, 201):
        try:
            detail = response.json().get("message") or response.text
        except ValueError:
            detail = response.text
        logger.error(f"❌ Resend Error {response.status_code}: {detail}")
        raise EmailDeliveryError(detail or f"Email provider returned {response.status_code}", response.status_code)

    try:
        email_id = response.json().get("id")
    except ValueError:
        email_id = None

    if not email_id:
        logger.error("❌ Resend accepted the request but returned no id.")
        raise EmailDeliveryError("Email provider returned no delivery id", response.status_code)

    logger.info(f"✅ Email accepted by Resend (id {email_id}).")
    return email_id
