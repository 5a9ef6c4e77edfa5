"""
Admission gate for booking submissions: rate limit, strict decode, validation.

Every failure here happens before any side effect (no row written, no email sent).
"""
from datetime import datetime
from typing import Any, Optional

from app.core.config import settings
from app.core.errors import BookingValidationError, QuotaExceededError
from app.core.logger import logger
from app.core.rate_limiter import AdmissionDecision, FixedWindowRateLimiter, booking_rate_limiter
from app.models.booking_models import BookingRequest
from app.services.validation import validate_booking


def get_client_address(headers, peer: Optional[str] = None, trusted_hops: Optional[int] = None) -> str:
    """
    Address used as the rate-limit key.

    Each trusted proxy appends the address it saw to X-Forwarded-For, so the
    entry `trusted_hops` from the right is the first one a client cannot forge.
    With no trusted proxies the forwarding headers are ignored.
    """
    hops = settings.TRUSTED_PROXY_HOPS if trusted_hops is None else trusted_hops
    if hops > 0:
        forwarded = [part.strip() for part in headers.get("x-forwarded-for", "").split(",") if part.strip()]
        if forwarded:
            return forwarded[max(len(forwarded) - hops, 0)]
        real_ip = headers.get("x-real-ip")
        if real_ip and real_ip.strip():
            return real_ip.strip()
    return peer or "unknown"


def admit_request(client_address: str, limiter: Optional[FixedWindowRateLimiter] = None) -> AdmissionDecision:
    limiter = limiter or booking_rate_limiter
    decision = limiter.admit(client_address)
    if not decision.allowed:
        logger.warning(f"🚫 Booking quota exhausted for {client_address}")
        raise QuotaExceededError(client_address, retry_after=int(limiter.window_seconds))
    return decision


def decode_booking(payload: Any) -> BookingRequest:
    if not isinstance(payload, dict):
        raise BookingValidationError(["Request body must be a JSON object"])
    # Non-string values become None here and are reported by the validator
    return BookingRequest.model_validate(payload)


def check_booking(payload: Any, now: Optional[datetime] = None) -> BookingRequest:
    """
    Decodes and validates a booking payload.
    Raises: BookingValidationError carrying every violation found.
    """
    data = decode_booking(payload)
    result = validate_booking(data, now=now)
    if not result.is_valid:
        logger.info(f"📋 Booking validation failed: {result.errors}")
        raise BookingValidationError(result.errors)
    logger.info("✅ Booking form validation passed")
    return data
