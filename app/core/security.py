from fastapi import HTTPException, Header
from typing import Optional
from app.core.config import settings
from app.core.errors import BookingStoreError
from app.core.logger import logger
from app.services.db_service import db_service

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
    "Access-Control-Allow-Methods": "GET, POST, PATCH, OPTIONS",
}

SECURITY_HEADERS = {
    "Content-Security-Policy": "default-src 'self'; script-src 'none'; object-src 'none'",
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "X-XSS-Protection": "1; mode=block",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Permissions-Policy": "geolocation=(), microphone=(), camera=()",
}

RESPONSE_HEADERS = {**CORS_HEADERS, **SECURITY_HEADERS}


def _bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


async def require_admin(authorization: Optional[str] = Header(None)) -> str:
    """
    Resolves the session behind the bearer token and checks the admin role.
    Returns: the user id.
    """
    token = _bearer_token(authorization)
    if not token:
        raise HTTPException(status_code=401, detail="Not authenticated")

    try:
        user_id = await db_service.get_user_id(token)
        if not user_id:
            raise HTTPException(status_code=401, detail="Invalid or expired session")

        if not await db_service.has_role(user_id, settings.ADMIN_ROLE):
            logger.warning(f"🚫 User {user_id} tried to access admin without privileges")
            raise HTTPException(status_code=403, detail="You don't have admin privileges")
    except BookingStoreError as e:
        raise HTTPException(status_code=502, detail=str(e))

    return user_id
