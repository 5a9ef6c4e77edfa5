from typing import List
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    PROJECT_NAME: str = "Open Door Professionals API"
    API_V1_STR: str = "/api"

    # Server
    PORT: int = 8000
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Supabase
    SUPABASE_URL: str = ""
    SUPABASE_KEY: str = ""
    ADMIN_ROLE: str = "admin"

    # Email (Resend)
    RESEND_API_KEY: str = ""
    RESEND_API_URL: str = "https://api.resend.com/emails"
    EMAIL_FROM: str = "Open Door Professionals <noreply@opendoorpro.com>"
    EMAIL_TIMEOUT_SECONDS: float = 10.0
    BOOKING_NOTIFICATION_RECIPIENTS: List[str] = ["Sales@opendoorpro.com", "admin@opendoorpro.com"]
    CONTACT_NOTIFICATION_RECIPIENTS: List[str] = ["sales@opendoorpro.com", "admin@opendoorpro.com"]

    # Booking rate limiting (booking sends two emails, so stricter than contact)
    BOOKING_RATE_LIMIT_WINDOW_SECONDS: int = 60
    BOOKING_RATE_LIMIT_MAX_REQUESTS: int = 3
    RATE_LIMIT_MAX_TRACKED_CLIENTS: int = 10000
    # Proxies in front of the app that append to X-Forwarded-For (0 = use the socket peer)
    TRUSTED_PROXY_HOPS: int = 1

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
