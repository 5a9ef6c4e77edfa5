from supabase import create_async_client, AsyncClient
from app.core.config import settings
from app.core.errors import BookingStoreError
import logging
from typing import Optional, List

logger = logging.getLogger("app")

class DBService:
    _instance = None
    _client: AsyncClient = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(DBService, cls).__new__(cls)
            # Async client init is sync-unfriendly, done on first usage
        return cls._instance

    async def get_client(self) -> AsyncClient:
        if not self._client:
            if not (settings.SUPABASE_URL and settings.SUPABASE_KEY):
                logger.warning("⚠️ Supabase credentials missing")
                raise BookingStoreError("Booking store is not configured")
            try:
                self._client = await create_async_client(settings.SUPABASE_URL, settings.SUPABASE_KEY)
                logger.info("✅ Supabase Async client initialized")
            except Exception as e:
                logger.error(f"❌ Failed to initialize Supabase Async: {e}")
                raise BookingStoreError("Booking store is unavailable") from e
        return self._client

    async def create_booking(self, booking: dict) -> dict:
        """
        Inserts a booking row and returns it as stored.
        """
        client = await self.get_client()
        try:
            response = await client.table('bookings').insert(booking).execute()
        except Exception as e:
            logger.error(f"❌ DB Error (create_booking): {e}")
            raise BookingStoreError("Failed to save booking") from e

        if not response.data:
            raise BookingStoreError("Failed to save booking")
        logger.info(f"✅ Booking {response.data[0].get('id')} saved to DB")
        return response.data[0]

    async def list_bookings(self) -> List[dict]:
        """All bookings, newest first."""
        client = await self.get_client()
        try:
            response = await client.table('bookings')\
                .select("*")\
                .order('created_at', desc=True)\
                .execute()
        except Exception as e:
            logger.error(f"❌ DB Error (list_bookings): {e}")
            raise BookingStoreError("Failed to load bookings") from e
        return response.data or []

    async def update_booking_status(self, booking_id: str, status: str) -> Optional[dict]:
        """
        Sets the status of a booking. Returns the updated row, or None if no row has that id.
        """
        client = await self.get_client()
        try:
            response = await client.table('bookings').update({'status': status}).eq('id', booking_id).execute()
        except Exception as e:
            logger.error(f"❌ DB Error (update_booking_status): {e}")
            raise BookingStoreError("Failed to update booking status") from e

        if not response.data:
            return None
        logger.info(f"📝 Booking {booking_id} -> {status}")
        return response.data[0]

    async def get_user_id(self, access_token: str) -> Optional[str]:
        """
        Resolves a session access token to a user id. None if the session is invalid.
        """
        client = await self.get_client()
        try:
            response = await client.auth.get_user(access_token)
        except Exception as e:
            logger.warning(f"⚠️ Session lookup failed: {e}")
            return None
        if not response or not response.user:
            return None
        return response.user.id

    async def has_role(self, user_id: str, role: str) -> bool:
        client = await self.get_client()
        try:
            response = await client.table('user_roles')\
                .select("role")\
                .eq('user_id', user_id)\
                .eq('role', role)\
                .execute()
        except Exception as e:
            logger.error(f"❌ DB Error (has_role): {e}")
            raise BookingStoreError("Failed to check user role") from e
        return bool(response.data)

db_service = DBService()
