from typing import List, Optional


class QuotaExceededError(Exception):
    """Client address has used up its booking allowance for the current window."""

    def __init__(self, client_address: str, retry_after: int):
        self.client_address = client_address
        self.retry_after = retry_after
        super().__init__(f"Rate limit exceeded for {client_address}")


class BookingValidationError(Exception):
    """One or more field-level violations. The full list is always kept."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


class EmailDeliveryError(Exception):
    """The email provider rejected a message or could not be reached."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class BookingDispatchError(Exception):
    """
    At least one leg of the business/confirmation email pair failed.
    Legs that already went out are not retracted.
    """

    def __init__(self, message: str, failed_legs: Optional[List[str]] = None):
        self.failed_legs = failed_legs or []
        super().__init__(message)


class BookingStoreError(Exception):
    """The booking store (Supabase) is unavailable or rejected the operation."""
