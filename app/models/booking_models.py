from enum import Enum
from typing import Any, List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator

# --- Incoming Request Models ---

class BookingRequest(BaseModel):
    """
    Booking form payload, field names as the front end sends them.

    Every field decodes to an optional string. Values of any other JSON type
    are treated as missing so the validator can report them field by field
    instead of failing the whole decode.
    """
    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    serviceType: Optional[str] = None
    preferredDate: Optional[str] = None
    preferredTime: Optional[str] = None
    message: Optional[str] = None

    @field_validator("*", mode="before")
    @classmethod
    def drop_non_strings(cls, value: Any) -> Optional[str]:
        return value if isinstance(value, str) else None


class ContactRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    company: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    message: Optional[str] = None

    @field_validator("*", mode="before")
    @classmethod
    def drop_non_strings(cls, value: Any) -> Optional[str]:
        return value if isinstance(value, str) else None


class BookingStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


class BookingStatusUpdate(BaseModel):
    status: BookingStatus

# --- Internal / Outgoing Models ---

class ValidationResult(BaseModel):
    errors: List[str] = Field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


class DispatchResult(BaseModel):
    email_id: Optional[str] = None
    confirmation_id: Optional[str] = None


class BookingRecord(BaseModel):
    """Row of the `bookings` table."""
    model_config = ConfigDict(extra="ignore")

    id: Optional[Union[int, str]] = None
    name: str
    email: str
    phone: Optional[str] = None
    service_type: str
    preferred_date: str
    preferred_time: str
    message: Optional[str] = None
    status: BookingStatus = BookingStatus.PENDING
    created_at: Optional[str] = None
