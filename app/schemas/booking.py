from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

from app.models.enums import BookingStatus
from app.schemas.venue import VenueSummary
from app.utils.dates import to_calendar_day


class BookingCreate(BaseModel):
    venue_id: int
    booking_date: date
    customer_name: str = Field(min_length=1)
    customer_email: EmailStr
    customer_phone: str = Field(min_length=1)
    event_type: str = Field(min_length=1)
    guest_count: int = Field(ge=1)
    special_requests: str = ""

    @field_validator("booking_date", mode="before")
    @classmethod
    def coerce_day(cls, value):
        return to_calendar_day(value)


class BookingStatusUpdate(BaseModel):
    status: BookingStatus


class BookingOut(BaseModel):
    id: int
    venue_id: int
    venue: Optional[VenueSummary] = None
    customer_name: str
    customer_email: str
    customer_phone: str
    booking_date: date
    event_type: str
    guest_count: int
    total_amount: float
    status: BookingStatus
    special_requests: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class BookingCancelOut(BaseModel):
    message: str
    booking: BookingOut
