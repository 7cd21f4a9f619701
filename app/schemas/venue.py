from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from app.utils.dates import to_calendar_day


class VenueBase(BaseModel):
    name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    location: str = Field(min_length=1)
    capacity: int = Field(ge=1)
    price_per_day: float = Field(ge=0)
    amenities: List[str] = []
    images: List[str] = []

    @field_validator("name", "description", "location")
    @classmethod
    def strip_text(cls, value: str):
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value


class VenueCreate(VenueBase):
    owner: Optional[str] = None


class VenueUpdate(BaseModel):
    """Partial update; fields left out are untouched."""

    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = Field(None, min_length=1)
    location: Optional[str] = Field(None, min_length=1)
    capacity: Optional[int] = Field(None, ge=1)
    price_per_day: Optional[float] = Field(None, ge=0)
    amenities: Optional[List[str]] = None
    images: Optional[List[str]] = None
    owner: Optional[str] = Field(None, min_length=1)
    is_active: Optional[bool] = None

    @field_validator("name", "description", "location")
    @classmethod
    def strip_text(cls, value: Optional[str]):
        if value is None:
            return value
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value


class UnavailableDateOut(BaseModel):
    date: date
    reason: str

    model_config = {"from_attributes": True}


class VenueOut(VenueBase):
    id: int
    owner: str
    is_active: bool
    unavailable_dates: List[UnavailableDateOut] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class VenueSummary(BaseModel):
    id: int
    name: str
    location: str

    model_config = {"from_attributes": True}


# ---------- Date blocking ----------
class BlockDatesRequest(BaseModel):
    dates: List[date] = Field(min_length=1)
    reason: Optional[str] = None

    @field_validator("dates", mode="before")
    @classmethod
    def coerce_days(cls, value):
        if isinstance(value, list):
            return [to_calendar_day(v) for v in value]
        return value


class UnblockDatesRequest(BaseModel):
    dates: List[date] = Field(min_length=1)

    @field_validator("dates", mode="before")
    @classmethod
    def coerce_days(cls, value):
        if isinstance(value, list):
            return [to_calendar_day(v) for v in value]
        return value


# ---------- Availability ----------
class AvailabilityOut(BaseModel):
    venue_id: int
    date: date
    available: bool


class RangeAvailabilityOut(BaseModel):
    venue: str
    booked_dates: List[date]
    blocked_dates: List[date]
    all_unavailable: List[date]
