"""
Availability engine.

A venue is unavailable on a calendar day when it has a booking in a
non-cancelled status for that day, or when an admin blocked the day.
Everything here is read-only.
"""
from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from sqlalchemy.orm import Session

from app.core.errors import InvalidInputError, NotFoundError
from app.models.booking import Booking
from app.models.enums import ACTIVE_BOOKING_STATUSES
from app.models.venue import Venue
from app.models.venue_unavailable_date import VenueUnavailableDate


@dataclass
class RangeAvailability:
    venue: str
    booked_dates: list[date] = field(default_factory=list)
    blocked_dates: list[date] = field(default_factory=list)

    @property
    def all_unavailable(self) -> list[date]:
        # Flat concatenation for display; overlaps are kept
        return self.booked_dates + self.blocked_dates


def require_active_venue(db: Session, venue_id: int) -> Venue:
    venue = db.get(Venue, venue_id)
    if venue is None or not venue.is_active:
        raise NotFoundError("Venue not found")
    return venue


def has_active_booking(db: Session, venue_id: int, day: date) -> bool:
    return db.query(Booking.id).filter(
        Booking.venue_id == venue_id,
        Booking.booking_date == day,
        Booking.status.in_(ACTIVE_BOOKING_STATUSES),
    ).first() is not None


def is_blocked(db: Session, venue_id: int, day: date) -> bool:
    return db.query(VenueUnavailableDate.id).filter(
        VenueUnavailableDate.venue_id == venue_id,
        VenueUnavailableDate.date == day,
    ).first() is not None


def is_available(db: Session, venue_id: int, day: date) -> bool:
    require_active_venue(db, venue_id)

    if has_active_booking(db, venue_id, day):
        return False
    return not is_blocked(db, venue_id, day)


def unavailable_venue_ids(db: Session, day: date) -> set[int]:
    booked = db.query(Booking.venue_id).filter(
        Booking.booking_date == day,
        Booking.status.in_(ACTIVE_BOOKING_STATUSES),
    ).distinct()

    blocked = db.query(VenueUnavailableDate.venue_id).filter(
        VenueUnavailableDate.date == day,
    ).distinct()

    return {vid for (vid,) in booked} | {vid for (vid,) in blocked}


def list_available_venues(db: Session, day: Optional[date] = None) -> list[Venue]:
    """Active venues free on ``day`` (all active venues when no day), newest first."""
    query = db.query(Venue).filter(Venue.is_active.is_(True))

    if day is not None:
        excluded = unavailable_venue_ids(db, day)
        if excluded:
            query = query.filter(Venue.id.notin_(list(excluded)))

    return query.order_by(Venue.created_at.desc(), Venue.id.desc()).all()


def check_range(db: Session, venue_id: int, start: date, end: date) -> RangeAvailability:
    venue = db.get(Venue, venue_id)
    if venue is None:
        raise NotFoundError("Venue not found")

    if end < start:
        raise InvalidInputError("End date cannot be before start date")

    booked = (
        db.query(Booking.booking_date)
        .filter(
            Booking.venue_id == venue_id,
            Booking.booking_date >= start,
            Booking.booking_date <= end,
            Booking.status.in_(ACTIVE_BOOKING_STATUSES),
        )
        .order_by(Booking.booking_date)
        .all()
    )

    blocked = [
        entry.date for entry in venue.unavailable_dates
        if start <= entry.date <= end
    ]

    return RangeAvailability(
        venue=venue.name,
        booked_dates=[d for (d,) in booked],
        blocked_dates=blocked,
    )
