"""
Booking workflow: the only way bookings get written.

``create_booking`` checks for a conflicting booking before it inserts. The
partial unique index on ``(venue_id, booking_date)`` for non-cancelled rows
catches the case where a concurrent request slips in between the check and
the insert; that surfaces here as ConflictError too.
"""
from typing import Optional

from email_validator import EmailNotValidError, validate_email
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from app.core.errors import ConflictError, InvalidInputError, NotFoundError
from app.core.logging_config import get_logger
from app.models.booking import Booking
from app.models.enums import BookingStatus
from app.services.availability import (
    has_active_booking,
    is_blocked,
    require_active_venue,
)
from app.utils.dates import to_calendar_day, utc_today

logger = get_logger()


class SlotTakenError(ConflictError):
    def __init__(self):
        super().__init__("Venue is already booked for this date")


def _required(value: Optional[str], label: str) -> str:
    value = (value or "").strip()
    if not value:
        raise InvalidInputError(f"{label} is required")
    return value


def _normalize_email(value: Optional[str]) -> str:
    email = _required(value, "Customer email").lower()
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        raise InvalidInputError("Invalid customer email")
    return email


def _commit_slot(db: Session) -> None:
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise SlotTakenError()


def create_booking(
    db: Session,
    *,
    venue_id: int,
    booking_date,
    customer_name: str,
    customer_email: str,
    customer_phone: str,
    event_type: str,
    guest_count: int,
    special_requests: Optional[str] = "",
) -> Booking:
    # ---- INPUT VALIDATION (before any store round-trip) ----
    try:
        day = to_calendar_day(booking_date)
    except ValueError:
        raise InvalidInputError("Invalid booking date")

    name = _required(customer_name, "Customer name")
    email = _normalize_email(customer_email)
    phone = _required(customer_phone, "Customer phone")
    event = _required(event_type, "Event type")

    if isinstance(guest_count, bool) or not isinstance(guest_count, int) or guest_count < 1:
        raise InvalidInputError("Guest count must be at least 1")

    if day < utc_today():
        raise InvalidInputError("Cannot book past dates")

    # ---- VENUE ----
    venue = require_active_venue(db, venue_id)

    # ---- CONFLICTS ----
    if has_active_booking(db, venue_id, day):
        raise SlotTakenError()

    if is_blocked(db, venue_id, day):
        raise ConflictError("Venue is not available for this date")

    # ---- CAPACITY ----
    if guest_count > venue.capacity:
        raise InvalidInputError("Guest count exceeds venue capacity")

    booking = Booking(
        venue_id=venue.id,
        customer_name=name,
        customer_email=email,
        customer_phone=phone,
        booking_date=day,
        event_type=event,
        guest_count=guest_count,
        total_amount=venue.price_per_day,
        status=BookingStatus.CONFIRMED.value,
        special_requests=(special_requests or "").strip(),
    )

    db.add(booking)
    _commit_slot(db)
    db.refresh(booking)

    logger.bind(log_type="booking").info(
        f"Booking Created | Booking={booking.id} | Venue={venue.id} | "
        f"Date={day.isoformat()} | Customer={email}"
    )
    return booking


def get_booking(db: Session, booking_id: int) -> Booking:
    booking = (
        db.query(Booking)
        .options(joinedload(Booking.venue))
        .filter(Booking.id == booking_id)
        .first()
    )
    if booking is None:
        raise NotFoundError("Booking not found")
    return booking


def list_bookings(
    db: Session,
    venue_id: Optional[int] = None,
    status: Optional[BookingStatus] = None,
    email: Optional[str] = None,
) -> list[Booking]:
    query = db.query(Booking).options(joinedload(Booking.venue))

    if venue_id is not None:
        query = query.filter(Booking.venue_id == venue_id)
    if status is not None:
        query = query.filter(Booking.status == BookingStatus(status).value)
    if email:
        query = query.filter(Booking.customer_email == email.strip().lower())

    return query.order_by(Booking.created_at.desc(), Booking.id.desc()).all()


def update_status(db: Session, booking_id: int, new_status) -> Booking:
    """
    Overwrite a booking's status.

    Any status value is accepted in any order. Moving a cancelled booking
    back to pending/confirmed fails with ConflictError when another booking
    has taken the day since.
    """
    try:
        status = BookingStatus(new_status)
    except ValueError:
        raise InvalidInputError(f"Invalid status: {new_status}")

    booking = get_booking(db, booking_id)
    previous = booking.status

    booking.status = status.value
    _commit_slot(db)
    db.refresh(booking)

    logger.bind(log_type="booking").info(
        f"Booking Status | Booking={booking.id} | {previous} -> {booking.status}"
    )
    return booking


def cancel_booking(db: Session, booking_id: int) -> Booking:
    booking = get_booking(db, booking_id)

    if booking.status != BookingStatus.CANCELLED.value:
        booking.status = BookingStatus.CANCELLED.value
        db.commit()
        db.refresh(booking)

    logger.bind(log_type="booking").info(
        f"Booking Cancelled | Booking={booking.id} | Venue={booking.venue_id}"
    )
    return booking

