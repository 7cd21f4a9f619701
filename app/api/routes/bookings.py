from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import Optional

from app.core.dependencies import get_current_admin, get_db, get_optional_admin
from app.models.admin import Admin
from app.models.enums import BookingStatus
from app.schemas.booking import (
    BookingCancelOut,
    BookingCreate,
    BookingOut,
    BookingStatusUpdate,
)
from app.services import bookings as workflow

router = APIRouter(prefix="/api/bookings", tags=["Bookings"])


# ---------------------------------------------------------------------
# ADMIN — ALL BOOKINGS
# ---------------------------------------------------------------------
@router.get("", response_model=list[BookingOut])
def list_bookings(
    venue_id: Optional[int] = None,
    status: Optional[BookingStatus] = None,
    email: Optional[str] = None,
    admin: Admin = Depends(get_current_admin),
    db: Session = Depends(get_db),
):
    return workflow.list_bookings(db, venue_id=venue_id, status=status, email=email)


# ---------------------------------------------------------------------
# CREATE BOOKING
# ---------------------------------------------------------------------
@router.post("", response_model=BookingOut, status_code=201)
def create_booking(data: BookingCreate, db: Session = Depends(get_db)):
    booking = workflow.create_booking(
        db,
        venue_id=data.venue_id,
        booking_date=data.booking_date,
        customer_name=data.customer_name,
        customer_email=data.customer_email,
        customer_phone=data.customer_phone,
        event_type=data.event_type,
        guest_count=data.guest_count,
        special_requests=data.special_requests,
    )
    return workflow.get_booking(db, booking.id)


# ---------------------------------------------------------------------
# SINGLE BOOKING
# ---------------------------------------------------------------------
@router.get("/{booking_id}", response_model=BookingOut)
def get_booking(booking_id: int, db: Session = Depends(get_db)):
    return workflow.get_booking(db, booking_id)


# ---------------------------------------------------------------------
# ADMIN — STATUS OVERRIDE
# ---------------------------------------------------------------------
@router.put("/{booking_id}", response_model=BookingOut)
def update_booking_status(
    booking_id: int,
    data: BookingStatusUpdate,
    admin: Admin = Depends(get_current_admin),
    db: Session = Depends(get_db),
):
    return workflow.update_status(db, booking_id, data.status)


# ---------------------------------------------------------------------
# CANCEL BOOKING (admin, or the customer who made it)
# ---------------------------------------------------------------------
@router.delete("/{booking_id}", response_model=BookingCancelOut)
def cancel_booking(
    booking_id: int,
    email: Optional[str] = None,
    admin: Optional[Admin] = Depends(get_optional_admin),
    db: Session = Depends(get_db),
):
    if admin is None:
        booking = workflow.get_booking(db, booking_id)
        if not email or email.strip().lower() != booking.customer_email:
            raise HTTPException(status_code=403, detail="Not allowed to cancel this booking")

    booking = workflow.cancel_booking(db, booking_id)

    return {
        "message": "Booking cancelled successfully",
        "booking": BookingOut.model_validate(booking),
    }
