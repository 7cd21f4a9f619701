from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from sqlalchemy import func

from app.core.dependencies import get_current_admin, get_db
from app.core.logging_config import get_logger
from app.models.admin import Admin
from app.models.booking import Booking
from app.models.enums import ACTIVE_BOOKING_STATUSES, BookingStatus
from app.models.venue import Venue
from app.schemas.admin import AdminOut
from app.schemas.venue import VenueOut
from app.services.venues import list_blockable_venues
from app.utils.dates import utc_today

router = APIRouter(prefix="/api/admin-panel", tags=["Admin Panel"])
logger = get_logger()


# ==================================================
# LOGGED-IN ADMIN
# ==================================================
@router.get("/me", response_model=AdminOut)
def whoami(admin: Admin = Depends(get_current_admin)):
    return admin


# ==================================================
# VENUES AVAILABLE FOR DATE BLOCKING
# ==================================================
@router.get("/venues", response_model=list[VenueOut])
def blockable_venues(
    admin: Admin = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    return list_blockable_venues(db)


# ==================================================
# DASHBOARD STATS
# ==================================================
@router.get("/stats")
def dashboard_stats(
    admin: Admin = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    total_venues = db.query(Venue).filter(Venue.is_active.is_(True)).count()
    total_bookings = db.query(Booking).count()

    revenue = db.query(func.sum(Booking.total_amount)).filter(
        Booking.status.in_(ACTIVE_BOOKING_STATUSES)
    ).scalar()

    upcoming = db.query(Booking).filter(
        Booking.booking_date >= utc_today(),
        Booking.status.in_(ACTIVE_BOOKING_STATUSES),
    ).count()

    by_status = dict(
        db.query(Booking.status, func.count(Booking.id))
        .group_by(Booking.status)
        .all()
    )

    logger.bind(log_type="admin").info(f"Admin checked dashboard stats | Admin={admin.email}")

    return {
        "total_venues": total_venues,
        "total_bookings": total_bookings,
        "total_revenue": float(revenue or 0),
        "upcoming_bookings": upcoming,
        "bookings_by_status": {
            s.value: by_status.get(s.value, 0) for s in BookingStatus
        },
    }
