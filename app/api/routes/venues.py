from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from typing import Optional

from app.core.dependencies import get_current_admin, get_db
from app.models.admin import Admin
from app.schemas.venue import (
    AvailabilityOut,
    BlockDatesRequest,
    RangeAvailabilityOut,
    UnblockDatesRequest,
    VenueCreate,
    VenueOut,
    VenueUpdate,
)
from app.services import availability, date_blocks, venues as catalog
from app.utils.dates import to_calendar_day

router = APIRouter(prefix="/api/venues", tags=["Venues"])


def parse_day(value: str, label: str = "date"):
    try:
        return to_calendar_day(value)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Invalid {label} format (YYYY-MM-DD)")


# =====================================================================
# LIST VENUES (optionally only those free on a date)
# =====================================================================
@router.get("", response_model=list[VenueOut])
def list_venues(
    date_str: Optional[str] = Query(None, alias="date"),
    db: Session = Depends(get_db)
):
    day = parse_day(date_str) if date_str else None
    return catalog.list_venues(db, day)


# =====================================================================
# VENUE DETAILS (inactive venues stay reachable by id)
# =====================================================================
@router.get("/{venue_id}", response_model=VenueOut)
def get_venue(venue_id: int, db: Session = Depends(get_db)):
    return catalog.get_venue(db, venue_id)


# =====================================================================
# CREATE VENUE  (Admin Only)
# =====================================================================
@router.post("", response_model=VenueOut, status_code=201)
def create_venue(
    data: VenueCreate,
    admin: Admin = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    return catalog.create_venue(db, data, owner=admin.email)


# =====================================================================
# EDIT VENUE  (Admin Only, partial)
# =====================================================================
@router.put("/{venue_id}", response_model=VenueOut)
def update_venue(
    venue_id: int,
    data: VenueUpdate,
    admin: Admin = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    return catalog.update_venue(db, venue_id, data)


# =====================================================================
# DELETE VENUE  (Soft delete)
# =====================================================================
@router.delete("/{venue_id}")
def delete_venue(
    venue_id: int,
    admin: Admin = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    catalog.deactivate_venue(db, venue_id)
    return {"message": "Venue deleted successfully"}


# =====================================================================
# BLOCK / UNBLOCK DATES  (Admin Only)
# =====================================================================
@router.post("/{venue_id}/block-dates")
def block_dates(
    venue_id: int,
    data: BlockDatesRequest,
    admin: Admin = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    venue = date_blocks.block_dates(db, venue_id, data.dates, data.reason)
    return {
        "message": "Dates blocked successfully",
        "venue": VenueOut.model_validate(venue),
    }


@router.delete("/{venue_id}/unblock-dates")
def unblock_dates(
    venue_id: int,
    data: UnblockDatesRequest,
    admin: Admin = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    venue = date_blocks.unblock_dates(db, venue_id, data.dates)
    return {
        "message": "Dates unblocked successfully",
        "venue": VenueOut.model_validate(venue),
    }


# =====================================================================
# AVAILABILITY
# =====================================================================
@router.get("/{venue_id}/availability", response_model=RangeAvailabilityOut)
def check_availability(
    venue_id: int,
    start_date: str,
    end_date: str,
    db: Session = Depends(get_db)
):
    start = parse_day(start_date, "start_date")
    end = parse_day(end_date, "end_date")

    result = availability.check_range(db, venue_id, start, end)

    return RangeAvailabilityOut(
        venue=result.venue,
        booked_dates=result.booked_dates,
        blocked_dates=result.blocked_dates,
        all_unavailable=result.all_unavailable,
    )


@router.get("/{venue_id}/available", response_model=AvailabilityOut)
def is_available(
    venue_id: int,
    date_str: str = Query(..., alias="date"),
    db: Session = Depends(get_db)
):
    day = parse_day(date_str)
    return AvailabilityOut(
        venue_id=venue_id,
        date=day,
        available=availability.is_available(db, venue_id, day),
    )
