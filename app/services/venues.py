"""
Venue catalog.

Venues are soft-deleted: ``deactivate_venue`` flips ``is_active`` and the
row stays so that bookings pointing at it keep resolving.
"""
from datetime import date
from typing import Optional

from sqlalchemy.orm import Session

from app.core.errors import InvalidInputError, NotFoundError
from app.core.logging_config import get_logger
from app.models.venue import Venue
from app.schemas.venue import VenueCreate, VenueUpdate
from app.services.availability import list_available_venues

logger = get_logger()


def get_venue(db: Session, venue_id: int) -> Venue:
    """Fetch a venue by id, inactive ones included."""
    venue = db.get(Venue, venue_id)
    if venue is None:
        raise NotFoundError("Venue not found")
    return venue


def list_venues(db: Session, day: Optional[date] = None) -> list[Venue]:
    return list_available_venues(db, day)


def list_blockable_venues(db: Session) -> list[Venue]:
    """Venues an admin may pick when blocking dates (active only)."""
    return list_available_venues(db)


def create_venue(db: Session, data: VenueCreate, owner: Optional[str] = None) -> Venue:
    venue = Venue(
        name=data.name,
        description=data.description,
        location=data.location,
        capacity=data.capacity,
        price_per_day=data.price_per_day,
        amenities=list(data.amenities),
        images=list(data.images),
        owner=data.owner or owner or "admin",
        is_active=True,
    )

    db.add(venue)
    db.commit()
    db.refresh(venue)

    logger.bind(log_type="admin").info(
        f"Venue Created | Venue={venue.id} | Name={venue.name} | Owner={venue.owner}"
    )
    return venue


def update_venue(db: Session, venue_id: int, data: VenueUpdate) -> Venue:
    venue = get_venue(db, venue_id)

    changes = data.model_dump(exclude_unset=True, exclude_none=True)
    if not changes:
        raise InvalidInputError("No fields to update")

    for field, value in changes.items():
        if field in ("amenities", "images"):
            value = list(value)
        setattr(venue, field, value)

    db.commit()
    db.refresh(venue)

    logger.bind(log_type="admin").info(
        f"Venue Updated | Venue={venue.id} | Fields={sorted(changes)}"
    )
    return venue


def deactivate_venue(db: Session, venue_id: int) -> Venue:
    venue = get_venue(db, venue_id)

    venue.is_active = False
    db.commit()
    db.refresh(venue)

    logger.bind(log_type="admin").info(f"Venue Deactivated | Venue={venue.id}")
    return venue
