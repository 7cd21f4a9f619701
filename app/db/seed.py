"""
Load sample venues into an empty database.

    python -m app.db.seed          # keeps existing venues
    python -m app.db.seed --reset  # deactivates existing venues first
"""
import sys

from sqlalchemy.orm import Session

from app.core.logging_config import get_logger
from app.db.session import Base, SessionLocal, engine
from app.models.admin import Admin  # noqa: F401
from app.models.venue import Venue
from app.schemas.venue import VenueCreate
from app.services.venues import create_venue

logger = get_logger()

SAMPLE_VENUES = [
    VenueCreate(
        name="Grand Ballroom",
        description="Elegant ballroom perfect for weddings and corporate events",
        location="Downtown Convention Center",
        capacity=200,
        price_per_day=2500,
        amenities=["Audio/Visual Equipment", "Catering Kitchen", "Dance Floor", "Parking"],
    ),
    VenueCreate(
        name="Garden Pavilion",
        description="Beautiful outdoor venue with garden views",
        location="City Park",
        capacity=150,
        price_per_day=1800,
        amenities=["Outdoor Seating", "Garden Views", "Tent Option", "Parking"],
    ),
    VenueCreate(
        name="Conference Hall A",
        description="Modern conference facility for business meetings",
        location="Business District",
        capacity=100,
        price_per_day=1200,
        amenities=["Projector", "Whiteboard", "WiFi", "Coffee Station"],
    ),
    VenueCreate(
        name="Rooftop Terrace",
        description="Stunning rooftop venue with city skyline views",
        location="Midtown Hotel",
        capacity=80,
        price_per_day=2000,
        amenities=["City Views", "Bar Setup", "Lounge Seating", "Climate Control"],
    ),
]


def seed(db: Session, reset: bool = False) -> int:
    """Insert the sample venues; returns how many were created."""
    if reset:
        db.query(Venue).update({"is_active": False})
        db.commit()
    elif db.query(Venue).filter(Venue.is_active.is_(True)).count() > 0:
        logger.info("Venues already seeded, skipping")
        return 0

    for data in SAMPLE_VENUES:
        create_venue(db, data)

    logger.info(f"{len(SAMPLE_VENUES)} venues created successfully")
    return len(SAMPLE_VENUES)


if __name__ == "__main__":
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        seed(db, reset="--reset" in sys.argv[1:])
    finally:
        db.close()
