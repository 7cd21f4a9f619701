from typing import Iterable, Optional

from sqlalchemy.orm import Session

from app.core.errors import InvalidInputError
from app.core.logging_config import get_logger
from app.models.enums import DEFAULT_BLOCK_REASON
from app.models.venue import Venue
from app.models.venue_unavailable_date import VenueUnavailableDate
from app.services.venues import get_venue
from app.utils.dates import to_calendar_day

logger = get_logger()


def _parse_days(dates: Iterable) -> list:
    days = []
    for value in dates or []:
        try:
            days.append(to_calendar_day(value))
        except ValueError:
            raise InvalidInputError(f"Invalid date: {value}")

    if not days:
        raise InvalidInputError("At least one date is required")
    return days


def block_dates(
    db: Session, venue_id: int, dates: Iterable, reason: Optional[str] = None
) -> Venue:
    """Append one block per date. Already-blocked days get a second entry."""
    venue = get_venue(db, venue_id)

    # Parse everything up front so a bad entry leaves the venue untouched
    days = _parse_days(dates)
    reason = (reason or "").strip() or DEFAULT_BLOCK_REASON

    for day in days:
        venue.unavailable_dates.append(VenueUnavailableDate(date=day, reason=reason))

    db.commit()
    db.refresh(venue)

    logger.bind(log_type="admin").info(
        f"Dates Blocked | Venue={venue.id} | Dates={[d.isoformat() for d in days]}"
    )
    return venue


def unblock_dates(db: Session, venue_id: int, dates: Iterable) -> Venue:
    """Drop every block on any of the given days. Unknown days are ignored."""
    venue = get_venue(db, venue_id)
    days = set(_parse_days(dates))

    venue.unavailable_dates = [
        entry for entry in venue.unavailable_dates if entry.date not in days
    ]

    db.commit()
    db.refresh(venue)

    logger.bind(log_type="admin").info(
        f"Dates Unblocked | Venue={venue.id} | Dates={sorted(d.isoformat() for d in days)}"
    )
    return venue
