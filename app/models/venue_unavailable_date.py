from sqlalchemy import Column, Date, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from app.db.session import Base
from app.models.enums import DEFAULT_BLOCK_REASON


class VenueUnavailableDate(Base):
    __tablename__ = "venue_unavailable_dates"

    id = Column(Integer, primary_key=True, index=True)
    venue_id = Column(
        Integer, ForeignKey("venues.id", ondelete="CASCADE"), nullable=False, index=True
    )

    date = Column(Date, nullable=False, index=True)
    reason = Column(String, nullable=False, default=DEFAULT_BLOCK_REASON)

    venue = relationship("Venue", back_populates="unavailable_dates")
