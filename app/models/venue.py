from sqlalchemy import (
    JSON, Boolean, CheckConstraint, Column, DateTime, Float, Integer, String, func
)
from sqlalchemy.orm import relationship
from app.db.session import Base

# Imported so the string relationships below resolve
from app.models.booking import Booking  # noqa: F401
from app.models.venue_unavailable_date import VenueUnavailableDate  # noqa: F401


class Venue(Base):
    __tablename__ = "venues"

    id = Column(Integer, primary_key=True, index=True)

    name = Column(String, nullable=False)
    description = Column(String, nullable=False)
    location = Column(String, nullable=False)
    capacity = Column(Integer, nullable=False)
    price_per_day = Column(Float, nullable=False, default=0.0)

    # Ordered lists, replaced wholesale on update
    amenities = Column(JSON, nullable=False, default=list)
    images = Column(JSON, nullable=False, default=list)

    owner = Column(String, nullable=False, default="admin")

    # Soft delete flag; venues are never removed
    is_active = Column(Boolean, nullable=False, default=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    # RELATIONSHIPS -------------------------------------

    # Admin-imposed blocks, owned by the venue
    unavailable_dates = relationship(
        "VenueUnavailableDate",
        back_populates="venue",
        cascade="all, delete-orphan",
        order_by="VenueUnavailableDate.id",
    )

    # Bookings hold a plain foreign key; nothing cascades from here
    bookings = relationship("Booking", back_populates="venue")

    __table_args__ = (
        CheckConstraint("capacity >= 1", name="ck_venues_capacity"),
        CheckConstraint("price_per_day >= 0", name="ck_venues_price_per_day"),
    )
