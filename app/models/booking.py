from sqlalchemy import (
    CheckConstraint, Column, Date, DateTime, Float, ForeignKey, Index, Integer,
    String, func, text
)
from sqlalchemy.orm import relationship
from app.db.session import Base
from app.models.enums import BookingStatus


class Booking(Base):
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, index=True)
    venue_id = Column(Integer, ForeignKey("venues.id"), nullable=False)

    customer_name = Column(String, nullable=False)
    customer_email = Column(String, nullable=False, index=True)
    customer_phone = Column(String, nullable=False)

    booking_date = Column(Date, nullable=False)
    event_type = Column(String, nullable=False)
    guest_count = Column(Integer, nullable=False)

    # Copied from venue.price_per_day when the booking is made
    total_amount = Column(Float, nullable=False)

    status = Column(String, nullable=False, default=BookingStatus.CONFIRMED.value)
    special_requests = Column(String, nullable=False, default="")

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    venue = relationship("Venue", back_populates="bookings")

    __table_args__ = (
        CheckConstraint("guest_count >= 1", name="ck_bookings_guest_count"),
        CheckConstraint("total_amount >= 0", name="ck_bookings_total_amount"),
        Index("ix_bookings_venue_date", "venue_id", "booking_date"),
        # At most one non-cancelled booking per venue per day
        Index(
            "uq_bookings_venue_date_active",
            "venue_id",
            "booking_date",
            unique=True,
            postgresql_where=text("status != 'cancelled'"),
            sqlite_where=text("status != 'cancelled'"),
        ),
    )
