"""Create admins, venues, unavailable dates and bookings

Revision ID: 3b1c9a7d2e40
Revises:
Create Date: 2026-10-19 10:12:03.511204

"""
from alembic import op
import sqlalchemy as sa


revision = "3b1c9a7d2e40"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "admins",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("password_hash", sa.String(), nullable=False),
    )
    op.create_index("ix_admins_id", "admins", ["id"])
    op.create_index("ix_admins_email", "admins", ["email"], unique=True)

    op.create_table(
        "venues",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("description", sa.String(), nullable=False),
        sa.Column("location", sa.String(), nullable=False),
        sa.Column("capacity", sa.Integer(), nullable=False),
        sa.Column("price_per_day", sa.Float(), nullable=False),
        sa.Column("amenities", sa.JSON(), nullable=False),
        sa.Column("images", sa.JSON(), nullable=False),
        sa.Column("owner", sa.String(), nullable=False, server_default="admin"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.CheckConstraint("capacity >= 1", name="ck_venues_capacity"),
        sa.CheckConstraint("price_per_day >= 0", name="ck_venues_price_per_day"),
    )
    op.create_index("ix_venues_id", "venues", ["id"])

    op.create_table(
        "venue_unavailable_dates",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "venue_id",
            sa.Integer(),
            sa.ForeignKey("venues.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("reason", sa.String(), nullable=False, server_default="Blocked by admin"),
    )
    op.create_index("ix_venue_unavailable_dates_id", "venue_unavailable_dates", ["id"])
    op.create_index("ix_venue_unavailable_dates_venue_id", "venue_unavailable_dates", ["venue_id"])
    op.create_index("ix_venue_unavailable_dates_date", "venue_unavailable_dates", ["date"])

    op.create_table(
        "bookings",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("venue_id", sa.Integer(), sa.ForeignKey("venues.id"), nullable=False),
        sa.Column("customer_name", sa.String(), nullable=False),
        sa.Column("customer_email", sa.String(), nullable=False),
        sa.Column("customer_phone", sa.String(), nullable=False),
        sa.Column("booking_date", sa.Date(), nullable=False),
        sa.Column("event_type", sa.String(), nullable=False),
        sa.Column("guest_count", sa.Integer(), nullable=False),
        sa.Column("total_amount", sa.Float(), nullable=False),
        sa.Column("status", sa.String(), nullable=False, server_default="confirmed"),
        sa.Column("special_requests", sa.String(), nullable=False, server_default=""),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.CheckConstraint("guest_count >= 1", name="ck_bookings_guest_count"),
        sa.CheckConstraint("total_amount >= 0", name="ck_bookings_total_amount"),
    )
    op.create_index("ix_bookings_id", "bookings", ["id"])
    op.create_index("ix_bookings_customer_email", "bookings", ["customer_email"])
    op.create_index("ix_bookings_venue_date", "bookings", ["venue_id", "booking_date"])

    # One live booking per venue per day
    op.create_index(
        "uq_bookings_venue_date_active",
        "bookings",
        ["venue_id", "booking_date"],
        unique=True,
        postgresql_where=sa.text("status != 'cancelled'"),
        sqlite_where=sa.text("status != 'cancelled'"),
    )


def downgrade():
    op.drop_index("uq_bookings_venue_date_active", table_name="bookings")
    op.drop_table("bookings")
    op.drop_table("venue_unavailable_dates")
    op.drop_table("venues")
    op.drop_table("admins")
