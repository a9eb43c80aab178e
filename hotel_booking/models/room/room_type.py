"""
Room type model: a sellable category of rooms with its nightly rates.
"""

from decimal import Decimal
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import Boolean, CheckConstraint, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from hotel_booking.models.base.base_model import TimestampModel

if TYPE_CHECKING:
    from hotel_booking.models.room.room import Room


class RoomType(TimestampModel):
    """
    Room category offered for booking.

    Clients refer to a room type by its slug (``standard``, ``deluxe``...).
    Deactivated types stay in the table so historical bookings keep
    their reference.
    """

    __tablename__ = "room_types"

    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    slug: Mapped[str] = mapped_column(String(100), unique=True, nullable=False, index=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    base_price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    weekend_price: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2), nullable=True)
    holiday_price: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2), nullable=True)
    currency: Mapped[str] = mapped_column(String(3), nullable=False, default="PGK")

    max_guests: Mapped[int] = mapped_column(Integer, nullable=False, default=2)
    total_rooms: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, index=True)

    rooms: Mapped[List["Room"]] = relationship("Room", back_populates="room_type")

    __table_args__ = (
        CheckConstraint("base_price >= 0", name="ck_room_type_base_price_non_negative"),
        CheckConstraint("weekend_price IS NULL OR weekend_price >= 0", name="ck_room_type_weekend_price_non_negative"),
        CheckConstraint("holiday_price IS NULL OR holiday_price >= 0", name="ck_room_type_holiday_price_non_negative"),
        CheckConstraint("max_guests >= 1", name="ck_room_type_max_guests_positive"),
    )

    @validates("slug")
    def validate_slug(self, key: str, value: str) -> str:
        value = (value or "").strip().lower()
        if not value:
            raise ValueError("Room type slug cannot be empty")
        return value

    def __repr__(self) -> str:
        return f"<RoomType(slug={self.slug}, base_price={self.base_price})>"
