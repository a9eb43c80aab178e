"""
Booking models.

A booking holds a stay for a room type (optionally a specific room),
the guest details, a pricing snapshot taken at creation and the payment
outcome. Bookings are never deleted; cancellation is a status change
recorded in the status history.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from sqlalchemy import (
    CheckConstraint,
    Date,
    DateTime,
    Enum as SAEnum,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from hotel_booking.models.base.base_model import BaseModel, TimestampModel
from hotel_booking.models.base.enums import BookingStatus, PaymentStatus, enum_values
from hotel_booking.utils.date_utils import now_utc

if TYPE_CHECKING:
    from hotel_booking.models.room.room import Room
    from hotel_booking.models.room.room_type import RoomType


def _booking_status_enum() -> SAEnum:
    return SAEnum(BookingStatus, values_callable=enum_values, native_enum=False, length=20)


class Booking(TimestampModel):
    """
    Guest reservation with its pricing snapshot.

    Attributes:
        booking_reference: Public identifier handed to the guest
        room_type_id: Booked room type
        room_id: Specific room, when one was requested
        check_in / check_out: Half-open stay interval [check_in, check_out)
        status / payment_status: Lifecycle and payment state
        base_rate .. currency: Pricing snapshot, never recomputed
    """

    __tablename__ = "bookings"

    booking_reference: Mapped[str] = mapped_column(String(50), nullable=False, index=True)

    room_type_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("room_types.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    room_id: Mapped[Optional[str]] = mapped_column(
        String(36),
        ForeignKey("rooms.id", ondelete="RESTRICT"),
        nullable=True,
        index=True,
    )

    check_in: Mapped[date] = mapped_column(Date, nullable=False)
    check_out: Mapped[date] = mapped_column(Date, nullable=False)

    # Guest information
    guest_name: Mapped[str] = mapped_column(String(255), nullable=False)
    guest_email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    guest_phone: Mapped[str] = mapped_column(String(50), nullable=False)
    number_of_guests: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    special_requests: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    status: Mapped[BookingStatus] = mapped_column(
        _booking_status_enum(),
        nullable=False,
        default=BookingStatus.PENDING,
        index=True,
    )
    payment_status: Mapped[PaymentStatus] = mapped_column(
        SAEnum(PaymentStatus, values_callable=enum_values, native_enum=False, length=20),
        nullable=False,
        default=PaymentStatus.PENDING,
    )

    # Pricing snapshot
    base_rate: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    nights: Mapped[int] = mapped_column(Integer, nullable=False)
    subtotal: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    taxes: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    total_amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    deposit_required: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    remaining_amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    tax_rate: Mapped[Decimal] = mapped_column(Numeric(5, 4), nullable=False)
    deposit_percentage: Mapped[Decimal] = mapped_column(Numeric(5, 4), nullable=False)
    currency: Mapped[str] = mapped_column(String(3), nullable=False)

    # Payment
    paid_amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False, default=Decimal("0"))
    transaction_id: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    payment_method: Mapped[Optional[str]] = mapped_column(String(30), nullable=True)
    payment_processed_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)

    # Lifecycle timestamps
    checked_in_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    checked_out_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    cancelled_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    cancellation_reason: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Relationships
    room_type: Mapped["RoomType"] = relationship("RoomType", lazy="select")
    room: Mapped[Optional["Room"]] = relationship("Room", lazy="select")
    additional_guests: Mapped[List["AdditionalGuest"]] = relationship(
        "AdditionalGuest",
        back_populates="booking",
        cascade="all, delete-orphan",
        order_by="AdditionalGuest.position",
        lazy="selectin",
    )
    status_history: Mapped[List["BookingStatusHistory"]] = relationship(
        "BookingStatusHistory",
        back_populates="booking",
        cascade="all, delete-orphan",
        order_by="BookingStatusHistory.changed_at",
        lazy="select",
    )

    __table_args__ = (
        UniqueConstraint("booking_reference", name="uq_booking_reference"),
        Index("ix_booking_room_type_dates", "room_type_id", "check_in", "check_out"),
        Index("ix_booking_status_created", "status", "created_at"),
        CheckConstraint("check_out > check_in", name="ck_booking_dates_order"),
        CheckConstraint("number_of_guests >= 1", name="ck_booking_guests_positive"),
        CheckConstraint("nights >= 1", name="ck_booking_nights_positive"),
        CheckConstraint("total_amount >= 0", name="ck_booking_total_non_negative"),
        CheckConstraint("paid_amount >= 0", name="ck_booking_paid_non_negative"),
    )

    @validates("guest_email")
    def validate_guest_email(self, key: str, value: str) -> str:
        return value.strip().lower()

    @validates("subtotal", "taxes", "total_amount", "deposit_required", "remaining_amount", "paid_amount")
    def validate_amounts(self, key: str, value: Decimal) -> Decimal:
        """Monetary amounts are non-negative."""
        if value is not None and value < 0:
            raise ValueError(f"{key} cannot be negative")
        return value

    @property
    def is_active(self) -> bool:
        return self.status.is_active

    def pricing_snapshot(self) -> Dict[str, Any]:
        return {
            "base_rate": self.base_rate,
            "nights": self.nights,
            "subtotal": self.subtotal,
            "taxes": self.taxes,
            "total_amount": self.total_amount,
            "deposit_required": self.deposit_required,
            "remaining_amount": self.remaining_amount,
            "tax_rate": self.tax_rate,
            "deposit_percentage": self.deposit_percentage,
            "currency": self.currency,
        }

    def __repr__(self) -> str:
        return (
            f"<Booking(reference={self.booking_reference}, "
            f"{self.check_in}..{self.check_out}, status={self.status})>"
        )


class AdditionalGuest(BaseModel):
    """Companion travelling on a booking."""

    __tablename__ = "booking_additional_guests"

    booking_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("bookings.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    age: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    booking: Mapped["Booking"] = relationship("Booking", back_populates="additional_guests")

    __table_args__ = (
        CheckConstraint("age IS NULL OR age >= 0", name="ck_additional_guest_age_non_negative"),
    )


class BookingStatusHistory(BaseModel):
    """
    Booking status change history for audit trail.

    ``from_status`` is NULL for the row written when the booking is created.
    """

    __tablename__ = "booking_status_history"

    booking_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("bookings.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    from_status: Mapped[Optional[BookingStatus]] = mapped_column(_booking_status_enum(), nullable=True)
    to_status: Mapped[BookingStatus] = mapped_column(_booking_status_enum(), nullable=False)
    reason: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    changed_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=now_utc,
        index=True,
    )

    booking: Mapped["Booking"] = relationship("Booking", back_populates="status_history")

    __table_args__ = (
        Index("ix_status_history_booking_changed", "booking_id", "changed_at"),
    )

    def __repr__(self) -> str:
        return f"<BookingStatusHistory(booking_id={self.booking_id}, {self.from_status} -> {self.to_status})>"
