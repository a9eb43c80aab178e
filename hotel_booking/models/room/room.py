"""
Room model: an individual bookable unit of a room type.
"""

from typing import TYPE_CHECKING, Optional

from sqlalchemy import Enum as SAEnum
from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hotel_booking.models.base.base_model import TimestampModel
from hotel_booking.models.base.enums import RoomStatus, enum_values

if TYPE_CHECKING:
    from hotel_booking.models.room.room_type import RoomType


class Room(TimestampModel):
    """Physical room; its status gates whether it can be sold."""

    __tablename__ = "rooms"

    room_number: Mapped[str] = mapped_column(String(20), unique=True, nullable=False)
    room_type_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("room_types.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    floor: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    status: Mapped[RoomStatus] = mapped_column(
        SAEnum(RoomStatus, values_callable=enum_values, native_enum=False, length=20),
        nullable=False,
        default=RoomStatus.AVAILABLE,
    )

    room_type: Mapped["RoomType"] = relationship("RoomType", back_populates="rooms")

    @property
    def is_offerable(self) -> bool:
        return self.status.is_offerable

    def __repr__(self) -> str:
        return f"<Room(room_number={self.room_number}, status={self.status})>"
