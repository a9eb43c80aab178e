"""
Room type repository.
"""

from typing import List, Optional

from sqlalchemy import or_, select
from sqlalchemy.orm import Session

from hotel_booking.models.room.room import Room
from hotel_booking.models.room.room_type import RoomType
from hotel_booking.repositories.base.base_repository import BaseRepository


class RoomTypeRepository(BaseRepository[RoomType]):
    """Read access to the room catalogue."""

    def __init__(self, db: Session):
        super().__init__(RoomType, db)

    def find_by_slug(self, slug: str, active_only: bool = True) -> Optional[RoomType]:
        stmt = select(RoomType).where(RoomType.slug == slug.lower())
        if active_only:
            stmt = stmt.where(RoomType.is_active.is_(True))
        return self.db.scalar(stmt)

    def find_by_key_for_update(self, key: str) -> Optional[RoomType]:
        """
        Resolve an active room type by slug or id and lock its row.

        The lock serializes booking attempts for the same room type until
        the surrounding transaction ends.
        """
        stmt = (
            select(RoomType)
            .where(or_(RoomType.slug == key.lower(), RoomType.id == key))
            .where(RoomType.is_active.is_(True))
            .with_for_update()
        )
        return self.db.scalar(stmt)

    def list_active(self) -> List[RoomType]:
        stmt = (
            select(RoomType)
            .where(RoomType.is_active.is_(True))
            .order_by(RoomType.sort_order, RoomType.name)
        )
        return list(self.db.scalars(stmt))


class RoomRepository(BaseRepository[Room]):
    """Access to individual rooms."""

    def __init__(self, db: Session):
        super().__init__(Room, db)

    def find_in_room_type(self, room_id: str, room_type_id: str) -> Optional[Room]:
        stmt = select(Room).where(Room.id == room_id, Room.room_type_id == room_type_id)
        return self.db.scalar(stmt)
