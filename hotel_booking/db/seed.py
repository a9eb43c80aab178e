"""Demo catalogue seeding."""
from decimal import Decimal
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from hotel_booking.config.settings import settings
from hotel_booking.core.logging import get_logger
from hotel_booking.models.room.room import Room
from hotel_booking.models.room.room_type import RoomType
from hotel_booking.repositories.room.room_type_repository import RoomTypeRepository

logger = get_logger(__name__)

DEMO_ROOM_TYPES: List[Dict[str, Any]] = [
    {
        "name": "Standard Room",
        "slug": "standard",
        "description": "Comfortable room with modern amenities and complimentary breakfast.",
        "base_price": Decimal("199"),
        "max_guests": 2,
        "floor": 1,
    },
    {
        "name": "Deluxe Room",
        "slug": "deluxe",
        "description": "Spacious room with a sitting area and city views.",
        "base_price": Decimal("299"),
        "max_guests": 3,
        "floor": 2,
    },
    {
        "name": "Suite",
        "slug": "suite",
        "description": "Separate living room and bedroom with premium amenities.",
        "base_price": Decimal("499"),
        "max_guests": 4,
        "floor": 3,
    },
    {
        "name": "Presidential Suite",
        "slug": "presidential",
        "description": "Top floor suite with panoramic views and butler service.",
        "base_price": Decimal("899"),
        "max_guests": 6,
        "floor": 4,
    },
]

ROOMS_PER_TYPE = 3


def seed_room_types(db: Session, currency: Optional[str] = None) -> int:
    """
    Insert the demo room types and their rooms when the catalogue is empty.

    Returns:
        Number of room types inserted
    """
    existing = RoomTypeRepository(db).count()
    if existing:
        logger.debug("Room catalogue already populated", extra={"room_types": existing})
        return 0

    currency = currency or settings.CURRENCY
    for sort_order, entry in enumerate(DEMO_ROOM_TYPES, start=1):
        room_type = RoomType(
            name=entry["name"],
            slug=entry["slug"],
            description=entry["description"],
            base_price=entry["base_price"],
            currency=currency,
            max_guests=entry["max_guests"],
            total_rooms=ROOMS_PER_TYPE,
            sort_order=sort_order,
            is_active=True,
        )
        room_type.rooms = [
            Room(room_number=f"{entry['floor']}{index:02d}", floor=entry["floor"])
            for index in range(1, ROOMS_PER_TYPE + 1)
        ]
        db.add(room_type)

    db.commit()
    logger.info("Seeded demo room catalogue", extra={"room_types": len(DEMO_ROOM_TYPES)})
    return len(DEMO_ROOM_TYPES)
