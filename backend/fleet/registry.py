"""
In-memory fleet with explicit capacity limits.
"""

import logging
from enum import Enum
from typing import List, Tuple

from .models import Vehicle, VehicleKind

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 10
DEFAULT_BOOKING_CAPACITY = 100


class AddResult(Enum):
    ADDED = "added"
    CAPACITY_EXCEEDED = "capacity_exceeded"


class Fleet:
    """
    Ordered collections of cars and bookings.

    Adding beyond capacity stores nothing and returns
    AddResult.CAPACITY_EXCEEDED rather than raising.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY,
                 booking_capacity: int = DEFAULT_BOOKING_CAPACITY):
        if capacity <= 0 or booking_capacity <= 0:
            raise ValueError(
                f"Capacities must be positive (cars={capacity}, bookings={booking_capacity})"
            )
        self.capacity = capacity
        self.booking_capacity = booking_capacity
        self._cars: List[Vehicle] = []
        self._bookings: List[Vehicle] = []

    def add_car(self, vehicle: Vehicle) -> AddResult:
        if vehicle.kind is not VehicleKind.CAR:
            raise ValueError(f"Expected a car, got a {vehicle.kind.value}")
        return self._add(self._cars, self.capacity, vehicle)

    def add_booking(self, booking: Vehicle) -> AddResult:
        if booking.kind is not VehicleKind.BOOKING:
            raise ValueError(f"Expected a booking, got a {booking.kind.value}")
        return self._add(self._bookings, self.booking_capacity, booking)

    def _add(self, items: List[Vehicle], capacity: int, record: Vehicle) -> AddResult:
        if len(items) >= capacity:
            logger.warning(
                "Rejected %s %s %s: capacity of %s reached",
                record.kind.value, record.make, record.model, capacity,
            )
            return AddResult.CAPACITY_EXCEEDED
        items.append(record)
        logger.info("Added %s #%s: %s %s", record.kind.value, len(items), record.make, record.model)
        return AddResult.ADDED

    def cars(self) -> Tuple[Vehicle, ...]:
        return tuple(self._cars)

    def bookings(self) -> Tuple[Vehicle, ...]:
        return tuple(self._bookings)

    @property
    def is_full(self) -> bool:
        return len(self._cars) >= self.capacity

    def __len__(self) -> int:
        return len(self._cars)
