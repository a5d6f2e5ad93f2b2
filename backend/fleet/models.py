"""
Fleet records: cars and bookings as one tagged record type.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple


class VehicleKind(Enum):
    CAR = "car"
    BOOKING = "booking"


@dataclass
class Vehicle:
    """
    A fleet entry. `kind` decides which of the optional fields are used:
    cars carry car_type and seating_capacity, bookings carry start_date
    and end_date.
    """

    kind: VehicleKind
    model: str
    make: str
    mileage: int
    rate_per_day: str
    car_type: Optional[str] = None
    seating_capacity: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    rented: bool = False

    def __post_init__(self):
        if self.mileage < 0:
            raise ValueError(f"Mileage cannot be negative, got {self.mileage}")

    @classmethod
    def car(cls, model: str, make: str, mileage: int, rate_per_day: str,
            car_type: str, seating_capacity: str) -> "Vehicle":
        return cls(VehicleKind.CAR, model, make, mileage, rate_per_day,
                   car_type=car_type, seating_capacity=seating_capacity)

    @classmethod
    def booking(cls, model: str, make: str, mileage: int, rate_per_day: str,
                start_date: str, end_date: str) -> "Vehicle":
        return cls(VehicleKind.BOOKING, model, make, mileage, rate_per_day,
                   start_date=start_date, end_date=end_date)

    @property
    def is_available(self) -> bool:
        return not self.rented

    def start_rental(self) -> bool:
        """Mark as rented. False if it already was."""
        if self.rented:
            return False
        self.rented = True
        return True

    def end_rental(self) -> bool:
        """Mark as returned. False if it was not rented."""
        if not self.rented:
            return False
        self.rented = False
        return True

    def details(self) -> List[Tuple[str, str]]:
        """Label/value lines for display, common fields first."""
        lines = [
            ("Model", self.model),
            ("Make", self.make),
            ("Mileage", str(self.mileage)),
            ("Rate Per Day", self.rate_per_day),
        ]
        if self.kind is VehicleKind.CAR:
            lines.append(("Type", self.car_type or ""))
            lines.append(("Seating Capacity", self.seating_capacity or ""))
        else:
            lines.append(("Start Date", self.start_date or ""))
            lines.append(("End Date", self.end_date or ""))
        return lines
