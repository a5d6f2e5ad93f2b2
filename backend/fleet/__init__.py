"""
Car-rental fleet tracking: vehicle records and a capacity-bounded fleet.
"""

from .models import Vehicle, VehicleKind
from .registry import Fleet, AddResult, DEFAULT_CAPACITY, DEFAULT_BOOKING_CAPACITY

__all__ = [
    'Vehicle',
    'VehicleKind',
    'Fleet',
    'AddResult',
    'DEFAULT_CAPACITY',
    'DEFAULT_BOOKING_CAPACITY',
]
