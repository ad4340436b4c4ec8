"""
Enum type definitions for the ride-hailing backend.

These enums map directly to PostgreSQL ENUM types created by the baseline
migration.
"""
from enum import Enum


class UserRole(str, Enum):
    """
    Account role used by the authorization gate.

    - RIDER: default role assigned on signup
    - DRIVER: granted when the user registers a driver profile
    """
    RIDER = "RIDER"
    DRIVER = "DRIVER"


class Language(str, Enum):
    """App interface language preferred by a driver."""
    HINDI = "HINDI"
    ENGLISH = "ENGLISH"
    MARATHI = "MARATHI"
    TAMIL = "TAMIL"
    TELUGU = "TELUGU"
    KANNADA = "KANNADA"
    BENGALI = "BENGALI"
    GUJARATI = "GUJARATI"


class City(str, Enum):
    """Cities where drivers can operate."""
    MUMBAI = "MUMBAI"
    DELHI = "DELHI"
    BANGALORE = "BANGALORE"
    HYDERABAD = "HYDERABAD"
    CHENNAI = "CHENNAI"
    KOLKATA = "KOLKATA"
    PUNE = "PUNE"
    AHMEDABAD = "AHMEDABAD"


class VehicleType(str, Enum):
    CAR = "CAR"
    BIKE = "BIKE"
    AUTO = "AUTO"
    E_RICKSHAW = "E_RICKSHAW"
    ELECTRIC_SCOOTER = "ELECTRIC_SCOOTER"
