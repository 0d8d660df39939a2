"""
models/ - Domain Models
=======================
Plain dataclasses for customers and reservations plus the shared error types.
Models validate their own fields but never talk to the database.
"""

from models.customer import Customer
from models.errors import (
    DuplicatePhoneError,
    FetchError,
    InvalidStateError,
    LunchlyError,
    NotFoundError,
    PersistenceError,
    SaveError,
    ValidationError,
)
from models.reservation import Reservation

__all__ = [
    "Customer",
    "Reservation",
    "LunchlyError",
    "ValidationError",
    "DuplicatePhoneError",
    "NotFoundError",
    "InvalidStateError",
    "PersistenceError",
    "FetchError",
    "SaveError",
]
