"""
models/customer.py
------------------
Domain model for restaurant customers.
"""

from dataclasses import dataclass, field
from typing import Optional

from models.errors import ValidationError


@dataclass
class Customer:
    """
    A person who books tables at the restaurant.

    Attributes:
        first_name: Given name (required before saving).
        last_name: Family name (required before saving).
        phone: Contact number; when non-empty it must be unique on create.
        notes: Free-form notes about the customer.
        id: Database primary key (None for new records).
        reservation_count: Number of reservations, only filled in by the
            ranking query.
    """
    first_name: str
    last_name: str
    phone: Optional[str] = None
    notes: Optional[str] = None
    id: Optional[int] = None
    reservation_count: Optional[int] = field(default=None, compare=False)

    def full_name(self) -> str:
        """Returns first and last name separated by a space."""
        return f"{self.first_name} {self.last_name}"

    def validate(self) -> None:
        """
        Check the fields required for saving.

        Raises:
            ValidationError: If either name is empty or missing.
        """
        if not self.first_name or not self.last_name:
            raise ValidationError("missing name")

    def is_persisted(self) -> bool:
        return self.id is not None

    def __str__(self) -> str:
        return self.full_name()
