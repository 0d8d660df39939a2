"""
models/reservation.py
---------------------
Domain model for table reservations.
"""

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Optional, Union

from dateutil import parser as date_parser

from models.errors import ValidationError


def _ordinal(day: int) -> str:
    """1 -> '1st', 2 -> '2nd', 11 -> '11th', 23 -> '23rd'."""
    if 11 <= day % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


@dataclass
class Reservation:
    """
    A booking for a number of guests at a given time, owned by a customer.

    Attributes:
        customer_id: Primary key of the owning customer.
        num_guests: Party size, always at least 1.
        start_at: When the reservation starts. Either a datetime or a string
            that dateutil can parse.
        notes: Free-form notes about the booking.
        id: Database primary key (None for new records).

    Every assignment to ``num_guests`` is validated, including the one made
    by ``__init__``, so an instance can never hold a party size below 1.
    """
    customer_id: int
    num_guests: int
    start_at: Union[datetime, str]
    notes: Optional[str] = None
    id: Optional[int] = None

    def __setattr__(self, name, value):
        if name == "num_guests":
            self._check_num_guests(value)
        super().__setattr__(name, value)

    @staticmethod
    def _check_num_guests(num_guests) -> None:
        if isinstance(num_guests, bool) or not isinstance(num_guests, int):
            raise ValidationError("Number of guests must be a whole number.")
        if num_guests < 1:
            raise ValidationError("Number of guests must be at least 1.")

    def set_num_guests(self, num_guests: int) -> None:
        """
        Change the party size.

        Raises:
            ValidationError: If ``num_guests`` is below 1. The current value
                is left untouched.
        """
        self.num_guests = num_guests

    def validate_start_at(self) -> datetime:
        """
        Make sure ``start_at`` is a usable date/time.

        Returns:
            The start time as a datetime.

        Raises:
            ValidationError: If ``start_at`` is missing or unparsable.
        """
        value = self.start_at
        if isinstance(value, datetime):
            return value
        if isinstance(value, date):
            return datetime.combine(value, time.min)
        if isinstance(value, str) and value.strip():
            try:
                return date_parser.parse(value)
            except (ValueError, OverflowError) as e:
                raise ValidationError("Invalid start date.") from e
        raise ValidationError("Invalid start date.")

    def formatted_start_at(self) -> str:
        """Start time for display, e.g. 'April 5th 2024, 7:30 pm'."""
        start = self.validate_start_at()
        hour = start.hour % 12 or 12
        meridiem = "am" if start.hour < 12 else "pm"
        return f"{start:%B} {_ordinal(start.day)} {start.year}, {hour}:{start:%M} {meridiem}"

    def __str__(self) -> str:
        try:
            when = self.formatted_start_at()
        except ValidationError:
            when = str(self.start_at)
        return f"{self.num_guests} guests | {when}"
