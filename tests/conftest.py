"""Pytest configuration and fixtures for the Lunchly persistence tests.

No live PostgreSQL is needed: repositories get a FakeDatabase whose
``execute`` and transaction cursor are MagicMocks.
"""

from contextlib import contextmanager
from datetime import datetime
from typing import Iterator
from unittest.mock import MagicMock

import pytest

from models.customer import Customer
from models.reservation import Reservation


class FakeDatabase:
    """Stand-in for db.connection.Database that records what happened."""

    def __init__(self) -> None:
        self.execute = MagicMock(return_value=[])
        self.cursor = MagicMock()
        self.cursor.fetchone.return_value = None
        self.cursor.rowcount = 1
        self.commits = 0
        self.rollbacks = 0

    @contextmanager
    def transaction(self) -> Iterator[MagicMock]:
        try:
            yield self.cursor
        except Exception:
            self.rollbacks += 1
            raise
        self.commits += 1

    def executed_sql(self) -> list[str]:
        """SQL text of every statement run through the transaction cursor."""
        return [c.args[0] for c in self.cursor.execute.call_args_list]


@pytest.fixture
def fake_db() -> FakeDatabase:
    return FakeDatabase()


@pytest.fixture
def ann() -> Customer:
    return Customer(first_name="Ann", last_name="Lee", phone="555-1111")


@pytest.fixture
def reservation() -> Reservation:
    return Reservation(customer_id=1, num_guests=4, start_at=datetime(2024, 4, 5, 19, 30))


def customer_row(id: int, first: str, last: str, phone=None, notes=None, **extra) -> dict:
    row = {"id": id, "first_name": first, "last_name": last, "phone": phone, "notes": notes}
    row.update(extra)
    return row


def reservation_row(id: int, customer_id: int, num_guests: int = 2, start_at=None, notes=None) -> dict:
    return {
        "id": id,
        "customer_id": customer_id,
        "num_guests": num_guests,
        "start_at": start_at or datetime(2024, 4, 5, 19, 30),
        "notes": notes,
    }
