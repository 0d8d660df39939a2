"""
repositories/customer_repo.py
-----------------------------
Data access layer for customers.
All SQL queries related to the `customers` table live here.
"""

from typing import Optional

import psycopg2

from config import CHECK_PHONE_ON_UPDATE, TOP_CUSTOMERS_LIMIT
from db.connection import Database
from models.customer import Customer
from models.errors import (
    DuplicatePhoneError,
    FetchError,
    InvalidStateError,
    NotFoundError,
    ValidationError,
)
from models.reservation import Reservation
from repositories.reservation_repo import ReservationRepository
from utils.logger import get_logger

logger = get_logger(__name__)

_COLUMNS = "id, first_name, last_name, phone, notes"


class CustomerRepository:
    """
    Repository for customers.

    Reads wrap driver failures into FetchError. Saves run inside a
    transaction and let driver failures propagate after the rollback.
    """

    def __init__(
        self,
        db: Database,
        reservations: Optional[ReservationRepository] = None,
        check_phone_on_update: bool = CHECK_PHONE_ON_UPDATE,
    ):
        self.db = db
        self.reservations = reservations or ReservationRepository(db)
        self.check_phone_on_update = check_phone_on_update

    # ── READ ──────────────────────────────────────────────

    def list_all(self) -> list[Customer]:
        """Return every customer ordered by last name, then first name."""
        sql = f"SELECT {_COLUMNS} FROM customers ORDER BY last_name, first_name;"
        return self._fetch_customers(sql, (), "customers")

    def search(self, name_part: str) -> list[Customer]:
        """
        Find customers whose first or last name contains ``name_part``.

        Matching is case-insensitive. No match returns an empty list.
        """
        sql = f"""
            SELECT {_COLUMNS} FROM customers
            WHERE first_name ILIKE %s OR last_name ILIKE %s
            ORDER BY last_name, first_name;
        """
        pattern = f"%{name_part}%"
        return self._fetch_customers(sql, (pattern, pattern), "customers")

    def find_top_by_reservation_count(self, limit: int = TOP_CUSTOMERS_LIMIT) -> list[Customer]:
        """
        Return the customers with the most reservations, busiest first.

        Customers without any reservation are never included.

        Args:
            limit: Maximum number of customers to return.

        Raises:
            ValidationError: If ``limit`` is not a whole number of at least 1.
        """
        if isinstance(limit, bool) or not isinstance(limit, int):
            raise ValidationError("Limit must be a whole number.")
        if limit < 1:
            raise ValidationError("Limit must be at least 1.")
        sql = """
            SELECT c.id, c.first_name, c.last_name, c.phone, c.notes,
                   COUNT(r.id) AS reservation_count
            FROM customers c
            JOIN reservations r ON r.customer_id = c.id
            GROUP BY c.id
            ORDER BY reservation_count DESC, c.last_name, c.first_name
            LIMIT %s;
        """
        return self._fetch_customers(sql, (limit,), "top customers")

    def get_by_id(self, customer_id: int) -> Customer:
        """
        Fetch a single customer.

        Raises:
            NotFoundError: If no customer has this id.
            FetchError: If the query fails. The driver error is logged.
        """
        sql = f"SELECT {_COLUMNS} FROM customers WHERE id = %s;"
        try:
            rows = self.db.execute(sql, (customer_id,))
        except psycopg2.Error as e:
            logger.error(f"Failed to fetch customer #{customer_id}: {e}")
            raise FetchError("An error occurred while fetching the customer.") from e
        if not rows:
            raise NotFoundError(f"No such customer: {customer_id}")
        return self._row_to_customer(rows[0])

    def get_reservations(self, customer: Customer) -> list[Reservation]:
        """
        Fetch all reservations of a saved customer.

        Raises:
            InvalidStateError: If the customer has not been saved yet.
            FetchError: If the query fails.
        """
        if customer.id is None:
            raise InvalidStateError("Cannot load reservations for an unsaved customer.")
        return self.reservations.get_for_customer(customer.id)

    # ── CREATE / UPDATE ───────────────────────────────────

    def save(self, customer: Customer) -> Customer:
        """
        Insert a new customer or update an existing one, atomically.

        A new customer (``id`` is None) with a non-empty phone is rejected if
        another customer already has that phone. The check and the insert
        share one transaction. ``customer.id`` is only assigned once the
        transaction has committed.

        Args:
            customer: The Customer to persist.

        Returns:
            The same Customer, with ``id`` populated after an insert.

        Raises:
            ValidationError: If a name is missing. Nothing is written.
            DuplicatePhoneError: If the phone number is already taken.
            NotFoundError: If updating an id that no longer exists.
            psycopg2.Error: Any driver failure, after rollback.
        """
        customer.validate()
        params = (customer.first_name, customer.last_name, customer.phone, customer.notes)

        try:
            with self.db.transaction() as cur:
                if customer.id is None:
                    self._ensure_phone_available(cur, customer.phone)
                    cur.execute(
                        """
                        INSERT INTO customers (first_name, last_name, phone, notes)
                        VALUES (%s, %s, %s, %s)
                        RETURNING id;
                        """,
                        params,
                    )
                    new_id = cur.fetchone()["id"]
                else:
                    if self.check_phone_on_update:
                        self._ensure_phone_available(cur, customer.phone, exclude_id=customer.id)
                    cur.execute(
                        """
                        UPDATE customers
                        SET first_name = %s, last_name = %s, phone = %s, notes = %s
                        WHERE id = %s;
                        """,
                        params + (customer.id,),
                    )
                    if cur.rowcount == 0:
                        raise NotFoundError(f"No such customer: {customer.id}")
        except psycopg2.Error as e:
            logger.error(f"Failed to save customer {customer.full_name()!r}: {e}")
            raise

        if customer.id is None:
            customer.id = new_id
            logger.info(f"Added customer #{customer.id}")
        else:
            logger.info(f"Updated customer #{customer.id}")
        return customer

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _ensure_phone_available(cur, phone: Optional[str], exclude_id: Optional[int] = None) -> None:
        """Raise DuplicatePhoneError if another customer already uses ``phone``."""
        if not phone:
            return
        sql = "SELECT id FROM customers WHERE phone = %s"
        params: list = [phone]
        if exclude_id is not None:
            sql += " AND id <> %s"
            params.append(exclude_id)
        cur.execute(sql + ";", params)
        if cur.fetchone() is not None:
            logger.info("Rejected customer save: phone number already in use.")
            raise DuplicatePhoneError(phone)

    def _fetch_customers(self, sql: str, params: tuple, what: str) -> list[Customer]:
        try:
            rows = self.db.execute(sql, params)
        except psycopg2.Error as e:
            logger.error(f"Failed to fetch {what}: {e}")
            raise FetchError(f"An error occurred while fetching {what}.") from e
        return [self._row_to_customer(r) for r in rows]

    @staticmethod
    def _row_to_customer(row: dict) -> Customer:
        """Convert a database row to a Customer domain object."""
        return Customer(
            id=row["id"],
            first_name=row["first_name"],
            last_name=row["last_name"],
            phone=row["phone"],
            notes=row["notes"],
            reservation_count=row.get("reservation_count"),
        )
