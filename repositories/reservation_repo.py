"""
repositories/reservation_repo.py
--------------------------------
Data access layer for reservations.
All SQL queries related to the `reservations` table live here.
"""

import psycopg2

from db.connection import Database
from models.errors import FetchError, NotFoundError, SaveError
from models.reservation import Reservation
from utils.logger import get_logger

logger = get_logger(__name__)

_COLUMNS = "id, customer_id, num_guests, start_at, notes"


class ReservationRepository:
    """Repository for reading and saving rows of the reservations table."""

    def __init__(self, db: Database):
        self.db = db

    # ── READ ──────────────────────────────────────────────

    def get_for_customer(self, customer_id: int) -> list[Reservation]:
        """
        Fetch every reservation belonging to a customer.

        Args:
            customer_id: Primary key of the customer.

        Returns:
            List of Reservation objects ordered by start time.

        Raises:
            FetchError: If the query fails. The driver error is logged.
        """
        sql = f"SELECT {_COLUMNS} FROM reservations WHERE customer_id = %s ORDER BY start_at;"
        try:
            rows = self.db.execute(sql, (customer_id,))
        except psycopg2.Error as e:
            logger.error(f"Failed to fetch reservations for customer #{customer_id}: {e}")
            raise FetchError("An error occurred while fetching reservations.") from e
        return [self._row_to_reservation(r) for r in rows]

    def get_by_id(self, reservation_id: int) -> Reservation:
        """
        Fetch a single reservation.

        Raises:
            NotFoundError: If no reservation has this id.
            FetchError: If the query fails.
        """
        sql = f"SELECT {_COLUMNS} FROM reservations WHERE id = %s;"
        try:
            rows = self.db.execute(sql, (reservation_id,))
        except psycopg2.Error as e:
            logger.error(f"Failed to fetch reservation #{reservation_id}: {e}")
            raise FetchError("An error occurred while fetching the reservation.") from e
        if not rows:
            raise NotFoundError(f"No such reservation: {reservation_id}")
        return self._row_to_reservation(rows[0])

    # ── CREATE / UPDATE ───────────────────────────────────

    def save(self, reservation: Reservation) -> Reservation:
        """
        Insert a new reservation or update an existing one.

        Runs as a single statement without a surrounding transaction: an
        INSERT when ``reservation.id`` is None, an UPDATE otherwise. The
        customer reference is not checked here; the schema's foreign key
        decides.

        Args:
            reservation: The Reservation to persist.

        Returns:
            The same Reservation, with ``id`` populated after an insert.

        Raises:
            ValidationError: If the start time or party size is invalid.
                Nothing is written.
            NotFoundError: If updating an id that no longer exists.
            SaveError: If the statement fails. The driver error is logged.
        """
        start_at = reservation.validate_start_at()
        reservation.set_num_guests(reservation.num_guests)

        params = (reservation.customer_id, reservation.num_guests, start_at, reservation.notes)
        try:
            if reservation.id is None:
                rows = self.db.execute(
                    """
                    INSERT INTO reservations (customer_id, num_guests, start_at, notes)
                    VALUES (%s, %s, %s, %s)
                    RETURNING id;
                    """,
                    params,
                )
            else:
                rows = self.db.execute(
                    """
                    UPDATE reservations
                    SET customer_id = %s, num_guests = %s, start_at = %s, notes = %s
                    WHERE id = %s
                    RETURNING id;
                    """,
                    params + (reservation.id,),
                )
        except psycopg2.Error as e:
            logger.error(f"Failed to save reservation for customer #{reservation.customer_id}: {e}")
            raise SaveError("An error occurred while saving the reservation.") from e

        if not rows:
            raise NotFoundError(f"No such reservation: {reservation.id}")
        if reservation.id is None:
            reservation.id = rows[0]["id"]
            logger.info(f"Added reservation #{reservation.id} for customer #{reservation.customer_id}")
        else:
            logger.info(f"Updated reservation #{reservation.id}")
        return reservation

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_reservation(row: dict) -> Reservation:
        """Convert a database row to a Reservation domain object."""
        return Reservation(
            id=row["id"],
            customer_id=row["customer_id"],
            num_guests=row["num_guests"],
            start_at=row["start_at"],
            notes=row["notes"],
        )
