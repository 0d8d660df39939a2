"""
db/connection.py
----------------
Owns the PostgreSQL connection pool and exposes the two primitives the
repositories build on: a single auto-committed statement (`execute`) and a
scoped transaction (`transaction`).

Uses psycopg2's ThreadedConnectionPool so one Database can be shared by
concurrent callers, and RealDictCursor so rows come back keyed by column alias.
"""

import threading
from contextlib import contextmanager
from typing import Iterator, Optional, Sequence

import psycopg2
from psycopg2 import pool, extras

from config import DATABASE_URL, DB_POOL_MAX, DB_POOL_MIN
from utils.logger import get_logger

logger = get_logger(__name__)


class Database:
    """
    Connection provider handed to every repository at construction.

    The pool is created lazily on first use, so building a Database does not
    touch the network.
    """

    def __init__(
        self,
        dsn: str = DATABASE_URL,
        min_conn: int = DB_POOL_MIN,
        max_conn: int = DB_POOL_MAX,
        connection_pool: Optional[pool.AbstractConnectionPool] = None,
    ):
        self.dsn = dsn
        self.min_conn = min_conn
        self.max_conn = max_conn
        self._pool = connection_pool
        self._pool_lock = threading.Lock()

    # ── POOL ──────────────────────────────────────────────

    def open(self) -> None:
        """
        Initialize the connection pool if it is not open yet.
        Concurrent first callers share a single pool.

        Raises:
            psycopg2.OperationalError: If the database is unreachable.
        """
        if self._pool is not None:
            return
        with self._pool_lock:
            if self._pool is not None:
                return
            try:
                self._pool = pool.ThreadedConnectionPool(self.min_conn, self.max_conn, self.dsn)
                logger.info("Database connection pool initialized successfully.")
            except psycopg2.OperationalError as e:
                logger.error(f"Failed to initialize database pool: {e}")
                raise

    def close(self) -> None:
        """Close all connections in the pool."""
        with self._pool_lock:
            if self._pool is not None:
                self._pool.closeall()
                self._pool = None
                logger.info("Database connection pool closed.")

    def _get_connection(self):
        self.open()
        return self._pool.getconn()

    def _release_connection(self, conn) -> None:
        if self._pool is not None:
            self._pool.putconn(conn)

    @staticmethod
    def _rollback(conn) -> None:
        # A dropped connection fails the rollback too; the caller must still
        # see the error that caused it.
        try:
            conn.rollback()
        except psycopg2.Error:
            logger.exception("Rollback failed.")

    # ── QUERIES ───────────────────────────────────────────

    def execute(self, sql: str, params: Sequence = ()) -> list[dict]:
        """
        Run one parameterized statement on a pooled connection and commit.

        Args:
            sql: SQL template using ``%s`` placeholders.
            params: Positional parameters for the placeholders.

        Returns:
            The result rows as dicts keyed by column alias; an empty list for
            statements that return nothing.
        """
        conn = self._get_connection()
        try:
            with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
                cur.execute(sql, params)
                rows = cur.fetchall() if cur.description is not None else []
            conn.commit()
            return [dict(row) for row in rows]
        except Exception:
            self._rollback(conn)
            raise
        finally:
            self._release_connection(conn)

    @contextmanager
    def transaction(self) -> Iterator[extras.RealDictCursor]:
        """
        Check out a dedicated connection and yield a cursor inside a transaction.

        Commits when the block exits normally, rolls back when it raises, and
        returns the connection to the pool on every exit path. The exception
        raised inside the block is the one that propagates, even when the
        rollback itself fails.
        """
        conn = self._get_connection()
        try:
            with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
                yield cur
            conn.commit()
        except Exception:
            self._rollback(conn)
            logger.warning("Transaction rolled back.")
            raise
        finally:
            self._release_connection(conn)
