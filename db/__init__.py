"""
db/ - PostgreSQL access
=======================
``Database`` wraps the psycopg2 pool and is the only object repositories use
to reach the store. ``init_db`` holds the customers/reservations schema.
"""
