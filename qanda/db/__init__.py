"""Database Package — SQLAlchemy declarative Base shared by the ORM models.

Design Decisions:
    - asyncpg driver for PostgreSQL (native async, no thread pool overhead)
"""
