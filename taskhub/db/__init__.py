"""Database module for the taskhub application."""
from taskhub.db.base import Database, get_engine
from taskhub.db.session import get_db, db_transaction

__all__ = [
    "Database",
    "get_engine",
    "get_db",
    "db_transaction",
]
