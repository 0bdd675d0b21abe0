"""Persistence for companies, charts of accounts and journal entries."""

from lalurecf.database.base import Database
from lalurecf.database.factories import create_database, create_sqlite_database

__all__ = ["Database", "create_database", "create_sqlite_database"]
