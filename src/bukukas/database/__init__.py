"""Persistence layer for bukukas: the abstract store and its SQLite implementation."""

from bukukas.database.base import Database
from bukukas.database.factories import create_sqlite_database, default_database_path
from bukukas.database.sqlalchemy_db import SQLAlchemyDatabase

__all__ = ["Database", "SQLAlchemyDatabase", "create_sqlite_database", "default_database_path"]
