"""Simulated persistence backends implementing the Database port."""
from .base import SimulatedDatabase
from .mysql_database import MySQLDatabase
from .postgresql_database import PostgreSQLDatabase

__all__ = ["SimulatedDatabase", "MySQLDatabase", "PostgreSQLDatabase"]
