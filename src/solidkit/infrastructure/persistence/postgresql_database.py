"""Simulated PostgreSQL backend."""
from solidkit.infrastructure.persistence.base import SimulatedDatabase


class PostgreSQLDatabase(SimulatedDatabase):
    backend_name = "PostgreSQL"
    default_port = 5432
