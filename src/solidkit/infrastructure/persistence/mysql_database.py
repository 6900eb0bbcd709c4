"""Simulated MySQL backend."""
from solidkit.infrastructure.persistence.base import SimulatedDatabase


class MySQLDatabase(SimulatedDatabase):
    backend_name = "MySQL"
    default_port = 3306
