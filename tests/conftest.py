import pytest

from solidkit.config.schemas import LoggingConfig
from solidkit.domain.orders import Order
from solidkit.infrastructure.logging.logger import setup_logging
from solidkit.infrastructure.persistence import MySQLDatabase, PostgreSQLDatabase
from solidkit.infrastructure.registry.database_registry import DatabaseRegistry


@pytest.fixture(autouse=True, scope="session")
def quiet_logging():
    """Route structlog through stdlib logging at WARNING for the test run."""
    setup_logging(LoggingConfig(level="WARNING", destination="stdout"))


@pytest.fixture
def order():
    return Order(order_id="A-1", customer="Alice", amount=42.0)


@pytest.fixture(params=[MySQLDatabase, PostgreSQLDatabase], ids=["mysql", "postgresql"])
def database(request):
    return request.param()


@pytest.fixture
def registry():
    """A fresh registry with the built-in backends, isolated from the global one."""
    registry = DatabaseRegistry()
    registry.register_defaults()
    return registry


@pytest.fixture
def config_file(tmp_path):
    def write(name: str, content: str) -> str:
        path = tmp_path / name
        path.write_text(content)
        return str(path)
    return write
