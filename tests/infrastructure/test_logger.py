import logging
from logging.handlers import RotatingFileHandler

import pytest

from solidkit.config.schemas import LoggingConfig
from solidkit.infrastructure.logging.logger import get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_logging():
    yield
    setup_logging(LoggingConfig(level="WARNING", destination="stdout"))


def test_stdout_destination():
    setup_logging(LoggingConfig(level="INFO", destination="stdout"))
    root = logging.getLogger()
    assert root.level == logging.INFO
    assert len(root.handlers) == 1
    assert not isinstance(root.handlers[0], RotatingFileHandler)


def test_file_destination_writes_records(tmp_path):
    log_file = tmp_path / "logs" / "solidkit.log"
    setup_logging(LoggingConfig(level="DEBUG", destination="both", file_path=str(log_file)))

    root = logging.getLogger()
    assert any(isinstance(handler, RotatingFileHandler) for handler in root.handlers)

    get_logger("solidkit.test").info("hello from test", answer=42)
    for handler in root.handlers:
        handler.flush()

    content = log_file.read_text()
    assert "hello from test" in content
    assert "answer=42" in content


def test_structlog_routed_through_stdlib_on_import():
    import structlog

    import solidkit  # noqa: F401

    assert isinstance(structlog.get_config()["logger_factory"], structlog.stdlib.LoggerFactory)


def test_domain_debug_output_stays_off_stdout(capsys):
    from solidkit.domain.birds import Duck

    assert Duck("Donald").fly()
    assert capsys.readouterr().out == ""
