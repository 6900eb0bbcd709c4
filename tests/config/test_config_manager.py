import json

import pytest

from solidkit.config import AppConfig, ConfigurationManager, validate_config
from solidkit.domain.base.exceptions import ConfigurationError


def test_defaults_without_file():
    config = ConfigurationManager(environ={}).app_config
    assert config.persistence.backend == "mysql"
    assert config.logging.level == "WARNING"
    assert config.output_format == "json"


def test_json_file(config_file):
    path = config_file("config.json", json.dumps({
        "persistence": {"backend": "PostgreSQL", "host": "db", "port": 6543},
        "logging": {"level": "debug"},
    }))
    manager = ConfigurationManager(path, environ={})
    assert manager.get_persistence_config().backend == "postgresql"
    assert manager.get_persistence_config().port == 6543
    assert manager.get_logging_config().level == "DEBUG"


def test_yaml_file(config_file):
    path = config_file("config.yaml", "output_format: table\npersistence:\n  database: shop\n")
    config = ConfigurationManager(path, environ={}).app_config
    assert config.output_format == "table"
    assert config.persistence.database == "shop"


def test_empty_yaml_file(config_file):
    path = config_file("empty.yml", "")
    assert ConfigurationManager(path, environ={}).app_config == AppConfig()


def test_environment_overrides_file(config_file):
    path = config_file("config.json", json.dumps({"persistence": {"backend": "mysql", "host": "db"}}))
    environ = {
        "SOLIDKIT_DATABASE_BACKEND": "postgresql",
        "SOLIDKIT_LOG_LEVEL": "ERROR",
        "SOLIDKIT_OUTPUT_FORMAT": "yaml",
    }
    config = ConfigurationManager(path, environ=environ).app_config
    assert config.persistence.backend == "postgresql"
    assert config.persistence.host == "db"
    assert config.logging.level == "ERROR"
    assert config.output_format == "yaml"


def test_reload_picks_up_changes():
    environ = {}
    manager = ConfigurationManager(environ=environ)
    assert manager.app_config.persistence.backend == "mysql"
    environ["SOLIDKIT_DATABASE_BACKEND"] = "postgresql"
    assert manager.app_config.persistence.backend == "mysql"
    assert manager.reload().persistence.backend == "postgresql"


def test_missing_file():
    with pytest.raises(ConfigurationError) as exc:
        ConfigurationManager("/nonexistent/config.json", environ={}).app_config
    assert "not found" in str(exc.value)


def test_malformed_json(config_file):
    path = config_file("broken.json", "{not json")
    with pytest.raises(ConfigurationError):
        ConfigurationManager(path, environ={}).app_config


def test_non_mapping_file(config_file):
    path = config_file("list.yaml", "- a\n- b\n")
    with pytest.raises(ConfigurationError):
        ConfigurationManager(path, environ={}).app_config


@pytest.mark.parametrize("data, field", [
    ({"logging": {"level": "LOUD"}}, "logging.level"),
    ({"logging": {"destination": "syslog"}}, "logging.destination"),
    ({"output_format": "xml"}, "output_format"),
    ({"persistence": {"port": 70000}}, "persistence.port"),
])
def test_invalid_values(data, field):
    with pytest.raises(ConfigurationError) as exc:
        validate_config(data)
    assert field in exc.value.missing_fields


def test_empty_section_with_environment_override(config_file):
    path = config_file("config.yaml", "persistence:\nlogging:\n")
    config = ConfigurationManager(path, environ={"SOLIDKIT_DATABASE_BACKEND": "postgresql"}).app_config
    assert config.persistence.backend == "postgresql"
    assert config.logging.level == "WARNING"


def test_non_mapping_section_with_environment_override(config_file):
    path = config_file("config.yaml", "persistence: mysql\n")
    with pytest.raises(ConfigurationError) as exc:
        ConfigurationManager(path, environ={"SOLIDKIT_DATABASE_HOST": "db"}).app_config
    assert exc.value.missing_fields == ["persistence"]


def test_directory_instead_of_file(tmp_path):
    with pytest.raises(ConfigurationError) as exc:
        ConfigurationManager(str(tmp_path), environ={}).app_config
    assert "Failed to read" in str(exc.value)


def test_non_utf8_file(tmp_path):
    path = tmp_path / "latin1.yaml"
    path.write_bytes("output_format: t\xe4ble\n".encode("latin-1"))
    with pytest.raises(ConfigurationError):
        ConfigurationManager(str(path), environ={}).app_config
