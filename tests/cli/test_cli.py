import json

import pytest
import yaml

from solidkit.cli.formatters import format_output
from solidkit.config.schemas import LoggingConfig
from solidkit.infrastructure.logging.logger import setup_logging
from solidkit.cli.main import main, parse_args


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in ("SOLIDKIT_DATABASE_BACKEND", "SOLIDKIT_OUTPUT_FORMAT", "SOLIDKIT_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    yield
    setup_logging(LoggingConfig(level="WARNING", destination="stdout"))


def run(capsys, *argv):
    main(list(argv))
    return capsys.readouterr().out


def run_json(capsys, *argv):
    return json.loads(run(capsys, "--format", "json", *argv))


def test_principles_list(capsys):
    result = run_json(capsys, "principles", "list")
    assert [p["code"] for p in result["principles"]] == ["SRP", "OCP", "LSP", "ISP", "DIP"]


def test_principles_show_both(capsys):
    result = run_json(capsys, "principles", "show", "lsp")
    assert result["code"] == "LSP"
    assert "violating" in result and "compliant" in result


def test_principles_show_single_variant(capsys):
    result = run_json(capsys, "principles", "show", "DIP", "--variant", "compliant")
    assert "violating" not in result
    assert result["compliant"][1] == "Saving order A-1 to PostgreSQL database"


def test_shapes_area(capsys):
    result = run_json(capsys, "shapes", "area", "rectangle", "width=3", "height=4")
    assert result == {"shape": "rectangle", "area": 12.0}


def test_shapes_total(capsys):
    result = run_json(capsys, "shapes", "total", "rectangle:width=2,height=3", "triangle:base=4,height=5")
    assert result["total_area"] == 16.0
    assert [s["shape"] for s in result["shapes"]] == ["rectangle", "triangle"]


def test_shapes_list(capsys):
    assert "circle" in run_json(capsys, "shapes", "list")["shapes"]


def test_birds_release(capsys):
    result = run_json(capsys, "birds", "release", "duck:Donald", "duck:Daisy")
    assert result["flight"] == ["Duck Donald is flying", "Duck Daisy is flying"]


def test_workers_shift(capsys):
    result = run_json(capsys, "workers", "shift", "human:Bob", "robot:R2")
    assert result["shift"] == ["Human Bob is working", "Robot R2 is working"]
    assert result["capabilities"][1] == {"name": "R2", "capabilities": "recharge, work"}


def test_orders_place_with_backend(capsys):
    result = run_json(capsys, "orders", "place", "A-7", "Alice", "19.5", "--backend", "postgresql")
    assert result["backend"] == "PostgreSQL"
    assert result["confirmation"] == "Saving order A-7 to PostgreSQL database"


def test_orders_backend_from_config_file(capsys, config_file):
    path = config_file("config.yaml", "persistence:\n  backend: postgresql\n")
    result = run_json(capsys, "--config", path, "orders", "place", "A-8", "Bob", "5")
    assert result["backend"] == "PostgreSQL"


def test_yaml_output(capsys):
    result = yaml.safe_load(run(capsys, "--format", "yaml", "shapes", "area", "triangle", "base=2", "height=2"))
    assert result["area"] == 2.0


@pytest.mark.parametrize("argv, message", [
    (["birds", "release", "duck:Donald", "ostrich:Olive"], "fly"),
    (["workers", "lunch", "human:Bob", "robot:R2"], "eat"),
    (["shapes", "area", "hexagon", "side=1"], "hexagon"),
    (["shapes", "area", "circle", "radius=-1"], "radius"),
    (["shapes", "area", "circle", "radius"], "KEY=VALUE"),
    (["principles", "show", "XYZ"], "XYZ"),
    (["orders", "place", "A-1", "Alice", "1", "--backend", "oracle"], "oracle"),
    (["birds", "release", "penguin:Pingu"], "penguin"),
])
def test_domain_errors_exit_with_status_1(capsys, argv, message):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Error: " in captured.err
    assert message in captured.err


def test_missing_action(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["shapes"])
    assert exc.value.code == 1
    assert "No action specified for shapes" in capsys.readouterr().err


def test_missing_resource(capsys):
    with pytest.raises(SystemExit):
        main([])


def test_parse_args_defaults():
    args = parse_args(["principles", "show", "srp"])
    assert args.variant == "both"
    assert args.format is None


class TestFormatters:
    data = {"principles": [{"code": "SRP", "name": "Single"}, {"code": "OCP", "name": "Open"}]}

    def test_table(self):
        output = format_output(self.data, "table")
        assert "SRP" in output and "OCP" in output
        assert "Code" in output

    def test_table_of_strings(self):
        output = format_output({"flight": ["Duck Donald is flying"]}, "table")
        assert "Duck Donald is flying" in output

    def test_empty_table(self):
        assert format_output({"shapes": []}, "table") == "No shapes found."

    def test_table_without_records_falls_back_to_json(self):
        assert json.loads(format_output({"area": 1.0}, "table")) == {"area": 1.0}

    def test_list(self):
        output = format_output({"total_area": 3, **self.data}, "list")
        assert output.splitlines() == [
            "total_area: 3",
            "principles:",
            "  - code: SRP, name: Single",
            "  - code: OCP, name: Open",
        ]


def test_unreadable_config_exits_with_status_1(capsys, tmp_path):
    with pytest.raises(SystemExit) as exc:
        main(["--config", str(tmp_path), "shapes", "list"])
    assert exc.value.code == 1
    assert "Error: Failed to read configuration file" in capsys.readouterr().err


def test_orders_backend_option_is_normalized(capsys):
    result = run_json(capsys, "orders", "place", "A-9", "Alice", "3", "--backend", " PostgreSQL ")
    assert result["backend"] == "PostgreSQL"
