import pytest

from solidkit.application.principles import Principle, PrincipleCatalog, Variant, get_catalog
from solidkit.domain.base.exceptions import ResourceNotFoundError


@pytest.fixture
def catalog():
    return get_catalog()


def test_catalog_order(catalog):
    assert catalog.codes() == ["SRP", "OCP", "LSP", "ISP", "DIP"]
    assert len(catalog) == 5


def test_lookup_is_case_insensitive(catalog):
    assert catalog.get("lsp").name == "Liskov Substitution Principle"


def test_unknown_principle(catalog):
    with pytest.raises(ResourceNotFoundError):
        catalog.get("XYZ")


@pytest.mark.parametrize("code", ["SRP", "OCP", "LSP", "ISP", "DIP"])
@pytest.mark.parametrize("variant", list(Variant))
def test_every_demo_runs(catalog, code, variant):
    lines = catalog.get(code).run(variant)
    assert lines
    assert all(isinstance(line, str) for line in lines)


def test_run_accepts_plain_strings(catalog):
    assert catalog.get("SRP").run("compliant") == catalog.get("SRP").run(Variant.COMPLIANT)


def test_ocp_violating_demo_reports_unsupported_shape(catalog):
    lines = catalog.get("OCP").run(Variant.VIOLATING)
    assert lines[-1].startswith("UnsupportedShapeError")


def test_ocp_compliant_demo_handles_new_shape(catalog):
    lines = catalog.get("OCP").run(Variant.COMPLIANT)
    assert "Square area: 4.00" in lines
    assert lines[-1].startswith("Total area")


def test_lsp_demos(catalog):
    violating = catalog.get("LSP").run(Variant.VIOLATING)
    assert violating[0] == "LegacyDuck Donald is flying"
    assert violating[-1] == "UnsupportedOperationError: LegacyOstrich does not support fly()"

    compliant = catalog.get("LSP").run(Variant.COMPLIANT)
    assert not any("Error" in line for line in compliant)
    assert "Ostrich Olive is running" in compliant


def test_isp_demos(catalog):
    violating = catalog.get("ISP").run(Variant.VIOLATING)
    assert "UnsupportedOperationError: LegacyRobotWorker does not support eat()" in violating

    compliant = catalog.get("ISP").run(Variant.COMPLIANT)
    assert "R2 can: recharge, work" in compliant
    assert "Bob can: eat, sleep, work" in compliant


def test_dip_compliant_demo_uses_both_backends(catalog):
    lines = catalog.get("DIP").run(Variant.COMPLIANT)
    assert lines == [
        "Saving order A-1 to MySQL database",
        "Saving order A-1 to PostgreSQL database",
    ]


def test_custom_catalog():
    principle = Principle(
        code="XYZ",
        name="Example",
        summary="Example principle",
        violating=lambda: ["bad"],
        compliant=lambda: ["good"],
    )
    catalog = PrincipleCatalog([principle])
    assert catalog.get("xyz").run(Variant.VIOLATING) == ["bad"]
    assert principle.to_dict() == {"code": "XYZ", "name": "Example", "summary": "Example principle"}
