"""
Principle catalog.

Every principle pairs a violating demonstration with a compliant one. A demo
runs the example classes end to end and returns the lines a reader would see
on the console. Violating demos let the pedagogical failure happen and report
it as a line instead of crashing.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional

from pydantic import Field

from solidkit.domain.base.exceptions import (
    DomainException,
    ResourceNotFoundError,
    UnsupportedOperationError,
    UnsupportedShapeError,
)
from solidkit.domain.birds import Duck, LegacyDuck, LegacyOstrich, Ostrich, legacy_release_flock, release_flock
from solidkit.domain.employees import (
    Employee,
    EmployeeReportFormatter,
    EmployeeRepository,
    LegacyEmployee,
    PayCalculator,
)
from solidkit.domain.orders import LegacyOrderService, Order, OrderService
from solidkit.domain.shapes import AreaCalculator, Circle, LegacyShapeCalculator, Rectangle, Shape, Triangle
from solidkit.domain.workers import (
    HumanWorker,
    LegacyHumanWorker,
    LegacyRobotWorker,
    RobotWorker,
    capabilities_of,
    lunch_break,
    run_shift,
)
from solidkit.infrastructure.logging.logger import get_logger
from solidkit.infrastructure.persistence import MySQLDatabase, PostgreSQLDatabase

logger = get_logger(__name__)

Demo = Callable[[], List[str]]


class Variant(str, Enum):
    VIOLATING = "violating"
    COMPLIANT = "compliant"


@dataclass(frozen=True)
class Principle:
    """One SOLID principle and its two demonstrations."""

    code: str
    name: str
    summary: str
    violating: Demo
    compliant: Demo

    def run(self, variant: Variant) -> List[str]:
        demo = self.violating if Variant(variant) is Variant.VIOLATING else self.compliant
        logger.debug(f"Running {variant} demo for {self.code}")
        return demo()

    def to_dict(self) -> Dict[str, str]:
        return {"code": self.code, "name": self.name, "summary": self.summary}


def _failure(error: DomainException) -> str:
    return f"{type(error).__name__}: {error}"


# --- Single Responsibility -------------------------------------------------

def _srp_violating() -> List[str]:
    employee = LegacyEmployee("Alice", 60000)
    return [
        f"Monthly pay: {employee.calculate_pay():.2f}",
        employee.generate_report(),
        employee.save(),
        "LegacyEmployee changes for payroll, reporting and storage reasons",
    ]


def _srp_compliant() -> List[str]:
    employee = Employee(name="Alice", salary=60000)
    repository = EmployeeRepository()
    return [
        f"Monthly pay: {PayCalculator().monthly_pay(employee):.2f}",
        EmployeeReportFormatter().format(employee),
        repository.save(employee),
    ]


# --- Open/Closed -----------------------------------------------------------

class Square(Shape):
    """Shape added after the calculators were written."""

    side: float = Field(..., gt=0)

    def area(self) -> float:
        return self.side * self.side


def _demo_shapes() -> List[Shape]:
    return [Circle(radius=1), Rectangle(width=2, height=3), Triangle(base=4, height=5)]


def _ocp_violating() -> List[str]:
    calculator = LegacyShapeCalculator()
    lines = [f"{shape.name} area: {calculator.calculate_area(shape):.2f}" for shape in _demo_shapes()]
    try:
        calculator.calculate_area(Square(side=2))
    except UnsupportedShapeError as e:
        lines.append(_failure(e))
    return lines


def _ocp_compliant() -> List[str]:
    calculator = AreaCalculator()
    shapes = _demo_shapes() + [Square(side=2)]
    lines = [f"{shape.name} area: {calculator.area(shape):.2f}" for shape in shapes]
    lines.append(f"Total area: {calculator.total_area(shapes):.2f}")
    return lines


# --- Liskov Substitution ---------------------------------------------------

def _lsp_violating() -> List[str]:
    lines = []
    try:
        lines.extend(legacy_release_flock([LegacyDuck("Donald"), LegacyOstrich("Olive")]))
    except UnsupportedOperationError as e:
        lines.append(_failure(e))
    return lines


def _lsp_compliant() -> List[str]:
    ostrich = Ostrich("Olive")
    lines = release_flock([Duck("Donald"), Duck("Daisy")])
    lines.append(ostrich.run())
    return lines


# --- Interface Segregation -------------------------------------------------

def _isp_violating() -> List[str]:
    lines = []
    for worker in (LegacyHumanWorker("Bob"), LegacyRobotWorker("R2")):
        try:
            lines.extend([worker.work(), worker.eat()])
        except UnsupportedOperationError as e:
            lines.append(_failure(e))
    return lines


def _isp_compliant() -> List[str]:
    human = HumanWorker("Bob")
    robot = RobotWorker("R2")
    lines = run_shift([human, robot])
    lines.extend(lunch_break([human]))
    lines.append(robot.recharge())
    for worker in (human, robot):
        lines.append(f"{worker.name} can: {', '.join(sorted(capabilities_of(worker)))}")
    return lines


# --- Dependency Inversion --------------------------------------------------

def _dip_violating() -> List[str]:
    service = LegacyOrderService()
    return [
        service.place_order(Order(order_id="A-1", customer="Alice", amount=42.0)),
        "LegacyOrderService cannot use another database without being edited",
    ]


def _dip_compliant() -> List[str]:
    lines = []
    for database in (MySQLDatabase(), PostgreSQLDatabase()):
        service = OrderService(database)
        lines.append(service.place_order(Order(order_id="A-1", customer="Alice", amount=42.0)))
    return lines


PRINCIPLES: List[Principle] = [
    Principle(
        code="SRP",
        name="Single Responsibility Principle",
        summary="A class should have one, and only one, reason to change.",
        violating=_srp_violating,
        compliant=_srp_compliant,
    ),
    Principle(
        code="OCP",
        name="Open/Closed Principle",
        summary="Software entities should be open for extension but closed for modification.",
        violating=_ocp_violating,
        compliant=_ocp_compliant,
    ),
    Principle(
        code="LSP",
        name="Liskov Substitution Principle",
        summary="Subtypes must be substitutable for their base types without surprises.",
        violating=_lsp_violating,
        compliant=_lsp_compliant,
    ),
    Principle(
        code="ISP",
        name="Interface Segregation Principle",
        summary="Clients should not be forced to depend on methods they do not use.",
        violating=_isp_violating,
        compliant=_isp_compliant,
    ),
    Principle(
        code="DIP",
        name="Dependency Inversion Principle",
        summary="High-level modules should depend on abstractions, not on concrete implementations.",
        violating=_dip_violating,
        compliant=_dip_compliant,
    ),
]


class PrincipleCatalog:
    """Ordered lookup of principles by code."""

    def __init__(self, principles: Optional[List[Principle]] = None):
        self._principles = list(PRINCIPLES if principles is None else principles)

    def __iter__(self):
        return iter(self._principles)

    def __len__(self) -> int:
        return len(self._principles)

    def codes(self) -> List[str]:
        return [principle.code for principle in self._principles]

    def get(self, code: str) -> Principle:
        """
        Look up a principle by code, ignoring case.

        Raises:
            ResourceNotFoundError: If no principle has that code
        """
        for principle in self._principles:
            if principle.code == code.upper():
                return principle
        raise ResourceNotFoundError("Principle", code)


def get_catalog() -> PrincipleCatalog:
    return PrincipleCatalog()
