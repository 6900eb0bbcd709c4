"""
Employee services, one reason to change each.

Pay rules, report layout and storage used to live together on the employee
(see ``legacy.LegacyEmployee``). Here each concern is its own class so that a
payroll change never touches report formatting and vice versa.
"""
from typing import Dict, List

from solidkit.domain.base.exceptions import ResourceNotFoundError
from solidkit.domain.employees.employee import Employee
import structlog

logger = structlog.get_logger(__name__)

MONTHS_PER_YEAR = 12


class PayCalculator:
    """Payroll arithmetic."""

    def annual_pay(self, employee: Employee) -> float:
        return employee.salary

    def monthly_pay(self, employee: Employee) -> float:
        """Monthly pay rounded to cents."""
        return round(employee.salary / MONTHS_PER_YEAR, 2)


class EmployeeReportFormatter:
    """Presentation of employee data."""

    def format(self, employee: Employee) -> str:
        return f"Employee: {employee.name}, salary: {employee.salary:.2f}"


class EmployeeRepository:
    """In-memory employee storage keyed by name."""

    def __init__(self):
        self._employees: Dict[str, Employee] = {}

    def save(self, employee: Employee) -> str:
        """
        Store an employee, replacing any previous record with the same name.

        Args:
            employee: Employee to store

        Returns:
            Confirmation message
        """
        self._employees[employee.name] = employee
        message = f"Saved employee {employee.name}"
        logger.debug(message)
        return message

    def get(self, name: str) -> Employee:
        if name not in self._employees:
            raise ResourceNotFoundError("Employee", name)
        return self._employees[name]

    def list(self) -> List[Employee]:
        return list(self._employees.values())
