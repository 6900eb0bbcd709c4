"""Employees bounded context - Single Responsibility Principle."""
from .employee import Employee
from .legacy import LegacyEmployee
from .services import EmployeeReportFormatter, EmployeeRepository, PayCalculator

__all__ = [
    "Employee",
    "LegacyEmployee",
    "PayCalculator",
    "EmployeeReportFormatter",
    "EmployeeRepository",
]
