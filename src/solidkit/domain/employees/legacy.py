"""Employee that owns pay rules, report layout and persistence at once."""
import structlog

logger = structlog.get_logger(__name__)


class LegacyEmployee:
    """
    Employee with three reasons to change.

    Changing the payroll rule, the report layout or the storage medium all
    mean editing this one class.
    """

    def __init__(self, name: str, salary: float):
        self.name = name
        self.salary = salary

    def calculate_pay(self) -> float:
        return round(self.salary / 12, 2)

    def generate_report(self) -> str:
        return f"Employee: {self.name}, salary: {self.salary:.2f}"

    def save(self) -> str:
        message = f"Saving employee {self.name} to employees.db"
        logger.debug(message)
        return message
