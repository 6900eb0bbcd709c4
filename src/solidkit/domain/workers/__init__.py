"""Workers bounded context - Interface Segregation Principle."""
from .capabilities import Eatable, Rechargeable, Sleepable, Workable, capabilities_of
from .legacy import LegacyHumanWorker, LegacyRobotWorker, LegacyWorker
from .schedule import lunch_break, night_break, run_shift
from .workers import HumanWorker, RobotWorker

__all__ = [
    "Workable",
    "Eatable",
    "Sleepable",
    "Rechargeable",
    "capabilities_of",
    "HumanWorker",
    "RobotWorker",
    "run_shift",
    "lunch_break",
    "night_break",
    "LegacyWorker",
    "LegacyHumanWorker",
    "LegacyRobotWorker",
]
