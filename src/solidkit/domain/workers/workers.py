"""Concrete workers implementing only what they can do."""
from solidkit.domain.workers.capabilities import Eatable, Rechargeable, Sleepable, Workable
import structlog

logger = structlog.get_logger(__name__)


def _announce(message: str) -> str:
    logger.debug(message)
    return message


class HumanWorker(Workable, Eatable, Sleepable):
    def __init__(self, name: str):
        self.name = name

    def work(self) -> str:
        return _announce(f"Human {self.name} is working")

    def eat(self) -> str:
        return _announce(f"Human {self.name} is eating lunch")

    def sleep(self) -> str:
        return _announce(f"Human {self.name} is sleeping")


class RobotWorker(Workable, Rechargeable):
    def __init__(self, model: str):
        self.model = model

    @property
    def name(self) -> str:
        return self.model

    def work(self) -> str:
        return _announce(f"Robot {self.model} is working")

    def recharge(self) -> str:
        return _announce(f"Robot {self.model} is recharging")
