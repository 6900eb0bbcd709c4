"""One fat worker interface that every worker must implement in full."""
from abc import ABC, abstractmethod

from solidkit.domain.base.exceptions import UnsupportedOperationError


class LegacyWorker(ABC):
    @abstractmethod
    def work(self) -> str: ...

    @abstractmethod
    def eat(self) -> str: ...

    @abstractmethod
    def sleep(self) -> str: ...


class LegacyHumanWorker(LegacyWorker):
    def __init__(self, name: str):
        self.name = name

    def work(self) -> str:
        return f"Human {self.name} is working"

    def eat(self) -> str:
        return f"Human {self.name} is eating lunch"

    def sleep(self) -> str:
        return f"Human {self.name} is sleeping"


class LegacyRobotWorker(LegacyWorker):
    """Forced to implement eat() and sleep() it cannot perform."""

    def __init__(self, model: str):
        self.name = model

    def work(self) -> str:
        return f"Robot {self.name} is working"

    def eat(self) -> str:
        raise UnsupportedOperationError(type(self).__name__, "eat")

    def sleep(self) -> str:
        raise UnsupportedOperationError(type(self).__name__, "sleep")
