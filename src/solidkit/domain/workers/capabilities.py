"""Capability interfaces, one behavior each."""
from abc import ABC, abstractmethod
from typing import Dict, FrozenSet, Type


class Workable(ABC):
    @abstractmethod
    def work(self) -> str:
        """Do a unit of work."""


class Eatable(ABC):
    @abstractmethod
    def eat(self) -> str:
        """Take a meal."""


class Sleepable(ABC):
    @abstractmethod
    def sleep(self) -> str:
        """Rest."""


class Rechargeable(ABC):
    @abstractmethod
    def recharge(self) -> str:
        """Restore power."""


CAPABILITIES: Dict[str, Type] = {
    "work": Workable,
    "eat": Eatable,
    "sleep": Sleepable,
    "recharge": Rechargeable,
}


def capabilities_of(worker: object) -> FrozenSet[str]:
    """Names of the capability interfaces ``worker`` implements."""
    return frozenset(
        name for name, interface in CAPABILITIES.items() if isinstance(worker, interface)
    )
