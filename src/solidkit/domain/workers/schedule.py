"""
Operations over groups of workers.

Each operation asks for exactly one capability. The group is checked before
anything runs, so handing a robot to ``lunch_break`` is rejected up front
instead of failing after half the group has eaten.
"""
from typing import Iterable, List, Type

from solidkit.domain.base.exceptions import MissingCapabilityError
from solidkit.domain.workers.capabilities import Eatable, Sleepable, Workable


def _require(members: Iterable, interface: Type, action: str) -> list:
    group = list(members)
    missing = [member for member in group if not isinstance(member, interface)]
    if missing:
        raise MissingCapabilityError(
            action, [str(getattr(member, "name", repr(member))) for member in missing]
        )
    return group


def run_shift(workers: Iterable[Workable]) -> List[str]:
    return [worker.work() for worker in _require(workers, Workable, "work")]


def lunch_break(eaters: Iterable[Eatable]) -> List[str]:
    return [eater.eat() for eater in _require(eaters, Eatable, "eat")]


def night_break(sleepers: Iterable[Sleepable]) -> List[str]:
    return [sleeper.sleep() for sleeper in _require(sleepers, Sleepable, "sleep")]
