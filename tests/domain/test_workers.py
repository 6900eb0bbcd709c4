import pytest

from solidkit.domain.base.exceptions import MissingCapabilityError, UnsupportedOperationError
from solidkit.domain.workers import (
    Eatable,
    HumanWorker,
    LegacyHumanWorker,
    LegacyRobotWorker,
    RobotWorker,
    Sleepable,
    Workable,
    capabilities_of,
    lunch_break,
    night_break,
    run_shift,
)


@pytest.fixture
def human():
    return HumanWorker("Bob")


@pytest.fixture
def robot():
    return RobotWorker("R2")


def test_capabilities_are_exact(human, robot):
    assert capabilities_of(human) == {"work", "eat", "sleep"}
    assert capabilities_of(robot) == {"work", "recharge"}
    assert capabilities_of(object()) == frozenset()


def test_robot_does_not_expose_eat_or_sleep(robot):
    assert not isinstance(robot, (Eatable, Sleepable))
    assert not hasattr(robot, "eat")
    assert not hasattr(robot, "sleep")


def test_human_worker_actions(human):
    assert human.work() == "Human Bob is working"
    assert human.eat() == "Human Bob is eating lunch"
    assert human.sleep() == "Human Bob is sleeping"


def test_robot_worker_actions(robot):
    assert isinstance(robot, Workable)
    assert robot.work() == "Robot R2 is working"
    assert robot.recharge() == "Robot R2 is recharging"


def test_run_shift_includes_everyone(human, robot):
    assert run_shift([human, robot]) == ["Human Bob is working", "Robot R2 is working"]


def test_lunch_break_rejects_robot_up_front(human, robot, monkeypatch):
    eaten = []
    monkeypatch.setattr(HumanWorker, "eat", lambda self: eaten.append(self.name))

    with pytest.raises(MissingCapabilityError) as exc:
        lunch_break([human, robot])

    assert eaten == []
    assert exc.value.capability == "eat"
    assert exc.value.members == ["R2"]


def test_night_break(human, robot):
    assert night_break([human]) == ["Human Bob is sleeping"]
    with pytest.raises(MissingCapabilityError):
        night_break([robot])


def test_legacy_robot_forced_to_implement_eat_and_sleep():
    robot = LegacyRobotWorker("R2")
    assert robot.work() == "Robot R2 is working"
    for action in (robot.eat, robot.sleep):
        with pytest.raises(UnsupportedOperationError):
            action()


def test_legacy_human_worker():
    worker = LegacyHumanWorker("Bob")
    assert [worker.work(), worker.eat(), worker.sleep()] == [
        "Human Bob is working",
        "Human Bob is eating lunch",
        "Human Bob is sleeping",
    ]
