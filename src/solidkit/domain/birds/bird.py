"""
Bird hierarchy split by capability.

Flight lives on ``FlyingBird`` only. Anything typed as ``FlyingBird`` can be
asked to fly and will succeed; an ``Ostrich`` never promises flight, so no
caller can be surprised by it.
"""
from typing import Iterable, List

from solidkit.domain.base.exceptions import MissingCapabilityError
import structlog

logger = structlog.get_logger(__name__)


class Bird:
    """Behavior every bird has."""

    def __init__(self, name: str):
        self.name = name

    @property
    def species(self) -> str:
        return type(self).__name__

    def eat(self) -> str:
        return self._say("is eating")

    def _say(self, action: str) -> str:
        message = f"{self.species} {self.name} {action}"
        logger.debug(message)
        return message


class FlyingBird(Bird):
    """A bird that can always fly."""

    def fly(self) -> str:
        return self._say("is flying")


class Duck(FlyingBird):
    def swim(self) -> str:
        return self._say("is swimming")


class Ostrich(Bird):
    def run(self) -> str:
        return self._say("is running")


def release_flock(birds: Iterable[FlyingBird]) -> List[str]:
    """
    Ask every bird in the flock to fly.

    The flock is checked as a whole before anyone takes off, so a bird
    without the flying capability stops the release with no bird flown.

    Args:
        birds: Birds to release

    Returns:
        One message per bird, in order

    Raises:
        MissingCapabilityError: If any member is not a FlyingBird
    """
    flock = list(birds)
    grounded = [bird for bird in flock if not isinstance(bird, FlyingBird)]
    if grounded:
        raise MissingCapabilityError(
            "fly", [f"{type(bird).__name__} {getattr(bird, 'name', bird)}" for bird in grounded]
        )
    return [bird.fly() for bird in flock]
