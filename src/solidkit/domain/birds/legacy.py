"""Bird hierarchy where every bird claims it can fly."""
from typing import Iterable, List

from solidkit.domain.base.exceptions import UnsupportedOperationError
import structlog

logger = structlog.get_logger(__name__)


class LegacyBird:
    def __init__(self, name: str):
        self.name = name

    def fly(self) -> str:
        message = f"{type(self).__name__} {self.name} is flying"
        logger.debug(message)
        return message


class LegacyDuck(LegacyBird):
    pass


class LegacyOstrich(LegacyBird):
    """Breaks the base class contract: substituting it for LegacyBird fails."""

    def fly(self) -> str:
        raise UnsupportedOperationError(type(self).__name__, "fly")


def legacy_release_flock(birds: Iterable[LegacyBird]) -> List[str]:
    """Fly birds one by one; an ostrich fails the release midway."""
    return [bird.fly() for bird in birds]
