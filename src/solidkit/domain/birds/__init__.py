"""Birds bounded context - Liskov Substitution Principle."""
from .bird import Bird, Duck, FlyingBird, Ostrich, release_flock
from .legacy import LegacyBird, LegacyDuck, LegacyOstrich, legacy_release_flock

__all__ = [
    "Bird",
    "FlyingBird",
    "Duck",
    "Ostrich",
    "release_flock",
    "LegacyBird",
    "LegacyDuck",
    "LegacyOstrich",
    "legacy_release_flock",
]
