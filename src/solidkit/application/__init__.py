"""Application layer: runnable demonstrations of each principle."""
from .principles import Principle, PrincipleCatalog, Variant, get_catalog

__all__ = ["Principle", "PrincipleCatalog", "Variant", "get_catalog"]
