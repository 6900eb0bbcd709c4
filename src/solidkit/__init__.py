"""solidkit - SOLID design principles as runnable before/after examples.

Each of the five principles is illustrated by a small design that violates it
and a corrected design of the same classes:

Key Components:
    - domain: the example models (employees, shapes, birds, workers, orders)
    - application: the principle catalog that runs the demonstrations
    - infrastructure: logging, simulated persistence backends and DI wiring
    - config: pydantic configuration schemas and the configuration manager
    - cli: command line interface

Usage:
    >>> solidkit principles list
    >>> solidkit principles show LSP --variant both
    >>> solidkit shapes area circle 2
"""

__version__ = "1.0.0"
PACKAGE_NAME = "solidkit"

# Configures structlog on import, for library use without the CLI
from solidkit.infrastructure.logging import logger as _logger  # noqa: E402,F401
