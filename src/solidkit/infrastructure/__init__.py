"""Infrastructure layer: logging, simulated persistence, registries and DI."""
