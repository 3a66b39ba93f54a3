"""Response schemas."""

from .health import HealthReport

__all__ = ["HealthReport"]
