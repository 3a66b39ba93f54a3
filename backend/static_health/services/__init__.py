"""Service layer modules."""

from .clock import ProcessClock, format_timestamp
from .static_files import StaticAsset, StaticFileResolver

__all__ = ["ProcessClock", "StaticAsset", "StaticFileResolver", "format_timestamp"]
