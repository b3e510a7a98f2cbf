"""Atlas schema definitions."""
from .records import (
    RectRecord,
    Placement,
    PlacementResult,
    Page,
)
from .config import PackConfig, make_config, DEFAULT_MIN_SIZE, DEFAULT_MAX_SIZE

__all__ = [
    "RectRecord",
    "Placement",
    "PlacementResult",
    "Page",
    "PackConfig",
    "make_config",
    "DEFAULT_MIN_SIZE",
    "DEFAULT_MAX_SIZE",
]
