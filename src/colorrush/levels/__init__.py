"""Level catalog.

Provides the ten level definitions of a run:
- Timing, scoring and bonus rules per level
- Lookup by level number
"""

from colorrush.levels.catalog import LEVELS, get_level, get_total_levels
from colorrush.levels.models import NON_PUNITIVE_REFRESH_FROM_LEVEL, LevelConfig

__all__ = [
    # Models
    "LevelConfig",
    "NON_PUNITIVE_REFRESH_FROM_LEVEL",
    # Level definitions
    "LEVELS",
    "get_level",
    "get_total_levels",
]
