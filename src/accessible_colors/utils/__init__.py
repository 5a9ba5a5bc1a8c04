"""Generic utility modules for accessible-colors.

- persistence: settings models stored as JSON files
- rounding: decimal rounding with half-away-from-zero semantics
"""

from .persistence import SettingsFile
from .rounding import round_half_up

__all__ = ["SettingsFile", "round_half_up"]
