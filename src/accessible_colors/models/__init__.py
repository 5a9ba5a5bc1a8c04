"""Data models for accessible-colors."""

from .color import HSL, RGB
from .config import DEFAULT_CONFIG_PATH, AppConfig
from .enums import ComplianceLevel, SearchDirection

__all__ = [
    # Models
    "AppConfig",
    "HSL",
    "RGB",
    # Enums
    "ComplianceLevel",
    "SearchDirection",
    "DEFAULT_CONFIG_PATH",
]
