"""CLI commands for accessible-colors."""

from .config import config_group
from .generate import random_cmd
from .measure import check_cmd, contrast_cmd, luminance_cmd
from .suggest import suggest_cmd

__all__ = [
    "check_cmd",
    "config_group",
    "contrast_cmd",
    "luminance_cmd",
    "random_cmd",
    "suggest_cmd",
]
