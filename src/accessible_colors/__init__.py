"""accessible-colors: WCAG 2.x contrast checks and accessible color suggestions."""

__version__ = "0.1.0"

from .codec import (
    hex_to_hsl,
    hex_to_rgb,
    hsl_to_hex,
    hsl_to_rgb,
    is_valid_hex,
    normalize_hex,
    rgb_to_hex,
    rgb_to_hsl,
)
from .contrast import (
    contrast,
    is_aa_compliant,
    is_aaa_compliant,
    is_compliant,
    is_contrasting,
    luminance,
)
from .models import HSL, RGB, ComplianceLevel
from .sampler import random_aa_color, random_aaa_color, random_color, random_compliant_color
from .search import (
    suggest_aa_variant,
    suggest_aaa_variant,
    suggest_color_variant,
    suggest_variant,
)

__all__ = [
    # Models
    "HSL",
    "RGB",
    "ComplianceLevel",
    # Codec
    "hex_to_hsl",
    "hex_to_rgb",
    "hsl_to_hex",
    "hsl_to_rgb",
    "is_valid_hex",
    "normalize_hex",
    "rgb_to_hex",
    "rgb_to_hsl",
    # Contrast
    "contrast",
    "is_aa_compliant",
    "is_aaa_compliant",
    "is_compliant",
    "is_contrasting",
    "luminance",
    # Suggestions
    "suggest_aa_variant",
    "suggest_aaa_variant",
    "suggest_color_variant",
    "suggest_variant",
    # Random colors
    "random_aa_color",
    "random_aaa_color",
    "random_color",
    "random_compliant_color",
]
