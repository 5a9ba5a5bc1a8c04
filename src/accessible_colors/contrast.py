"""WCAG 2.x relative luminance, contrast ratio and compliance checks.

Every function takes hex strings and returns ``None`` instead of raising when
a color cannot be decoded, so results can be chained without try/except:

```python
from accessible_colors.contrast import contrast, is_aa_compliant

contrast("#000000", "#ffffff")          # 21.0
is_aa_compliant("#777777", "#ffffff")   # False (4.478)
contrast("#000000", "not a color")      # None
```

References:
    https://www.w3.org/TR/WCAG20/#relativeluminancedef
    https://www.w3.org/TR/WCAG20/#contrast-ratiodef
"""

import logging
from typing import Callable, Optional

from accessible_colors.codec import hex_to_rgb
from accessible_colors.exceptions import InvalidColorError
from accessible_colors.models import ComplianceLevel
from accessible_colors.utils import round_half_up

logger = logging.getLogger(__name__)

# (color, other, large) -> whether the pair complies, None if either is not a color
CompliancePredicate = Callable[[str, str, bool], Optional[bool]]

DEFAULT_PRECISION = 3


def _linearize(channel: int) -> float:
    value = channel / 255
    if value <= 0.03928:
        return value / 12.92
    return ((value + 0.055) / 1.055) ** 2.4


def luminance(color: str) -> Optional[float]:
    """
    Relative luminance of a color.

    L = 0.2126 * R + 0.7152 * G + 0.0722 * B, with each channel
    gamma-corrected from sRGB.

    Args:
        color: Hex color (e.g. '#000000')

    Returns:
        A number between 0 (black) and 1 (white), or None if the color is
        empty or malformed
    """
    if not color:
        return None

    try:
        rgb = hex_to_rgb(color)
    except InvalidColorError as e:
        logger.debug(f"No luminance for {color!r}: {e.technical_message}")
        return None

    r, g, b = (_linearize(channel) for channel in rgb.to_tuple())
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def contrast(
    color1: Optional[str], color2: Optional[str], precision: int = DEFAULT_PRECISION
) -> Optional[float]:
    """
    Contrast ratio between two colors, from 1 (none) to 21 (black on white).

    The ratio is symmetric: the lighter color always goes on top.

    Args:
        color1: First color in hex format
        color2: Second color in hex format
        precision: Number of decimal places to round to

    Returns:
        The rounded ratio, or None if either color is invalid
    """
    if color1 is None or color2 is None:
        return None

    luminance1 = luminance(color1)
    luminance2 = luminance(color2)
    if luminance1 is None or luminance2 is None:
        return None

    light, dark = max(luminance1, luminance2), min(luminance1, luminance2)
    return round_half_up((light + 0.05) / (dark + 0.05), precision)


def is_contrasting(color1: str, color2: str, ratio: float) -> Optional[bool]:
    """
    Check whether two colors reach a contrast ratio.

    Args:
        color1: First color in hex format
        color2: Second color in hex format
        ratio: Minimum contrast ratio, between 1 and 21

    Returns:
        True if the contrast is at least `ratio`, None if either color is invalid
    """
    value = contrast(color1, color2)
    if value is None:
        return None
    return value >= ratio


def is_compliant(
    color1: str, color2: str, level: ComplianceLevel, large: bool = False
) -> Optional[bool]:
    """Check a color pair against a WCAG conformance level."""
    return is_contrasting(color1, color2, ComplianceLevel(level).min_ratio(large))


def is_aa_compliant(color1: str, color2: str, large: bool = False) -> Optional[bool]:
    """
    WCAG AA: at least 4.5:1, or 3:1 for large text.

    Large text is at least 14 point (18.66px) bold or 18 point (24px) regular.
    """
    return is_compliant(color1, color2, ComplianceLevel.AA, large)


def is_aaa_compliant(color1: str, color2: str, large: bool = False) -> Optional[bool]:
    """
    WCAG AAA: at least 7:1, or 4.5:1 for large text.
    """
    return is_compliant(color1, color2, ComplianceLevel.AAA, large)


def compliance_predicate(level: ComplianceLevel) -> CompliancePredicate:
    """Return the compliance check for a conformance level."""
    level = ComplianceLevel(level)
    if level is ComplianceLevel.AAA:
        return is_aaa_compliant
    return is_aa_compliant
