"""Random colors, and random colors that pass a contrast check.

This is a best-effort fallback: it only looks for *some* compliant color and
makes no promise about which one. Use :mod:`accessible_colors.search` to get
the closest variant of a given color.

Randomness comes from a ``numpy.random.Generator`` passed in by the caller,
so results are reproducible with a seed:

```python
import numpy as np

rng = np.random.default_rng(42)
random_compliant_color("#ffffff", "AA", rng=rng)
```
"""

import logging
from typing import Optional

import numpy as np

from accessible_colors.codec import rgb_to_hex
from accessible_colors.contrast import CompliancePredicate, compliance_predicate
from accessible_colors.models import RGB, ComplianceLevel

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 1000

_COLOR_SPACE_SIZE = 1 << 24


def random_color(rng: Optional[np.random.Generator] = None) -> str:
    """
    Draw a uniformly random 24-bit color.

    Args:
        rng: Random generator; a fresh unseeded one is used if omitted

    Returns:
        A color in hex format (e.g. '#3fa2c0')
    """
    if rng is None:
        rng = np.random.default_rng()

    value = int(rng.integers(0, _COLOR_SPACE_SIZE))
    return rgb_to_hex(RGB(r=(value >> 16) & 255, g=(value >> 8) & 255, b=value & 255))


def find_random_compliant(
    background: str,
    predicate: CompliancePredicate,
    large: bool = False,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    rng: Optional[np.random.Generator] = None,
) -> Optional[str]:
    """
    Draw random colors until one passes `predicate` against `background`.

    Args:
        background: Background color in hex format
        predicate: Compliance check, called as predicate(background, candidate, large)
        large: Whether the text is large
        max_attempts: Number of colors to draw before giving up
        rng: Random generator; a fresh unseeded one is used if omitted

    Returns:
        The first compliant color, or None if none was drawn within the budget
    """
    if rng is None:
        rng = np.random.default_rng()

    for attempt in range(1, max_attempts + 1):
        candidate = random_color(rng)
        if predicate(background, candidate, large):
            logger.debug(f"Found {candidate} against {background} after {attempt} attempts")
            return candidate

    logger.info(f"No compliant color against {background} in {max_attempts} attempts")
    return None


def random_compliant_color(
    background: str,
    standard: ComplianceLevel,
    large: bool = False,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    rng: Optional[np.random.Generator] = None,
) -> Optional[str]:
    """
    Random color meeting a WCAG conformance level against `background`.

    Some backgrounds cannot reach the level at all (nothing reaches 7:1
    against mid grey), in which case this returns None.
    """
    return find_random_compliant(
        background, compliance_predicate(standard), large, max_attempts, rng
    )


def random_aa_color(
    background: str, large: bool = False, rng: Optional[np.random.Generator] = None
) -> Optional[str]:
    """Random color with at least 4.5:1 (3:1 large) contrast against `background`."""
    return random_compliant_color(background, ComplianceLevel.AA, large, rng=rng)


def random_aaa_color(
    background: str, large: bool = False, rng: Optional[np.random.Generator] = None
) -> Optional[str]:
    """Random color with at least 7:1 (4.5:1 large) contrast against `background`."""
    return random_compliant_color(background, ComplianceLevel.AAA, large, rng=rng)
