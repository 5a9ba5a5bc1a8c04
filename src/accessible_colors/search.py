"""Suggest the nearest accessible variant of a color.

A variant keeps the hue and saturation of the original and changes only its
lightness. The search runs a bisection over lightness in each direction
(towards white and towards black) against a fixed partner color, then keeps
whichever compliant result is closer to the original lightness.

```
darken                      original                     lighten
0.0 |------------[=========]   l   [=======]----------------| 1.0
     compliant    bisection         bisection     compliant
```

Bisection stops once neither bound changes its encoded hex color, so it
converges in a handful of steps given 256 levels per channel.

The feasibility check assumes compliance only improves as lightness moves
away from the fixed color: if the extreme (white-most or black-most variant)
fails, nothing in between is tried. This holds for the usual cases but has
not been proven for every hue/saturation combination.
"""

import logging
from typing import Optional

from accessible_colors.codec import hex_to_hsl, hsl_to_hex, normalize_hex
from accessible_colors.contrast import (
    CompliancePredicate,
    compliance_predicate,
    is_aa_compliant,
    is_aaa_compliant,
)
from accessible_colors.exceptions import InvalidColorError
from accessible_colors.models import HSL, ComplianceLevel, SearchDirection

logger = logging.getLogger(__name__)


def search_direction(
    change: HSL,
    keep: str,
    direction: SearchDirection,
    predicate: CompliancePredicate,
    large: bool = False,
) -> Optional[HSL]:
    """
    Bisect lightness in one direction for the closest compliant variant.

    Args:
        change: The color to change; its lightness is the starting point
        keep: The fixed color in hex format
        direction: LIGHTEN searches [change.l, 1.0], DARKEN searches [0.0, change.l]
        predicate: Compliance check used as the oracle
        large: Whether the text is large

    Returns:
        The compliant variant closest to the start, or None if even the
        extreme of the range does not comply
    """
    direction = SearchDirection(direction)
    lighten = direction is SearchDirection.LIGHTEN

    # low/high are lightness bounds; the compliant one is high when lightening
    low, high = (change.l, 1.0) if lighten else (0.0, change.l)
    low_color = hsl_to_hex(change.with_lightness(low))
    high_color = hsl_to_hex(change.with_lightness(high))

    extreme = high_color if lighten else low_color
    if not predicate(extreme, keep, large):
        logger.debug(f"No compliant variant when {direction.value}ing: {extreme} vs {keep} fails")
        return None

    prev_low: Optional[str] = None
    prev_high: Optional[str] = None
    steps = 0

    while low_color != prev_low or high_color != prev_high:
        prev_low, prev_high = low_color, high_color
        steps += 1

        middle = (low + high) / 2
        candidate = hsl_to_hex(change.with_lightness(middle))
        compliant = bool(predicate(candidate, keep, large))

        # Move whichever bound sits on the same side of the threshold
        if compliant == lighten:
            high, high_color = middle, candidate
        else:
            low, low_color = middle, candidate

    result = high_color if lighten else low_color
    logger.debug(f"{direction.value.capitalize()} search converged on {result} after {steps} steps")
    return hex_to_hsl(result)


def find_variant(
    color_to_change: str,
    color_to_keep: str,
    predicate: CompliancePredicate,
    large: bool = False,
) -> Optional[str]:
    """
    Find the variant of `color_to_change` closest in lightness that complies
    with `predicate` against `color_to_keep`.

    When the darker and the lighter variant are equally far from the
    original lightness, the darker one is returned.

    Args:
        color_to_change: The color we want an accessible variant of
        color_to_keep: The color whose value must stay as it is
        predicate: Compliance check, e.g. is_aa_compliant
        large: Whether the text is large

    Returns:
        `color_to_change` itself if it already complies, otherwise the closest
        compliant variant in hex, or None if no lightness works
    """
    try:
        change = hex_to_hsl(color_to_change)
        keep = normalize_hex(color_to_keep)
    except InvalidColorError as e:
        logger.debug(f"Cannot suggest a variant: {e.technical_message}")
        return None

    if predicate(color_to_change, keep, large):
        return color_to_change

    darker = search_direction(change, keep, SearchDirection.DARKEN, predicate, large)
    lighter = search_direction(change, keep, SearchDirection.LIGHTEN, predicate, large)

    if darker is not None and lighter is not None:
        darker_diff = abs(change.l - darker.l)
        lighter_diff = abs(change.l - lighter.l)
        return hsl_to_hex(darker if darker_diff <= lighter_diff else lighter)
    if darker is not None:
        return hsl_to_hex(darker)
    if lighter is not None:
        return hsl_to_hex(lighter)

    logger.info(f"No accessible variant of {color_to_change} against {keep}")
    return None


suggest_color_variant = find_variant


def suggest_variant(
    color_to_change: str,
    color_to_keep: str,
    level: ComplianceLevel,
    large: bool = False,
) -> Optional[str]:
    """Suggest the closest variant meeting a WCAG conformance level."""
    return find_variant(color_to_change, color_to_keep, compliance_predicate(level), large)


def suggest_aa_variant(
    color_to_change: str, color_to_keep: str, large: bool = False
) -> Optional[str]:
    """
    Suggest a close variant of `color_to_change` that meets WCAG AA against
    `color_to_keep` (4.5:1, or 3:1 for large text).
    """
    return find_variant(color_to_change, color_to_keep, is_aa_compliant, large)


def suggest_aaa_variant(
    color_to_change: str, color_to_keep: str, large: bool = False
) -> Optional[str]:
    """
    Suggest a close variant of `color_to_change` that meets WCAG AAA against
    `color_to_keep` (7:1, or 4.5:1 for large text).
    """
    return find_variant(color_to_change, color_to_keep, is_aaa_compliant, large)
