"""Enumerations for accessible-colors."""

from enum import Enum


class ComplianceLevel(str, Enum):
    """WCAG 2.x contrast conformance levels."""

    AA = "AA"  # 4.5:1 normal text, 3:1 large text
    AAA = "AAA"  # 7:1 normal text, 4.5:1 large text

    def min_ratio(self, large: bool = False) -> float:
        """Minimum contrast ratio for this level.

        Large text is at least 18.66px bold or 24px regular.
        """
        normal, large_text = _THRESHOLDS[self]
        return large_text if large else normal


# (normal text, large text)
_THRESHOLDS: dict[ComplianceLevel, tuple[float, float]] = {
    ComplianceLevel.AA: (4.5, 3.0),
    ComplianceLevel.AAA: (7.0, 4.5),
}


class SearchDirection(str, Enum):
    """Direction in which a variant search moves lightness."""

    LIGHTEN = "lighten"
    DARKEN = "darken"
