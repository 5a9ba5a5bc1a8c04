"""Example: audit a palette against a background and fix what fails."""

import numpy as np

from accessible_colors import (
    ComplianceLevel,
    contrast,
    is_compliant,
    random_compliant_color,
    suggest_variant,
)

BACKGROUND = "#fdf6e3"

PALETTE = {
    "text": "#657b83",
    "heading": "#073642",
    "link": "#268bd2",
    "warning": "#b58900",
    "error": "#dc322f",
}


def main():
    """Check every palette entry for AA and suggest replacements."""
    level = ComplianceLevel.AA
    print(f"Background {BACKGROUND}, level {level.value} (>= {level.min_ratio()}:1)\n")

    for name, color in PALETTE.items():
        ratio = contrast(color, BACKGROUND)
        if is_compliant(color, BACKGROUND, level):
            print(f"  {name:8s} {color}  {ratio}:1  ok")
            continue

        fixed = suggest_variant(color, BACKGROUND, level)
        if fixed is None:
            print(f"  {name:8s} {color}  {ratio}:1  no variant exists")
        else:
            print(f"  {name:8s} {color}  {ratio}:1  -> {fixed} ({contrast(fixed, BACKGROUND)}:1)")

    # Seeded so the accent is the same on every run
    accent = random_compliant_color(BACKGROUND, level, rng=np.random.default_rng(2024))
    print(f"\nRandom accent: {accent}")


if __name__ == "__main__":
    main()
