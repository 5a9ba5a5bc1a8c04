"""Pytest fixtures for tests."""

from pathlib import Path

import numpy as np
import pytest

from accessible_colors import random_color


@pytest.fixture
def rng():
    """Seeded random generator so failures are reproducible."""
    return np.random.default_rng(20240917)


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    """Config file location inside a temporary directory (not created)."""
    return tmp_path / "config.json"


@pytest.fixture
def color_pairs(rng):
    """One hundred random (color, other) pairs."""
    return [(random_color(rng), random_color(rng)) for _ in range(100)]
