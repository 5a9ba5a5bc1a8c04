"""Unit tests for random color sampling."""

import re

import numpy as np
import pytest

from accessible_colors.contrast import contrast, is_aa_compliant, is_aaa_compliant
from accessible_colors.models import ComplianceLevel
from accessible_colors.sampler import (
    find_random_compliant,
    random_aa_color,
    random_aaa_color,
    random_color,
    random_compliant_color,
)

HEX_FORMAT = re.compile(r"^#[0-9a-f]{6}$")


class TestRandomColor:
    """Test unconstrained sampling."""

    @pytest.mark.unit
    def test_format(self, rng):
        """Test that every draw is a lowercase #rrggbb string."""
        for _ in range(200):
            assert HEX_FORMAT.match(random_color(rng))

    @pytest.mark.unit
    def test_seed_reproducible(self):
        """Test that equal seeds give equal sequences."""
        first = [random_color(np.random.default_rng(7)) for _ in range(3)]
        second = [random_color(np.random.default_rng(7)) for _ in range(3)]
        assert first == second

    @pytest.mark.unit
    def test_without_generator(self):
        """Test drawing from a fresh generator."""
        assert HEX_FORMAT.match(random_color())

    @pytest.mark.unit
    def test_draws_vary(self, rng):
        """Test that draws are not all the same color."""
        assert len({random_color(rng) for _ in range(50)}) > 40


class TestRandomCompliant:
    """Test sampling under a contrast constraint."""

    @pytest.mark.unit
    def test_aa_against_white(self, rng):
        """Test that the result passes AA against the background."""
        color = random_compliant_color("#ffffff", ComplianceLevel.AA, rng=rng)
        assert HEX_FORMAT.match(color)
        assert is_aa_compliant("#ffffff", color) is True

    @pytest.mark.unit
    def test_level_by_name(self, rng):
        """Test passing the level as a string."""
        color = random_compliant_color("#000000", "AAA", rng=rng)
        assert contrast(color, "#000000") >= 7

    @pytest.mark.unit
    def test_seed_reproducible(self):
        """Test that the same seed finds the same color."""
        first = random_aa_color("#3a7bd5", rng=np.random.default_rng(99))
        second = random_aa_color("#3a7bd5", rng=np.random.default_rng(99))
        assert first == second

    @pytest.mark.unit
    def test_impossible_background(self, rng):
        """Test that nothing reaches 7:1 against mid grey."""
        assert random_compliant_color("#888888", ComplianceLevel.AAA, rng=rng) is None

    @pytest.mark.unit
    def test_large_text_relaxes_threshold(self, rng):
        """Test that 4.5:1 against mid grey is reachable with dark colors."""
        color = random_compliant_color(
            "#888888", ComplianceLevel.AAA, large=True, max_attempts=10000, rng=rng
        )
        assert color is not None
        assert is_aaa_compliant("#888888", color, large=True) is True

    @pytest.mark.unit
    def test_invalid_background(self, rng):
        """Test that a malformed background never yields a color."""
        assert random_compliant_color("#ff", ComplianceLevel.AA, max_attempts=20, rng=rng) is None

    @pytest.mark.unit
    def test_attempt_budget(self, rng):
        """Test that exactly max_attempts colors are tried before giving up."""
        calls = []

        def never(background, candidate, large):
            calls.append((background, candidate, large))
            return False

        assert find_random_compliant("#123456", never, max_attempts=25, rng=rng) is None
        assert len(calls) == 25
        assert all(background == "#123456" for background, _, _ in calls)

    @pytest.mark.unit
    def test_stops_at_first_match(self, rng):
        """Test that sampling stops as soon as a color passes."""
        calls = []

        def third_time(background, candidate, large):
            calls.append(candidate)
            return len(calls) == 3

        color = find_random_compliant("#123456", third_time, large=True, rng=rng)
        assert color == calls[-1]
        assert len(calls) == 3

    @pytest.mark.unit
    def test_shortcuts(self, rng):
        """Test the AA and AAA conveniences."""
        assert is_aa_compliant("#202020", random_aa_color("#202020", rng=rng)) is True
        assert is_aaa_compliant("#f5f5f5", random_aaa_color("#f5f5f5", rng=rng)) is True
        assert is_aa_compliant("#808080", random_aa_color("#808080", True, rng=rng), True) is True
