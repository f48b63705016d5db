"""Tests for the seedable Lehmer RNG."""

import pytest

from solargen.utils import SystemRNG
from solargen.utils.rng import MODULUS


class TestSystemRNG:
    """Test SystemRNG determinism and bounds."""

    def test_same_seed_same_sequence(self):
        """Test that two generators with one seed agree."""
        rng1 = SystemRNG(42)
        rng2 = SystemRNG(42)
        assert [rng1.random() for _ in range(20)] == [rng2.random() for _ in range(20)]

    def test_different_seeds_differ(self):
        """Test that different seeds give different streams."""
        rng1 = SystemRNG(1)
        rng2 = SystemRNG(2)
        assert [rng1.random() for _ in range(5)] != [rng2.random() for _ in range(5)]

    def test_first_value_seed_one(self):
        """Test the first draw of the minimal standard generator."""
        rng = SystemRNG(1)
        assert rng.random() == pytest.approx(16806 / (MODULUS - 1))

    def test_zero_seed_is_valid(self):
        """Test that seed 0 is folded into the valid state range."""
        rng = SystemRNG(0)
        assert 1 <= rng.get_state() <= MODULUS - 1
        assert 0 <= rng.random() < 1

    def test_negative_seed_is_valid(self):
        """Test that negative seeds are accepted."""
        rng = SystemRNG(-17)
        for _ in range(100):
            assert 0 <= rng.random() < 1

    def test_random_range(self):
        """Test that random() stays in [0, 1)."""
        rng = SystemRNG(123)
        for _ in range(1000):
            assert 0 <= rng.random() < 1

    def test_uniform_range(self):
        """Test uniform() bounds."""
        rng = SystemRNG(7)
        for _ in range(500):
            value = rng.uniform(1.5, 1.8)
            assert 1.5 <= value < 1.8

    def test_randint_inclusive(self):
        """Test that randint() covers both endpoints."""
        rng = SystemRNG(99)
        values = {rng.randint(0, 3) for _ in range(500)}
        assert values == {0, 1, 2, 3}

    def test_randint_empty_range(self):
        """Test that an empty range raises."""
        rng = SystemRNG(42)
        with pytest.raises(ValueError, match="Empty range"):
            rng.randint(5, 4)

    def test_choice(self):
        """Test that choice() returns members of the sequence."""
        rng = SystemRNG(42)
        options = ("a", "b", "c")
        for _ in range(50):
            assert rng.choice(options) in options

    def test_choice_empty(self):
        """Test that choosing from an empty sequence raises."""
        rng = SystemRNG(42)
        with pytest.raises(IndexError):
            rng.choice([])

    def test_state_round_trip(self):
        """Test that restoring a saved state replays the stream."""
        rng = SystemRNG(42)
        rng.random()
        state = rng.get_state()
        first = [rng.random() for _ in range(10)]

        rng.set_state(state)
        assert [rng.random() for _ in range(10)] == first

    def test_set_state_rejects_out_of_range(self):
        """Test set_state validation."""
        rng = SystemRNG(42)
        with pytest.raises(ValueError, match="Invalid RNG state"):
            rng.set_state(0)
        with pytest.raises(ValueError, match="Invalid RNG state"):
            rng.set_state(MODULUS)
