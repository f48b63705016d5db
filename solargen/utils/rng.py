"""Seedable RNG for deterministic system generation."""

from typing import Sequence, TypeVar

T = TypeVar("T")

MODULUS = 2147483647  # 2^31 - 1
MULTIPLIER = 16807


class SystemRNG:
    """Park-Miller "minimal standard" Lehmer generator.

    All randomness in generation should go through this class so that the
    same seed always produces the same system. Each generator owns one
    instance; instances never share state, so independent generators can run
    on separate threads without locking.
    """

    def __init__(self, seed: int):
        """Initialize RNG with given seed.

        Args:
            seed: Any integer; folded into the valid state range [1, 2^31 - 2]
        """
        self.seed = seed
        state = seed % MODULUS
        if state <= 0:
            state += MODULUS - 1
        self._state = state

    def random(self) -> float:
        """Return random float in [0.0, 1.0).

        Returns:
            (s - 1) / (2^31 - 2) for the advanced state s
        """
        self._state = (self._state * MULTIPLIER) % MODULUS
        return (self._state - 1) / (MODULUS - 1)

    def uniform(self, low: float, high: float) -> float:
        """Return random float in [low, high).

        Args:
            low: Lower bound (inclusive)
            high: Upper bound (exclusive)

        Returns:
            Random float between low and high
        """
        return low + self.random() * (high - low)

    def randint(self, a: int, b: int) -> int:
        """Return random integer in range [a, b], inclusive.

        Args:
            a: Lower bound (inclusive)
            b: Upper bound (inclusive)

        Returns:
            Random integer between a and b
        """
        if b < a:
            raise ValueError(f"Empty range for randint: [{a}, {b}]")
        return a + int(self.random() * (b - a + 1))

    def choice(self, seq: Sequence[T]) -> T:
        """Choose random element from non-empty sequence.

        Args:
            seq: Sequence to choose from

        Returns:
            Random element from sequence
        """
        if not seq:
            raise IndexError("Cannot choose from an empty sequence")
        return seq[int(self.random() * len(seq))]

    def get_state(self) -> int:
        """Get the current state of the RNG.

        Returns:
            Integer state that can be used with set_state
        """
        return self._state

    def set_state(self, state: int):
        """Restore a state previously returned by get_state.

        Args:
            state: Integer state in [1, 2^31 - 2]
        """
        if not (1 <= state <= MODULUS - 1):
            raise ValueError(f"Invalid RNG state: {state} (must be 1-{MODULUS - 1})")
        self._state = state
