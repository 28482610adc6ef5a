# generator.py
"""Seeded uniform source with an explicit raw-integer to float conversion."""

from __future__ import annotations

import logging

import numpy as np

from .errors import StartupError

RAW_BITS = 53
# Raw outputs lie in [0, RAW_RANGE); dividing by RAW_RANGE is exact in float64.
RAW_RANGE = 1 << RAW_BITS
_SHIFT = np.uint64(64 - RAW_BITS)


class UniformSource:
    """Locally owned PCG64 stream producing uniform floats in [0, 1).

    Every value, whether drawn alone or in a block, comes from the same
    stream, so ``draw()`` called n times yields exactly ``uniform_block(n)``.
    ``draws`` counts the uniform values handed out so far.
    """

    def __init__(self, seed: int):
        try:
            self._bit_generator = np.random.PCG64(seed)
        except (TypeError, ValueError) as e:
            raise StartupError(f"Cannot initialize generator with seed {seed!r}: {e}") from e
        self.seed = seed
        self.draws = 0
        logging.debug("Initialized PCG64 source with seed %s", seed)

    def next_raw(self) -> int:
        """Return one raw integer in [0, RAW_RANGE)."""
        return int(np.uint64(self._bit_generator.random_raw()) >> _SHIFT)

    def raw_block(self, n: int) -> np.ndarray:
        """Return ``n`` raw integers in [0, RAW_RANGE) as a uint64 array."""
        return self._bit_generator.random_raw(size=n) >> _SHIFT

    def draw(self) -> float:
        value = float(self.next_raw()) / RAW_RANGE
        self.draws += 1
        return value

    def uniform_block(self, n: int) -> np.ndarray:
        values = self.raw_block(n).astype(np.float64) / RAW_RANGE
        self.draws += n
        return values
