"""Seedable sampling of integers.

Use set_seed(n) at test start for reproducibility.
Default (no seed) draws from os.urandom.
"""

import os
import random as _random


class DeterministicRNG:
    """Seeded PRNG wrapper. When seed is None, uses os.urandom."""

    def __init__(self, seed=None):
        self._seed = seed
        if seed is not None:
            self._rng = _random.Random(seed)
        else:
            self._rng = None  # Use os-level randomness

    def randbits(self, k: int) -> int:
        if self._rng is not None:
            return self._rng.getrandbits(k)
        nbytes = (k + 7) // 8
        return int.from_bytes(os.urandom(nbytes), 'big') >> (nbytes * 8 - k)

    def randbelow(self, n: int) -> int:
        if self._rng is not None:
            return self._rng.randrange(n)
        # Extra 64 bits keep the modulo bias negligible.
        k = n.bit_length() + 64
        return self.randbits(k) % n

    def randrange(self, start: int, stop: int) -> int:
        return start + self.randbelow(stop - start)


# Global instance
_global_rng = DeterministicRNG(seed=None)


def set_seed(seed: int | None):
    """Set global seed for reproducibility. None = os-level randomness."""
    global _global_rng
    _global_rng = DeterministicRNG(seed=seed)


def randbits(k: int) -> int:
    return _global_rng.randbits(k)


def randbelow(n: int) -> int:
    return _global_rng.randbelow(n)


def randrange(start: int, stop: int) -> int:
    return _global_rng.randrange(start, stop)
