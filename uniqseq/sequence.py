from __future__ import annotations

import threading
from typing import List, Optional

from .constants import DEFAULT_SEED, UINT32_MASK
from .errors import InvalidRange, InvalidSeed
from .primes import NextPrime, next_prime as _default_next_prime, select_prime


class UniqueSequence:
    """Infinite stream of distinct integers in ``[0, range]``.

    Values come from a quadratic-residue permutation over a prime field
    ``p ≡ 3 (mod 4)``. Squaring is 2-to-1 on the nonzero residues and the two
    preimages of a residue are ``x`` and ``p - x``; folding at ``p // 2`` makes
    it a bijection on ``[0, p)``. An index walks the field and each index is
    permuted twice; values above ``range`` are rejected. Every value of
    ``[0, range]`` is produced exactly once per ``p`` index steps, after which
    the stream repeats.

    Not thread-safe: one instance must be owned by a single thread (see
    ``SynchronizedSequence``). Restart by building a new instance.
    """

    def __init__(self, universe: int, seed: int = DEFAULT_SEED, *, next_prime: Optional[NextPrime] = None):
        if isinstance(universe, bool) or not isinstance(universe, int):
            raise InvalidRange(f"Range must be an integer, got {universe!r}")
        if universe < 1:
            raise InvalidRange(f"Range must be >= 1, got {universe}")
        if isinstance(seed, bool) or not isinstance(seed, int) or not 0 <= seed <= UINT32_MASK:
            raise InvalidSeed(f"Seed must be an integer in [0, {UINT32_MASK}], got {seed!r}")
        self._range = universe
        self._seed = seed
        self._prime = select_prime(universe, next_prime or _default_next_prime)
        self._offset = self._prime - universe
        # 32-bit unsigned wraparound on the mixing sum
        raw = self.permute((self.permute(seed) + 2 * self._prime - universe) & UINT32_MASK)
        if raw >= self._prime:
            # permute() is the identity outside the field, so the first draw from
            # such an index is rejected and the walk resumes at raw + 1
            raw = (raw + 1) % self._prime
        self._index = raw

    @property
    def range(self) -> int:
        return self._range

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def prime(self) -> int:
        return self._prime

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def index(self) -> int:
        return self._index

    @property
    def period(self) -> int:
        return self._prime

    def permute(self, x: int) -> int:
        p = self._prime
        if x >= p:
            return x
        residue = (x * x) % p
        return residue if x <= p // 2 else p - residue

    def next(self) -> int:
        p = self._prime
        limit = self._range
        while True:
            res = self.permute(self.permute(self._index))
            self._index = (self._index + 1) % p
            if res <= limit:
                return res

    def take(self, count: int) -> List[int]:
        if count < 0:
            raise ValueError("count must be >= 0")
        return [self.next() for _ in range(count)]

    def __iter__(self) -> "UniqueSequence":
        return self

    def __next__(self) -> int:
        return self.next()

    def __repr__(self) -> str:
        return f"UniqueSequence(range={self._range}, seed={self._seed}, prime={self._prime})"


class SynchronizedSequence:
    """Lock-guarded wrapper so one generator can be drawn from many threads."""

    def __init__(self, inner: UniqueSequence):
        self._inner = inner
        self._lock = threading.Lock()

    @classmethod
    def create(cls, universe: int, seed: int = DEFAULT_SEED, **kwargs) -> "SynchronizedSequence":
        return cls(UniqueSequence(universe, seed, **kwargs))

    @property
    def inner(self) -> UniqueSequence:
        return self._inner

    def next(self) -> int:
        with self._lock:
            return self._inner.next()

    def take(self, count: int) -> List[int]:
        with self._lock:
            return self._inner.take(count)

    def __iter__(self) -> "SynchronizedSequence":
        return self

    def __next__(self) -> int:
        return self.next()
