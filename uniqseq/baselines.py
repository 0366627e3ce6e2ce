"""Reference choosers used to validate and benchmark ``UniqueSequence``.

``choose_naive`` and ``choose_bitfield`` draw uniformly from ``[0, universe]``
and discard repeats; ``choose_smart`` reads straight from the permutation
generator and needs no duplicate tracking at all.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Sequence

from .constants import BASELINE_SEED_BASE, DEFAULT_BASELINE_SEED, DEFAULT_SEED
from .errors import DuplicateValueError
from .prng import DeterministicPRNG
from .sequence import UniqueSequence


Chooser = Callable[[int, int], List[int]]


class UniformSource:
    """Uniform integers in ``[0, universe]`` (both ends inclusive)."""

    def __init__(self, universe: int, seed: int = DEFAULT_BASELINE_SEED):
        if universe < 0:
            raise ValueError("universe must be >= 0")
        if seed < 0:
            raise ValueError("seed must be >= 0")
        self.universe = universe
        self._prng = DeterministicPRNG(BASELINE_SEED_BASE, seed)

    def next(self) -> int:
        return self._prng.next_uint(self.universe + 1)


def _check_count(count: int, universe: int) -> None:
    if count < 0:
        raise ValueError("count must be >= 0")
    if count > universe + 1:
        raise ValueError(f"Cannot choose {count} distinct values from [0, {universe}]")


def choose_naive(count: int, universe: int, seed: int = DEFAULT_BASELINE_SEED) -> List[int]:
    # Scan the whole accepted prefix for every candidate
    _check_count(count, universe)
    src = UniformSource(universe, seed)
    res: List[int] = []
    while len(res) < count:
        candidate = src.next()
        not_in_seq = True
        for prev in res:
            if prev == candidate:
                not_in_seq = False
                break
        if not_in_seq:
            res.append(candidate)
    return res


def choose_bitfield(count: int, universe: int, seed: int = DEFAULT_BASELINE_SEED) -> List[int]:
    # One flag per value; memory grows with the universe, not with count
    _check_count(count, universe)
    src = UniformSource(universe, seed)
    seen = bytearray(universe + 1)
    res: List[int] = []
    while len(res) < count:
        candidate = src.next()
        if not seen[candidate]:
            seen[candidate] = 1
            res.append(candidate)
    return res


def choose_smart(count: int, universe: int, seed: int = DEFAULT_SEED) -> List[int]:
    return UniqueSequence(universe, seed).take(count)


def check_unique(seq: Sequence[int]) -> None:
    """Raise ``DuplicateValueError`` for the first repeated pair in ``seq``.

    Pairs are reported in scan order (lowest first index, then lowest second
    index).
    """
    first_seen: Dict[int, int] = {}
    found = None
    for j, value in enumerate(seq):
        i = first_seen.setdefault(value, j)
        if i != j and (found is None or i < found[0]):
            found = (i, j, value)
            if i == 0:
                break
    if found is not None:
        raise DuplicateValueError(*found)


CHOOSERS: Dict[str, Chooser] = {
    "smart": choose_smart,
    "bitfield": choose_bitfield,
    "naive": choose_naive,
}
