"""
uniqseq — unique pseudo-random integer sequences without a visited-set.

Features:

- Quadratic-residue permutation over a prime field p ≡ 3 (mod 4), applied twice
  per draw, walking an index so every value in [0, range] appears once per period.
- Field prime selection capped at the largest 32-bit prime (4294967291).
- Reference baselines (naive duplicate scan, bitfield tracking) and a benchmark
  harness comparing them against the permutation generator.

The permutation is a convenience construction, not a cipher.
"""

from .errors import UniqSeqError, InvalidRange, InvalidSeed, DuplicateValueError
from .primes import next_prime, select_prime
from .sequence import UniqueSequence, SynchronizedSequence

__version__ = "0.1"

__all__ = [
    "UniqueSequence",
    "SynchronizedSequence",
    "select_prime",
    "next_prime",
    "UniqSeqError",
    "InvalidRange",
    "InvalidSeed",
    "DuplicateValueError",
]
