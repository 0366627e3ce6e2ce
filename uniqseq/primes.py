from __future__ import annotations

from typing import Callable

from Cryptodome.Util.number import isPrime as _is_prime

from .constants import MAX_PRIME_32
from .errors import InvalidRange


NextPrime = Callable[[int], int]


def is_prime(n: int) -> bool:
    if n < 2:
        return False
    return bool(_is_prime(n))


def next_prime(n: int) -> int:
    """Return the smallest prime strictly greater than ``n``."""
    if n < 2:
        return 2
    candidate = n + 1
    if candidate > 2 and candidate % 2 == 0:
        candidate += 1
    while not is_prime(candidate):
        candidate += 2
    return candidate


def select_prime(universe: int, next_prime: NextPrime = next_prime) -> int:
    """Pick the field modulus for a sequence over ``[0, universe]``.

    Returns the smallest prime ``p >= universe`` with ``p % 4 == 3``. Ranges
    above the largest 32-bit prime are capped at that prime, which narrows the
    span the generator can cover.

    Args:
        universe: Requested range (>= 1).
        next_prime: Callable returning the smallest prime strictly greater
            than its argument.

    Raises:
        InvalidRange: If the prime source runs past the 32-bit ceiling.
    """
    if universe > MAX_PRIME_32:
        return MAX_PRIME_32
    prime = next_prime(universe - 1)
    while prime % 4 != 3:
        if prime > MAX_PRIME_32:
            break
        prime = next_prime(prime)
    if prime > MAX_PRIME_32:
        raise InvalidRange(f"No prime ≡ 3 (mod 4) in [{universe}, {MAX_PRIME_32}]")
    return prime
