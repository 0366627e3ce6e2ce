from __future__ import annotations

import hashlib


class DeterministicPRNG:
    """Deterministic pseudo-random 64-bit word generator based on BLAKE2b.

    Each refill hashes ``seed_base || seed || counter`` into 64 bytes, which are
    served as eight little-endian 64-bit words.
    """

    def __init__(self, seed_base: bytes, seed: int):
        self.seed_base = seed_base
        self.seed = seed
        self.counter = 0
        self.buffer = b""
        self.pos = 0

    def _refill(self):
        material = self.seed_base + self.seed.to_bytes(8, "little") + self.counter.to_bytes(8, "little")
        self.buffer = hashlib.blake2b(material, digest_size=64).digest()
        self.counter += 1
        self.pos = 0

    def next_word(self) -> int:
        if self.pos >= len(self.buffer):
            self._refill()
        w = int.from_bytes(self.buffer[self.pos:self.pos + 8], "little")
        self.pos += 8
        return w

    def next_uint(self, modulus: int) -> int:
        """Uniform integer in ``[0, modulus)``; 0 when ``modulus <= 0``."""
        if modulus <= 0:
            return 0
        limit = (1 << 64) - ((1 << 64) % modulus)
        while True:
            v = self.next_word()
            if v < limit:
                return v % modulus
