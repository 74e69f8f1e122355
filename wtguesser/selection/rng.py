"""
Seeded PRNG for daily challenges.

Every player hashing the same seed string must see the same sequence of
draws, on any platform. Two well-known 32-bit algorithms are combined:

  - FNV-1a over the seed's UTF-8 bytes  -> initial 32-bit state
  - Mulberry32 step per draw            -> float in [0, 1)

Python ints are unbounded, so every product/sum is masked back to 32 bits;
`_imul` mirrors a C-style 32-bit multiply.
"""

MASK32 = 0xFFFFFFFF

FNV_OFFSET_BASIS = 0x811C9DC5
FNV_PRIME = 0x01000193
MULBERRY_INCREMENT = 0x6D2B79F5


def _imul(a: int, b: int) -> int:
    """Low 32 bits of a * b."""
    return (a * b) & MASK32


def fnv1a_32(text: str) -> int:
    """
    FNV-1a 32-bit hash of `text`.

    Examples:
      fnv1a_32("")       -> 0x811C9DC5
      fnv1a_32("a")      -> 0xE40C292C
      fnv1a_32("foobar") -> 0xBF9CF968
    """
    h = FNV_OFFSET_BASIS
    for byte in text.encode("utf-8"):
        h ^= byte
        h = (h * FNV_PRIME) & MASK32
    return h


class SeededRandom:
    """Mulberry32 generator seeded from a string."""

    def __init__(self, seed: str):
        self.seed = seed
        self.state = fnv1a_32(seed)

    def next(self) -> float:
        """Advance the state and return a draw in [0, 1)."""
        self.state = (self.state + MULBERRY_INCREMENT) & MASK32
        t = self.state
        t = _imul(t ^ (t >> 15), t | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & MASK32
        return ((t ^ (t >> 14)) & MASK32) / 4294967296
