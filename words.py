"""Fixed-width unsigned word arithmetic for the SHA-2 family.

Python integers are unbounded, so every operation that can grow a word
(left shift, addition, bitwise NOT) is reduced back into range by masking
with ``2**width - 1``. SHA-256 uses 32-bit words and SHA-512 uses 64-bit
words; all helpers take the width explicitly.

All additions are performed modulo ``2**width``, as in FIPS 180-4.
"""

from __future__ import annotations

MASK32 = 0xFFFFFFFF
MASK64 = 0xFFFFFFFFFFFFFFFF

_MASKS = {32: MASK32, 64: MASK64}


def word_mask(width: int) -> int:
    """Return the all-ones mask for a `width`-bit word."""
    try:
        return _MASKS[width]
    except KeyError:
        raise ValueError(f"Unsupported word width {width}, expected 32 or 64") from None


def rotr(x: int, n: int, width: int = 32) -> int:
    """Right-rotate a `width`-bit word `x` by `n` bits.

    Only ``0 < n < width`` is meaningful; nothing in SHA-2 rotates by 0 or
    by the full word width.
    """
    if not 0 < n < width:
        raise ValueError(f"Rotation amount must be in 1..{width - 1}, got {n}")
    mask = word_mask(width)
    x &= mask
    return ((x >> n) | (x << (width - n))) & mask


def shr(x: int, n: int, width: int = 32) -> int:
    """Logical right shift of a `width`-bit word `x` by `n` bits."""
    x &= word_mask(width)
    return x >> n


def wrapping_add(*words: int, width: int = 32) -> int:
    """Add any number of words modulo ``2**width``."""
    return sum(words) & word_mask(width)
