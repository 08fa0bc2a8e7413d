"""Forward SHA-2 compression.

This implements the compression loop shared by SHA-256 and SHA-512.
Given the current working state words `(a, b, c, d, e, f, g, h)`, the round
constant `k`, and the message schedule word `w`, one round computes:

    S1    = Σ1(e)
    ch    = (e & f) ^ (~e & g)
    temp1 = h + S1 + ch + k + w

    S0    = Σ0(a)
    maj   = (a & b) ^ (a & c) ^ (b & c)
    temp2 = S0 + maj

    a' = temp1 + temp2
    e' = d + temp1

    b' = a
    c' = b
    d' = c
    f' = e
    g' = f
    h' = g

where Σ0/Σ1 are three XORed rotations whose amounts depend on the variant
(2, 13, 22 / 6, 11, 25 for SHA-256; 28, 34, 39 / 14, 18, 41 for SHA-512).

All additions are performed modulo 2**32 (SHA-256) or 2**64 (SHA-512).
"""

from __future__ import annotations

from typing import Sequence, Tuple

from variants import Sha2Variant
from words import rotr, wrapping_add

State = Tuple[int, int, int, int, int, int, int, int]


# Section 4.1.2 (4.2)
def ch(x: int, y: int, z: int, mask: int) -> int:
    return (x & y) ^ (~x & mask & z)


# Section 4.1.2 (4.3)
def maj(x: int, y: int, z: int) -> int:
    return (x & y) ^ (x & z) ^ (y & z)


def big_sigma0(x: int, variant: Sha2Variant) -> int:
    r1, r2, r3 = variant.big_sigma0
    w = variant.word_bits
    return rotr(x, r1, w) ^ rotr(x, r2, w) ^ rotr(x, r3, w)


def big_sigma1(x: int, variant: Sha2Variant) -> int:
    r1, r2, r3 = variant.big_sigma1
    w = variant.word_bits
    return rotr(x, r1, w) ^ rotr(x, r2, w) ^ rotr(x, r3, w)


def check_state(state: Sequence[int], variant: Sha2Variant, what: str) -> State:
    if len(state) != 8:
        raise ValueError(f"{what} must have 8 words, got {len(state)}")
    for j, word in enumerate(state):
        if not 0 <= word <= variant.mask:
            raise ValueError(f"{what} word {j} is out of {variant.word_bits}-bit range: {word:#x}")
    return tuple(state)


def compression(state: State, w: int, k: int, variant: Sha2Variant) -> State:
    """Perform one compression round.

    Parameters
    ----------
    state : tuple[int, ...]
        The working variables (a, b, c, d, e, f, g, h) before the round.
    w : int
        Message schedule word `w[t]`.
    k : int
        Round constant `k[t]`.

    Returns
    -------
    tuple[int, ...]
        Updated working state after one round.
    """
    a, b, c, d, e, f, g, h = state
    mask = variant.mask
    width = variant.word_bits

    # 1. temp1 from the "e" half of the state
    temp1 = wrapping_add(h, big_sigma1(e, variant), ch(e, f, g, mask), k, w, width=width)

    # 2. temp2 from the "a" half of the state
    temp2 = wrapping_add(big_sigma0(a, variant), maj(a, b, c), width=width)

    # 3. Shift the registers
    return (
        wrapping_add(temp1, temp2, width=width),
        a,
        b,
        c,
        wrapping_add(d, temp1, width=width),
        e,
        f,
        g,
    )


def compress_block(state: Sequence[int], ws: Sequence[int], variant: Sha2Variant) -> State:
    """Run the full compression loop for one block.

    Parameters
    ----------
    state : Sequence[int]
        Initial working state words (the current chaining value).
    ws : Sequence[int]
        The message schedule `w[0..rounds-1]` for this block.

    Returns
    -------
    tuple[int, ...]
        Working state words after the last round, before the feed-forward.
    """
    if len(ws) != variant.rounds:
        raise ValueError(
            f"{variant.name} expects {variant.rounds} message schedule words, got {len(ws)}"
        )

    working = check_state(state, variant, "Working state")
    for t in range(variant.rounds):
        working = compression(working, ws[t], variant.k[t], variant)
    return working


def update_hash_state(prev: Sequence[int], working: Sequence[int], variant: Sha2Variant) -> State:
    """Fold the post-round working variables into the chaining value.

        H_{i+1}[j] = (H_i[j] + working[j]) mod 2^w
    """
    width = variant.word_bits
    return tuple(wrapping_add(h, x, width=width) for h, x in zip(prev, working))


def compress(chaining_value: Sequence[int], ws: Sequence[int], variant: Sha2Variant) -> State:
    """Compress one block's schedule into the next chaining value."""
    prev = check_state(chaining_value, variant, "Chaining value")
    return update_hash_state(prev, compress_block(prev, ws, variant), variant)
