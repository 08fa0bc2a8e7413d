"""Message schedule expansion (FIPS 180-4 sections 6.2.2 and 6.4.2, step 1)."""

from __future__ import annotations

from typing import List, Sequence

from variants import Sha2Variant
from words import rotr, shr, wrapping_add


def small_sigma0(x: int, variant: Sha2Variant) -> int:
    """SHA-2 function σ0 used in the message schedule."""
    r1, r2, s = variant.small_sigma0
    w = variant.word_bits
    return rotr(x, r1, w) ^ rotr(x, r2, w) ^ shr(x, s, w)


def small_sigma1(x: int, variant: Sha2Variant) -> int:
    """SHA-2 function σ1 used in the message schedule."""
    r1, r2, s = variant.small_sigma1
    w = variant.word_bits
    return rotr(x, r1, w) ^ rotr(x, r2, w) ^ shr(x, s, w)


def init_message_schedule(block: bytes, variant: Sha2Variant) -> List[int]:
    """Read the 16 big-endian words W[0..15] of a block."""
    if len(block) != variant.block_bytes:
        raise ValueError(f"Expected {variant.block_bytes}-byte block, got {len(block)}")

    n = variant.word_bytes
    return [
        int.from_bytes(block[n * i : n * (i + 1)], byteorder="big")
        for i in range(variant.block_words)
    ]


def expand_message_schedule(w: Sequence[int], variant: Sha2Variant) -> List[int]:
    """Expand W[0..15] to the full W[0..rounds-1] schedule.

    Only the first 16 words of `w` are used; the caller's list is not
    modified.
    """
    if len(w) < 16:
        raise ValueError(f"Message schedule must contain at least 16 words, got {len(w)}")

    width = variant.word_bits
    schedule = [x & variant.mask for x in w[:16]]
    for t in range(16, variant.rounds):
        schedule.append(
            wrapping_add(
                small_sigma1(schedule[t - 2], variant),
                schedule[t - 7],
                small_sigma0(schedule[t - 15], variant),
                schedule[t - 16],
                width=width,
            )
        )
    return schedule


def build_message_schedule(block: bytes, variant: Sha2Variant) -> List[int]:
    """Given one block, build the 64-word (or 80-word) message schedule."""
    return expand_message_schedule(init_message_schedule(block, variant), variant)
