"""SHA-256 and SHA-512 built from the shared padding, schedule and compression steps.

This module provides:

- `sha256_hash(data)` / `sha512_hash(data)`: the digest as a tuple of 8 words.
- `sha256(data)` / `sha512(data)`: the digest as big-endian bytes.
- `prepare_message` / `compress` / `finalize_digest`: the same pipeline split
  into the work before, during and after compression, for callers that want
  to run their own compression loop.

Empty input
-----------
FIPS 180-4 defines a digest for the empty message and that is what
`hash_message` returns by default. Passing ``empty_as_none=True`` restores
the older "no digest" behaviour and returns ``None`` for empty input.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from compress import State, check_state, compress
from padding import _as_bytes, pad_message, split_into_blocks
from schedule import build_message_schedule
from variants import SHA256, SHA512, Sha2Variant


def prepare_message(message, variant: Sha2Variant) -> Tuple[State, List[List[int]]]:
    """Do all the work needed before compression.

    This performs:
    - Padding of the message.
    - Splitting into blocks.
    - Building the message schedule for each block.

    It returns the Initial Hash Value and a list of message schedules, one
    per block. With this, a custom compression pipeline looks like:

        state, schedules = prepare_message(data, SHA256)
        for ws in schedules:
            state = my_compress(state, ws)
        digest = finalize_digest(state, SHA256)
    """
    padded = pad_message(message, variant)
    blocks = split_into_blocks(padded, variant)
    schedules = [build_message_schedule(block, variant) for block in blocks]
    return tuple(variant.initial_hash), schedules


def digest_bytes(state: Sequence[int], variant: Sha2Variant) -> bytes:
    """Convert a final chaining value into the big-endian digest bytes."""
    state = check_state(state, variant, "State")
    return b"".join(word.to_bytes(variant.word_bytes, byteorder="big") for word in state)


finalize_digest = digest_bytes


def _run(message: bytes, variant: Sha2Variant) -> List[State]:
    """Hash `message`, returning every chaining value from H(0) to H(N)."""
    state, schedules = prepare_message(message, variant)
    states = [state]
    for ws in schedules:
        # Each block starts from the previous block's chaining value.
        state = compress(state, ws, variant)
        states.append(state)
    return states


def hash_message(message, variant: Sha2Variant, *, empty_as_none: bool = False) -> Optional[State]:
    """Compute the digest of `message` as 8 words.

    Returns ``None`` only when `message` is empty and `empty_as_none` is set.
    """
    data = _as_bytes(message)
    if not data and empty_as_none:
        return None
    return _run(data, variant)[-1]


def hash_with_state_tracking(message, variant: Sha2Variant) -> Tuple[State, List[State]]:
    """Compute the digest while recording the chaining value after each block.

    Returns:
        (digest_words, chaining_values)
        where chaining_values[0] is the Initial Hash Value and
        chaining_values[i + 1] is the value after block i.
    """
    states = _run(_as_bytes(message), variant)
    return states[-1], states


def sha256_hash(message, *, empty_as_none: bool = False) -> Optional[State]:
    """SHA-256 digest of `message` as 8 32-bit words."""
    return hash_message(message, SHA256, empty_as_none=empty_as_none)


def sha512_hash(message, *, empty_as_none: bool = False) -> Optional[State]:
    """SHA-512 digest of `message` as 8 64-bit words."""
    return hash_message(message, SHA512, empty_as_none=empty_as_none)


def sha256(data) -> bytes:
    return digest_bytes(sha256_hash(data), SHA256)


def sha512(data) -> bytes:
    return digest_bytes(sha512_hash(data), SHA512)


def hexdigest(data, variant: Sha2Variant = SHA256) -> str:
    """Convenience helper to return the hex digest of `data`."""
    return digest_bytes(hash_message(data, variant), variant).hex()
