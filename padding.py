"""Message padding and block parsing (FIPS 180-4 sections 5.1 and 5.2).

We assume the message comes in 8-bit bytes, so the single "1" bit that
starts the padding is always the byte 0x80.
"""

from __future__ import annotations

from typing import List

from variants import Sha2Variant


def _as_bytes(message) -> bytes:
    """Accept any bytes-like object or iterable of byte values.

    Text is rejected so encoding is never guessed, and so are plain ints,
    which ``bytes()`` would silently turn into that many zero bytes.
    """
    if isinstance(message, str):
        raise TypeError("Strings must be encoded before hashing")
    if isinstance(message, int):
        raise TypeError(f"Expected a bytes-like message, got {type(message).__name__}")
    if isinstance(message, (bytes, bytearray, memoryview)):
        return bytes(message)
    # Assume an iterable of ints in 0..255.
    return bytes(message)


def length_field(message_length: int, variant: Sha2Variant) -> bytes:
    """Encode a message length (in bytes) as the trailing big-endian bit count.

    Lengths that overflow the 64-bit (SHA-256) or 128-bit (SHA-512) field
    are reduced modulo the field width.
    """
    field_bits = variant.length_bytes * 8
    ml_bits = (message_length * 8) & ((1 << field_bits) - 1)
    return ml_bits.to_bytes(variant.length_bytes, byteorder="big")


# Section 5.1.1 (SHA-256) and 5.1.2 (SHA-512)
def pad_message(message, variant: Sha2Variant) -> bytes:
    """Pad `message` to a whole number of `variant` blocks.

    Appends 0x80, then the fewest zero bytes that leave exactly
    ``length_bytes`` free at the end of the last block, then the original
    message length in bits as a big-endian integer.
    """
    msg = _as_bytes(message)
    block = variant.block_bytes

    # Zero bytes needed so that len + 1 + zeros + length_bytes = 0 (mod block).
    num_zeros = (-(len(msg) + 1 + variant.length_bytes)) % block

    padded = bytearray(msg)
    padded.append(0x80)
    padded.extend(b"\x00" * num_zeros)
    padded.extend(length_field(len(msg), variant))
    return bytes(padded)


# Section 5.2
def split_into_blocks(padded: bytes, variant: Sha2Variant) -> List[bytes]:
    """Split a padded message into `variant.block_bytes`-sized blocks.

    A padded message whose length is not a whole number of blocks can only
    come from a broken padding step, so it is rejected outright.
    """
    size = variant.block_bytes
    if len(padded) % size != 0:
        raise ValueError(
            f"Padded message length must be a multiple of {size} bytes, got {len(padded)}"
        )
    return [bytes(padded[i : i + size]) for i in range(0, len(padded), size)]
