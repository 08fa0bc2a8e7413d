import pytest

from padding import length_field, pad_message, split_into_blocks
from variants import SHA256, SHA512

VARIANTS = [SHA256, SHA512]


@pytest.mark.parametrize("variant", VARIANTS, ids=lambda v: v.name)
def test_padding_invariants_for_every_length(variant):
    """Every padded message is block aligned, minimal and ends with the bit length."""
    for length in range(0, 300):
        msg = bytes((i * 7) & 0xFF for i in range(length))
        padded = pad_message(msg, variant)

        assert (len(padded) * 8) % (variant.block_bytes * 8) == 0
        assert padded[:length] == msg
        assert padded[length] == 0x80

        tail = padded[-variant.length_bytes :]
        assert int.from_bytes(tail, "big") == length * 8

        zeros = padded[length + 1 : -variant.length_bytes]
        assert zeros == b"\x00" * len(zeros)
        # Never a whole block of padding more than needed.
        assert len(zeros) < variant.block_bytes


@pytest.mark.parametrize(
    "variant,length,blocks",
    [
        (SHA256, 0, 1),
        (SHA256, 55, 1),  # 0x80 and the length field fill the block exactly
        (SHA256, 56, 2),
        (SHA256, 64, 2),
        (SHA512, 0, 1),
        (SHA512, 111, 1),
        (SHA512, 112, 2),
        (SHA512, 128, 2),
    ],
)
def test_block_boundaries(variant, length, blocks):
    padded = pad_message(b"a" * length, variant)
    assert len(padded) == blocks * variant.block_bytes


def test_no_zero_bytes_when_exactly_full():
    padded = pad_message(b"x" * 55, SHA256)
    assert padded[55] == 0x80
    assert padded[56:] == (55 * 8).to_bytes(8, "big")


def test_abc_padding_sha256():
    padded = pad_message(b"abc", SHA256)
    assert padded[:4] == b"abc\x80"
    assert padded[-8:] == b"\x00\x00\x00\x00\x00\x00\x00\x18"
    assert len(padded) == 64


def test_length_field_widths():
    assert len(length_field(3, SHA256)) == 8
    assert len(length_field(3, SHA512)) == 16
    assert length_field(3, SHA512)[-1] == 0x18


def test_length_field_wraps_oversized_lengths():
    # 2**61 bytes is 2**64 bits, which no longer fits the 64-bit field.
    assert length_field(2**61, SHA256) == b"\x00" * 8
    assert length_field(2**61 + 1, SHA256) == (8).to_bytes(8, "big")
    assert length_field(2**61, SHA512) == (2**64).to_bytes(16, "big")


def test_pad_accepts_byte_like_inputs():
    expected = pad_message(b"abc", SHA256)
    assert pad_message(bytearray(b"abc"), SHA256) == expected
    assert pad_message(memoryview(b"abc"), SHA256) == expected
    assert pad_message([0x61, 0x62, 0x63], SHA256) == expected


def test_pad_rejects_text():
    with pytest.raises(TypeError):
        pad_message("abc", SHA256)


@pytest.mark.parametrize("message", [3, 0, True, None])
def test_pad_rejects_non_bytes(message):
    # bytes(3) would be three zero bytes, not the message 3.
    with pytest.raises(TypeError):
        pad_message(message, SHA256)


@pytest.mark.parametrize("variant", VARIANTS, ids=lambda v: v.name)
def test_split_into_blocks(variant):
    padded = pad_message(b"q" * (variant.block_bytes + 5), variant)
    blocks = split_into_blocks(padded, variant)
    assert len(blocks) == 2
    assert all(len(block) == variant.block_bytes for block in blocks)
    assert b"".join(blocks) == padded


@pytest.mark.parametrize("variant", VARIANTS, ids=lambda v: v.name)
def test_split_rejects_unaligned_input(variant):
    with pytest.raises(ValueError):
        split_into_blocks(b"\x00" * (variant.block_bytes + 1), variant)
