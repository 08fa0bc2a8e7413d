"""Per-variant parameters for SHA-256 and SHA-512 (FIPS 180-4).

Both algorithms run the same pipeline (pad, parse, expand, compress); they
differ only in word width, block size, round count, the rotation/shift
amounts of the sigma functions, and the constant tables collected here.

SHA-256: Block size 512 bits, Word size 32 bits, Digest size 256 bits
SHA-512: Block size 1024 bits, Word size 64 bits, Digest size 512 bits
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from words import word_mask


@dataclass(frozen=True)
class Sha2Variant:
    """Static description of one SHA-2 variant.

    The sigma tuples hold ``(rotr, rotr, shr)`` amounts for the small
    sigmas and ``(rotr, rotr, rotr)`` amounts for the big sigmas.
    """

    name: str
    word_bits: int
    block_bytes: int
    length_bytes: int
    rounds: int
    small_sigma0: Tuple[int, int, int]
    small_sigma1: Tuple[int, int, int]
    big_sigma0: Tuple[int, int, int]
    big_sigma1: Tuple[int, int, int]
    k: Tuple[int, ...]
    initial_hash: Tuple[int, ...]

    @property
    def word_bytes(self) -> int:
        return self.word_bits // 8

    @property
    def mask(self) -> int:
        return word_mask(self.word_bits)

    @property
    def block_words(self) -> int:
        return self.block_bytes // self.word_bytes

    @property
    def digest_bytes(self) -> int:
        return len(self.initial_hash) * self.word_bytes

    def __repr__(self) -> str:
        return f"Sha2Variant({self.name})"


# Section 4.2.2 - SHA-256 Constants
# "These words represent the first thirty-two bits of the fractional parts of
# the cube roots of the first sixty-four prime numbers."
K256: Tuple[int, ...] = (
    0x428A2F98, 0x71374491, 0xB5C0FBCF, 0xE9B5DBA5, 0x3956C25B, 0x59F111F1, 0x923F82A4, 0xAB1C5ED5,
    0xD807AA98, 0x12835B01, 0x243185BE, 0x550C7DC3, 0x72BE5D74, 0x80DEB1FE, 0x9BDC06A7, 0xC19BF174,
    0xE49B69C1, 0xEFBE4786, 0x0FC19DC6, 0x240CA1CC, 0x2DE92C6F, 0x4A7484AA, 0x5CB0A9DC, 0x76F988DA,
    0x983E5152, 0xA831C66D, 0xB00327C8, 0xBF597FC7, 0xC6E00BF3, 0xD5A79147, 0x06CA6351, 0x14292967,
    0x27B70A85, 0x2E1B2138, 0x4D2C6DFC, 0x53380D13, 0x650A7354, 0x766A0ABB, 0x81C2C92E, 0x92722C85,
    0xA2BFE8A1, 0xA81A664B, 0xC24B8B70, 0xC76C51A3, 0xD192E819, 0xD6990624, 0xF40E3585, 0x106AA070,
    0x19A4C116, 0x1E376C08, 0x2748774C, 0x34B0BCB5, 0x391C0CB3, 0x4ED8AA4A, 0x5B9CCA4F, 0x682E6FF3,
    0x748F82EE, 0x78A5636F, 0x84C87814, 0x8CC70208, 0x90BEFFFA, 0xA4506CEB, 0xBEF9A3F7, 0xC67178F2,
)

# Section 5.3.3 - first 32 bits of the fractional parts of the square roots
# of the first 8 primes 2..19.
H0_256: Tuple[int, ...] = (
    0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A, 0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19,
)

# Section 4.2.3 - SHA-384, SHA-512, SHA-512/224 and SHA-512/256 share these
# eighty 64-bit words (first 64 bits of the cube roots of the first 80 primes).
K512: Tuple[int, ...] = (
    0x428A2F98D728AE22, 0x7137449123EF65CD, 0xB5C0FBCFEC4D3B2F, 0xE9B5DBA58189DBBC,
    0x3956C25BF348B538, 0x59F111F1B605D019, 0x923F82A4AF194F9B, 0xAB1C5ED5DA6D8118,
    0xD807AA98A3030242, 0x12835B0145706FBE, 0x243185BE4EE4B28C, 0x550C7DC3D5FFB4E2,
    0x72BE5D74F27B896F, 0x80DEB1FE3B1696B1, 0x9BDC06A725C71235, 0xC19BF174CF692694,
    0xE49B69C19EF14AD2, 0xEFBE4786384F25E3, 0x0FC19DC68B8CD5B5, 0x240CA1CC77AC9C65,
    0x2DE92C6F592B0275, 0x4A7484AA6EA6E483, 0x5CB0A9DCBD41FBD4, 0x76F988DA831153B5,
    0x983E5152EE66DFAB, 0xA831C66D2DB43210, 0xB00327C898FB213F, 0xBF597FC7BEEF0EE4,
    0xC6E00BF33DA88FC2, 0xD5A79147930AA725, 0x06CA6351E003826F, 0x142929670A0E6E70,
    0x27B70A8546D22FFC, 0x2E1B21385C26C926, 0x4D2C6DFC5AC42AED, 0x53380D139D95B3DF,
    0x650A73548BAF63DE, 0x766A0ABB3C77B2A8, 0x81C2C92E47EDAEE6, 0x92722C851482353B,
    0xA2BFE8A14CF10364, 0xA81A664BBC423001, 0xC24B8B70D0F89791, 0xC76C51A30654BE30,
    0xD192E819D6EF5218, 0xD69906245565A910, 0xF40E35855771202A, 0x106AA07032BBD1B8,
    0x19A4C116B8D2D0C8, 0x1E376C085141AB53, 0x2748774CDF8EEB99, 0x34B0BCB5E19B48A8,
    0x391C0CB3C5C95A63, 0x4ED8AA4AE3418ACB, 0x5B9CCA4F7763E373, 0x682E6FF3D6B2B8A3,
    0x748F82EE5DEFB2FC, 0x78A5636F43172F60, 0x84C87814A1F0AB72, 0x8CC702081A6439EC,
    0x90BEFFFA23631E28, 0xA4506CEBDE82BDE9, 0xBEF9A3F7B2C67915, 0xC67178F2E372532B,
    0xCA273ECEEA26619C, 0xD186B8C721C0C207, 0xEADA7DD6CDE0EB1E, 0xF57D4F7FEE6ED178,
    0x06F067AA72176FBA, 0x0A637DC5A2C898A6, 0x113F9804BEF90DAE, 0x1B710B35131C471B,
    0x28DB77F523047D84, 0x32CAAB7B40C72493, 0x3C9EBE0A15C9BEBC, 0x431D67C49C100D4C,
    0x4CC5D4BECB3E42B6, 0x597F299CFC657E2A, 0x5FCB6FAB3AD6FAEC, 0x6C44198C4A475817,
)

# Section 5.3.5 - first 64 bits of the square roots of the first 8 primes.
H0_512: Tuple[int, ...] = (
    0x6A09E667F3BCC908, 0xBB67AE8584CAA73B, 0x3C6EF372FE94F82B, 0xA54FF53A5F1D36F1,
    0x510E527FADE682D1, 0x9B05688C2B3E6C1F, 0x1F83D9ABFB41BD6B, 0x5BE0CD19137E2179,
)


# Section 4.1.2 (4.4)-(4.7)
SHA256 = Sha2Variant(
    name="sha256",
    word_bits=32,
    block_bytes=64,
    length_bytes=8,
    rounds=64,
    small_sigma0=(7, 18, 3),
    small_sigma1=(17, 19, 10),
    big_sigma0=(2, 13, 22),
    big_sigma1=(6, 11, 25),
    k=K256,
    initial_hash=H0_256,
)

# Section 4.1.3 (4.10)-(4.13)
SHA512 = Sha2Variant(
    name="sha512",
    word_bits=64,
    block_bytes=128,
    length_bytes=16,
    rounds=80,
    small_sigma0=(1, 8, 7),
    small_sigma1=(19, 61, 6),
    big_sigma0=(28, 34, 39),
    big_sigma1=(14, 18, 41),
    k=K512,
    initial_hash=H0_512,
)

VARIANTS: Dict[str, Sha2Variant] = {v.name: v for v in (SHA256, SHA512)}


def get_variant(name: str) -> Sha2Variant:
    """Look up a variant by name, e.g. ``"sha256"`` or ``"SHA-512"``."""
    key = name.lower().replace("-", "").replace("_", "")
    try:
        return VARIANTS[key]
    except KeyError:
        known = ", ".join(sorted(VARIANTS))
        raise ValueError(f"Unknown SHA-2 variant {name!r}, expected one of: {known}") from None
