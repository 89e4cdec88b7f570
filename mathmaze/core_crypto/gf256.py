"""
GF(2^8) Arithmetic (Rijndael field)

Multiplication and multiplicative inverse over GF(2^8) reduced by the
Rijndael polynomial x^8 + x^4 + x^3 + x + 1 (0x11B). Used by the block
transform as its per-byte diffusion multiplier.

Components:
- gf_mul: peasant (shift-and-add) multiplication
- gf_inv: inverse as a^254, since every non-zero element has order dividing 255
- rotl8 / rotr8: 8-bit rotations used alongside the field step
"""

from functools import lru_cache

from ..errors import InvalidFieldOperandError


REDUCTION = 0x1B    # Low byte of the Rijndael polynomial


def gf_mul(a: int, b: int) -> int:
    """
    Multiply two bytes in GF(2^8).

    Args:
        a: First operand (0-255)
        b: Second operand (0-255)

    Returns:
        Product in GF(2^8)
    """
    result = 0
    for _ in range(8):
        if b & 1:
            result ^= a
        hi = a & 0x80
        a = (a << 1) & 0xFF
        if hi:
            a ^= REDUCTION
        b >>= 1
    return result


@lru_cache(maxsize=256)
def gf_inv(a: int) -> int:
    """
    Multiplicative inverse in GF(2^8).

    Computed as 254 successive multiplications by `a` starting from 1.

    Raises:
        InvalidFieldOperandError: If a is zero
    """
    if a == 0:
        raise InvalidFieldOperandError("No inverse for zero")
    res = 1
    for _ in range(254):
        res = gf_mul(res, a)
    return res


def rotl8(val: int, shift: int) -> int:
    """Rotate a byte left by shift bits (1-7)."""
    return ((val << shift) | (val >> (8 - shift))) & 0xFF


def rotr8(val: int, shift: int) -> int:
    """Rotate a byte right by shift bits (1-7)."""
    return ((val >> shift) | (val << (8 - shift))) & 0xFF
