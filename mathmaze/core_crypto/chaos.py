"""
Chaos Transform

A seed-parameterized invertible byte map used as the final non-linear
stage of every layer:

    forward:  v = ((v XOR s) * 5 + s) mod 256
    backward: v = (((v - s) mod 256) * 205 mod 256) XOR s

205 is the inverse of 5 modulo 256, so one backward step undoes one
forward step with the same seed. The seed is constant across iterations,
so k backward steps undo k forward steps.
"""

MULT = 5
INV_MULT = 205      # MULT * INV_MULT == 1 (mod 256)


def chaos_forward(val: int, seed: int, iterations: int) -> int:
    """
    Apply the forward chaos map `iterations` times.

    Args:
        val: Byte value (0-255)
        seed: Byte seed (0-255)
        iterations: Number of rounds (0 is the identity)

    Returns:
        Transformed byte
    """
    for _ in range(iterations):
        val = (((val ^ seed) * MULT) + seed) & 0xFF
    return val


def chaos_backward(val: int, seed: int, iterations: int) -> int:
    """Undo chaos_forward with the same seed and iteration count."""
    for _ in range(iterations):
        tmp = (val - seed) & 0xFF
        tmp = (tmp * INV_MULT) & 0xFF
        val = tmp ^ seed
    return val
