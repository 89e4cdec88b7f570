"""
Layered Block Transform

Applies a solving path to one N-byte block. Each layer computes a new
block position by position:

    val = block[perm[i]] ^ xor[i]
    val = (val + ((3 * out[i-1] + out[i-2]) ^ chaos[i])) mod 256
    val = gf_mul(val, mult[i])
    val = sbox[val]
    val = rotl8(val, rot[i])
    out[i] = chaos_forward(val, chaos[i], iterations)

out[i-1] and out[i-2] are this layer's own outputs (0 before the start),
so every layer is evaluated strictly left to right. Decryption walks the
layers in reverse and reads the same neighbours from its input, which is
exactly the forward pass's output for that layer.
"""

from typing import List

from ..config import CipherConfig, DEFAULT_CONFIG
from ..core_crypto.chaos import chaos_forward, chaos_backward
from ..core_crypto.gf256 import gf_mul, rotl8, rotr8
from .solving_path import SolvingPath, PathLayer


def _diffusion(out: List[int], i: int, chaos_seed: int) -> int:
    prev1 = out[i - 1] if i > 0 else 0
    prev2 = out[i - 2] if i > 1 else 0
    return (prev1 * 3 + prev2) ^ chaos_seed


def _check_block(block: bytes, path: SolvingPath):
    if len(block) != path.block_size:
        raise ValueError(
            f"Block must be {path.block_size} bytes, got {len(block)}"
        )


def encrypt_layer(data: List[int], layer: PathLayer, iterations: int) -> List[int]:
    """Run one forward layer over a block."""
    n = len(data)
    out = [0] * n
    for i in range(n):
        val = data[layer.permutation[i]]
        val ^= layer.xor_mask[i]
        val = (val + _diffusion(out, i, layer.chaos_seed[i])) & 0xFF
        val = gf_mul(val, layer.field_multiplier[i])
        val = layer.sbox[val]
        val = rotl8(val, layer.rotation[i])
        out[i] = chaos_forward(val, layer.chaos_seed[i], iterations)
    return out


def decrypt_layer(data: List[int], layer: PathLayer, iterations: int) -> List[int]:
    """Invert one layer; the result is the layer's original input."""
    n = len(data)
    inv_sbox = layer.inverse_sbox()
    inv_mult = layer.inverse_multipliers()
    prev_layer = [0] * n
    for i in range(n):
        val = chaos_backward(data[i], layer.chaos_seed[i], iterations)
        val = rotr8(val, layer.rotation[i])
        val = inv_sbox[val]
        val = gf_mul(val, inv_mult[i])
        val = (val - _diffusion(data, i, layer.chaos_seed[i])) & 0xFF
        val ^= layer.xor_mask[i]
        prev_layer[layer.permutation[i]] = val
    return prev_layer


def encrypt_block(block: bytes, path: SolvingPath,
                  config: CipherConfig = DEFAULT_CONFIG) -> bytes:
    """
    Encrypt a single block with a solving path.

    Args:
        block: Exactly path.block_size bytes
        path: Solving path for this block
        config: Supplies the chaos iteration count

    Returns:
        Transformed block of the same size
    """
    _check_block(block, path)
    data = list(block)
    for layer in path.layers:
        data = encrypt_layer(data, layer, config.chaos_iterations)
    return bytes(data)


def decrypt_block(block: bytes, path: SolvingPath,
                  config: CipherConfig = DEFAULT_CONFIG) -> bytes:
    """Inverse of encrypt_block for the same path and config."""
    _check_block(block, path)
    data = list(block)
    for layer in reversed(path.layers):
        data = decrypt_layer(data, layer, config.chaos_iterations)
    return bytes(data)
