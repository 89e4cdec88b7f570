# Core Cryptography Module
"""
Primitive operations shared by every MathMaze stage:
- Hash-counter deterministic byte generator (PRF)
- Chaos byte transform
- GF(2^8) multiplication and inversion
"""

from .prf import (
    deterministic_bytes,
    seed_to_bytes,
    bytes_to_seed,
    xor_bytes,
    random_bytes,
)
from .chaos import chaos_forward, chaos_backward
from .gf256 import gf_mul, gf_inv, rotl8, rotr8

__all__ = [
    'deterministic_bytes',
    'seed_to_bytes',
    'bytes_to_seed',
    'xor_bytes',
    'random_bytes',
    'chaos_forward',
    'chaos_backward',
    'gf_mul',
    'gf_inv',
    'rotl8',
    'rotr8',
]
