# Maze Cipher Module
"""
The MathMaze symmetric construction:
- Solving path (per-block key schedule) derivation
- Layered block transform
- Chained message cipher with per-block one-time masks

Envelope format: [IV | block_1 | ... | block_k]
"""

from .solving_path import (
    PathLayer,
    SolvingPath,
    swap_permutation,
    derive_layer,
    generate_path,
)
from .block_cipher import (
    encrypt_layer,
    decrypt_layer,
    encrypt_block,
    decrypt_block,
)
from .chaining import (
    MazeCipher,
    pkcs_pad,
    pkcs_unpad,
    block_otp,
    encrypt_with_seed,
    decrypt_with_seed,
)

__all__ = [
    'PathLayer',
    'SolvingPath',
    'swap_permutation',
    'derive_layer',
    'generate_path',
    'encrypt_layer',
    'decrypt_layer',
    'encrypt_block',
    'decrypt_block',
    'MazeCipher',
    'pkcs_pad',
    'pkcs_unpad',
    'block_otp',
    'encrypt_with_seed',
    'decrypt_with_seed',
]
