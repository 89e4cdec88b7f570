"""
MathMaze - experimental layered cipher built from primitive operations.

Components:
- core_crypto: hash-counter PRF, chaos byte map, GF(2^8) arithmetic
- maze: per-block solving paths, layered block transform, chained cipher
- trapdoor: hash-based seed encapsulation
- messaging: public-key encrypt/decrypt

This is an EXPERIMENTAL construction with no security proof, no
authentication and no side-channel resistance. Do not use it to protect
real data.
"""

import logging

from .config import CipherConfig, DEFAULT_CONFIG
from .errors import (
    MathMazeError,
    InvalidFieldOperandError,
    InvalidPaddingError,
    MalformedCiphertextError,
    EntropyUnavailableError,
)
from .maze.chaining import MazeCipher, encrypt_with_seed, decrypt_with_seed
from .trapdoor.trapdoor import TrapdoorKeyPair, generate_keypair
from .messaging.hybrid import encrypt, decrypt

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"

__all__ = [
    'CipherConfig',
    'DEFAULT_CONFIG',
    'MathMazeError',
    'InvalidFieldOperandError',
    'InvalidPaddingError',
    'MalformedCiphertextError',
    'EntropyUnavailableError',
    'MazeCipher',
    'encrypt_with_seed',
    'decrypt_with_seed',
    'TrapdoorKeyPair',
    'generate_keypair',
    'encrypt',
    'decrypt',
]
